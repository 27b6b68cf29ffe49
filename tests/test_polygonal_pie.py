import pytest

from puzzlebox.polygonal_pie import dividing_x, find_intersections, left_area, polygon_area

SQUARE = [(0, 2), (0, 0), (2, 0), (2, 2)]
RECTANGLE = [(0, 3), (0, 0), (4, 0), (4, 3)]


def test_square_area():
    assert polygon_area(SQUARE) == pytest.approx(4.0)


def test_area_ignores_orientation():
    assert polygon_area(list(reversed(RECTANGLE))) == pytest.approx(polygon_area(RECTANGLE))


def test_triangle_area():
    assert polygon_area([(0, 0), (4, 0), (0, 3)]) == pytest.approx(6.0)


def test_intersections_sorted_by_y():
    crossings = find_intersections(SQUARE, 1)
    assert [(p.x, p.y) for p in crossings] == [(1, 0), (1, 2)]


def test_vertical_edge_on_line_is_skipped():
    crossings = find_intersections(SQUARE, 0)
    assert [(p.x, p.y) for p in crossings] == [(0, 0), (0, 2)]


def test_line_right_of_polygon_gives_whole_area():
    assert left_area(SQUARE, 10) == pytest.approx(polygon_area(SQUARE))


def test_line_left_of_polygon_gives_nothing():
    assert left_area(SQUARE, -1) == 0.0


@pytest.mark.parametrize("x", [0.5, 1.0, 1.5])
def test_left_area_grows_with_x(x):
    assert left_area(SQUARE, x) == pytest.approx(2 * x)


@pytest.mark.parametrize("target", [3.0, 6.0, 9.0])
def test_dividing_line_meets_target(target):
    x = dividing_x(RECTANGLE, target)
    assert 0 <= x <= 4
    assert left_area(RECTANGLE, x) == pytest.approx(target, abs=1e-5)


def test_dividing_halves_polygon():
    x = dividing_x(RECTANGLE, polygon_area(RECTANGLE) / 2.0)
    assert left_area(RECTANGLE, x) == pytest.approx(polygon_area(RECTANGLE) / 2.0, abs=1e-5)


def test_empty_polygon_is_rejected():
    with pytest.raises(ValueError):
        dividing_x([], 1.0)