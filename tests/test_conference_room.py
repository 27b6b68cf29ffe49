import pytest

from puzzlebox.conference_room import Point, locate_point


def test_unrotated_plan_fixes_its_first_corner():
    plan = [Point(2, 3), Point(7, 3), Point(7, 4), Point(2, 4)]
    result = locate_point(10, 0, plan)
    assert result.x == pytest.approx(2)
    assert result.y == pytest.approx(3)


def test_plan_anchored_at_origin_gives_origin():
    plan = [Point(0, 0), Point(3, 4), Point(0, 4), Point(3, 0)]
    assert locate_point(20, 20, plan) == Point(0.0, 0.0)


def test_accepts_plain_pairs():
    pairs = [(2, 3), (7, 3), (7, 4), (2, 4)]
    points = [Point(*pair) for pair in pairs]
    assert locate_point(10, 0, pairs) == locate_point(10, 0, points)


def test_full_size_plan_without_rotation_is_rejected():
    with pytest.raises(ValueError):
        locate_point(3, 4, [Point(0, 0), Point(5, 0), Point(5, 1), Point(0, 1)])


def test_plan_needs_two_corners():
    with pytest.raises(ValueError):
        locate_point(3, 4, [Point(1, 1)])


def test_room_without_size_is_rejected():
    with pytest.raises(ValueError):
        locate_point(0, 0, [Point(0, 0), Point(1, 1)])


def test_point_prints_both_coordinates():
    assert str(Point(1.5, 2)) == "1.5 2"