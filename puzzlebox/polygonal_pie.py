"""Find a vertical line that cuts a polygon into two parts of equal area."""

import math

from puzzlebox.conference_room import Point


def polygon_area(polygon):
    """Return the area of a simple polygon given by its vertices in order."""
    points = [Point(*p) for p in polygon]
    twice_area = sum(
        a.x * b.y - a.y * b.x for a, b in zip(points, points[1:] + points[:1])
    )
    return abs(twice_area) / 2.0


def find_intersections(polygon, x):
    """Return the points where the line at ``x`` crosses the polygon's edges, by y."""
    points = [Point(*p) for p in polygon]
    crossings = []
    for a, b in zip(points, points[1:] + points[:1]):
        if a.x == b.x:
            continue
        if min(a.x, b.x) <= x <= max(a.x, b.x):
            t = (x - a.x) / (b.x - a.x)
            crossings.append(Point(x, a.y + t * (b.y - a.y)))
    crossings.sort(key=lambda p: p.y)
    return crossings


def left_area(polygon, x):
    """Return the area of the polygon's part to the left of the line at ``x``.

    The part is made of the vertices left of the line, in order, followed by
    the crossing points sorted by y.
    """
    points = [Point(*p) for p in polygon]
    if not points:
        return 0.0
    crossings = find_intersections(points, x)
    if not crossings:
        return polygon_area(points) if points[0].x < x else 0.0
    part = [p for p in points if p.x <= x] + crossings
    return polygon_area(part)


def dividing_x(polygon, target_area, precision=1e-6):
    """Return the x whose left part has ``target_area``, by bisection.

    Stops early when a line is within ``precision`` of the target, and
    otherwise returns the best line met once the interval is that narrow.
    """
    points = [Point(*p) for p in polygon]
    if not points:
        raise ValueError("the polygon has no vertices")
    low = min(p.x for p in points)
    high = max(p.x for p in points)
    best_diff = math.inf
    best_x = low
    while high - low > precision:
        mid = (low + high) / 2.0
        area = left_area(points, mid)
        diff = abs(area - target_area)
        if diff < precision:
            return mid
        if diff < best_diff:
            best_diff = diff
            best_x = mid
        if area < target_area:
            low = mid
        else:
            high = mid
    return best_x