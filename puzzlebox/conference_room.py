"""Find the point of a room that coincides with its copy on a plan lying in the room."""

import math
from typing import NamedTuple


class Point(NamedTuple):
    """A point on the plane."""

    x: float
    y: float

    def __str__(self):
        return f"{self.x:g} {self.y:g}"


def locate_point(width, height, plan):
    """Return the room point that lies under its own image on the plan.

    ``width`` and ``height`` are the room's sides; ``plan`` holds the plan's
    corners, of which the first two span the plan's diagonal.
    """
    corners = [Point(*corner) for corner in plan]
    if len(corners) < 2:
        raise ValueError("the plan needs at least two corners")
    room_diagonal = math.sqrt(width * width + height * height)
    if room_diagonal == 0:
        raise ValueError("the room has no size")

    first, second = corners[0], corners[1]
    dx = second.x - first.x
    dy = second.y - first.y
    scale = math.sqrt(dx**2 + dy**2) / room_diagonal
    angle = math.atan2(dy, dx)
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    denominator = 1 - scale * cos_a
    if denominator == 0:
        raise ValueError("the plan is not a reduced copy of the room")

    x, y = first
    return Point(
        (x - scale * (x * cos_a + y * sin_a)) / denominator,
        (y + scale * (x * sin_a - y * cos_a)) / denominator,
    )