"""Shortest walk along a staircase visiting everyone, with one person leaving early."""


def travel_distance(floors, time_limit, leaving):
    """Return the distance walked to meet everyone on the ascending ``floors``.

    ``leaving`` is the 1-based position of the person who must be met within
    ``time_limit`` floors of walking.
    """
    floors = list(floors)
    if not floors:
        raise ValueError("no floors given")
    if not 1 <= leaving <= len(floors):
        raise ValueError(f"position {leaving} is outside 1..{len(floors)}")

    lowest, highest = floors[0], floors[-1]
    target = floors[leaving - 1]
    span = highest - lowest
    if (
        target == lowest
        or time_limit >= target - lowest
        or target == highest
        or time_limit >= highest - target
    ):
        return span
    if target - lowest < highest - target:
        return target - lowest + span
    return highest - target + span