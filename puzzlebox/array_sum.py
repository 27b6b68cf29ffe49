"""Decide whether known range sums are enough to find an array's total."""

from collections import deque


def min_clues(clues, length):
    """Return the fewest clues needed to learn the sum of an array of ``length`` items.

    Each clue is an inclusive ``(first, last)`` pair of 1-based positions whose
    sum is known. Returns ``None`` when the clues cannot give the total.
    """
    ranges = sorted((int(first), int(last)) for first, last in clues)
    starts_at_one = any(first == 1 for first, _ in ranges)
    ends_at_length = any(last == length for _, last in ranges)
    if not starts_at_one or not ends_at_length:
        return None

    pending = deque(ranges)
    count = 0
    covered = 1
    while covered <= length:
        reach = -1
        while pending and pending[0][0] <= covered:
            reach = max(reach, pending.popleft()[1])
        if reach < covered:
            return None
        count += 1
        covered = reach + 1
    return count