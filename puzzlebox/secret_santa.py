"""Repair a secret-santa assignment so the gifts form one chain."""

from collections import Counter


def _check(assignment):
    size = len(assignment)
    for target in assignment:
        if not 1 <= target <= size:
            raise ValueError(f"recipient {target} is outside 1..{size}")


def is_single_cycle(assignment):
    """Return whether following the 1-based recipients visits everyone in one loop."""
    assignment = list(assignment)
    _check(assignment)
    size = len(assignment)
    visited = [False] * size
    current = 0
    steps = 0
    while size and not visited[current] and steps < size:
        visited[current] = True
        current = assignment[current] - 1
        steps += 1
    return current == 0 and steps == size and all(visited)


def find_fix(assignment):
    """Return ``(giver, recipient)`` whose redirection makes one loop, or ``None``.

    One person receives two gifts and one receives none; one of the givers to
    the doubly gifted person is redirected to the one left out.
    """
    assignment = list(assignment)
    _check(assignment)
    received = Counter(assignment)
    people = range(1, len(assignment) + 1)
    no_gift = next((p for p in reversed(people) if received[p] == 0), None)
    two_gifts = next((p for p in reversed(people) if received[p] == 2), None)
    if no_gift is None or two_gifts is None:
        return None
    for giver, target in enumerate(assignment, start=1):
        if target != two_gifts:
            continue
        modified = list(assignment)
        modified[giver - 1] = no_gift
        if is_single_cycle(modified):
            return giver, no_gift
    return None