"""Best mood reachable on a staircase of memories."""


def max_mood(steps, skips):
    """Return the mood gathered climbing ``steps`` with ``skips`` free passes.

    Positive steps are always taken; a negative step may be jumped over when
    the next one is no worse, or passed over entirely by spending a skip.
    """
    if skips < 0:
        raise ValueError("skips cannot be negative")
    steps = list(steps)
    size = len(steps)
    total = 0
    i = 0
    while i < size:
        if steps[i] >= 0:
            total += steps[i]
        elif not skips:
            if i + 1 < size and steps[i] <= steps[i + 1]:
                i += 1
            total += steps[i]
        else:
            while i + 1 < size and steps[i] <= 0:
                i += 1
            skips -= 1
            i -= 1
        i += 1
    return total