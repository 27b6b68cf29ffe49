"""Find the one swap that makes a row alternate odd and even."""


def _fits(value, index):
    # Even positions want odd values, odd positions want even values.
    return bool(value % 2) != bool(index % 2)


def find_swap(heights):
    """Return the 1-based positions to swap so the row alternates, or ``None``.

    The row alternates when odd values stand at even 0-based positions and
    even values at odd ones. A fix exists only when exactly two positions are
    out of place.
    """
    misplaced = []
    for index, value in enumerate(heights):
        if not _fits(value, index):
            misplaced.append(index)
            if len(misplaced) > 2:
                return None
    if len(misplaced) != 2:
        return None
    first, second = misplaced
    return first + 1, second + 1