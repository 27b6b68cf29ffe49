"""Number of rounds of halving needed to cut a pie into single pieces."""


def cut_count(n):
    """Return how many halving rounds reduce ``n`` to a single piece.

    Each round splits the current size in two, keeping the larger half.
    """
    if n < 0:
        raise ValueError("the pie size cannot be negative")
    rounds = 0
    while n // 2:
        n = n // 2 + n % 2
        rounds += 1
    return rounds