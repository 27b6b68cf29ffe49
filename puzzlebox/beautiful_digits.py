"""Count numbers written with a single repeated digit."""


def count_beautiful(low, high):
    """Return how many numbers in ``[low, high]`` consist of one repeated digit."""
    if low < 10 and high < 10:
        return high - low + 1
    result = 9 - low + 1 if low < 10 else 0
    for digit in range(1, 10):
        value = digit
        while value * 10 + digit <= high:
            value = value * 10 + digit
            if value >= low:
                result += 1
    return result