"""Largest increase of a sum by turning a limited number of digits into nines."""

import heapq


def _digit_gains(number):
    place = 1
    while number > 0:
        gain = (9 - number % 10) * place
        if gain:
            yield gain
        number //= 10
        place *= 10


def max_gain(numbers, moves):
    """Return the largest increase of ``sum(numbers)`` after ``moves`` digit changes.

    One move turns one digit into a nine. A negative ``moves`` allows any
    number of changes. Nothing is gained when the first number is zero.
    """
    numbers = list(numbers)
    if moves == 0 or not numbers or numbers[0] == 0:
        return 0
    gains = [gain for number in numbers for gain in _digit_gains(number)]
    if moves < 0:
        return sum(gains)
    return sum(heapq.nlargest(moves, gains))