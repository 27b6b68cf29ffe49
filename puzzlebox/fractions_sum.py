"""Add two fractions and reduce the result."""

import math


def add_fractions(a, b, c, d):
    """Return ``a/b + c/d`` as a ``(numerator, denominator)`` pair.

    The pair is reduced when the numerator is greater than one.
    """
    numerator = a * d + c * b
    denominator = b * d
    if numerator > 1:
        divisor = math.gcd(numerator, denominator)
        numerator //= divisor
        denominator //= divisor
    return numerator, denominator