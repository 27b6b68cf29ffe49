"""Check whether every digit of a number is even."""


def is_true_even(n):
    """Return whether all decimal digits of ``n`` are even.

    Zero and negative numbers have no digits to check and count as true even.
    """
    while n > 0:
        if n % 10 % 2:
            return False
        n //= 10
    return True