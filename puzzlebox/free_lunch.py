"""Cheapest way to pay for a run of lunches with earned coupons."""

import math

COUPON_THRESHOLD = 100


def min_lunch_cost(prices):
    """Return the least total paid for the lunches in ``prices``.

    Every lunch dearer than 100 earns a coupon; a coupon pays for one later
    lunch in full.
    """
    prices = list(prices)
    days = len(prices)
    previous = [0] + [math.inf] * days
    for day, price in enumerate(prices, start=1):
        earned = 1 if price > COUPON_THRESHOLD else 0
        current = []
        for coupons in range(days + 1):
            paid = previous[coupons - earned] + price if coupons >= earned else math.inf
            free = previous[coupons + 1] if coupons < days and day > 1 else math.inf
            current.append(min(paid, free))
        previous = current
    return int(min(previous))