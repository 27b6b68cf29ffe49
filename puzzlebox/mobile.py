"""Monthly phone bill with a fixed allowance and a charge for extra use."""


def phone_bill(base, included, price, used):
    """Return the bill for ``used`` units on a plan.

    The plan costs ``base`` and includes ``included`` units. Each unit past
    the allowance costs ``price``.
    """
    if used > included:
        return base + (used - included) * price
    return base