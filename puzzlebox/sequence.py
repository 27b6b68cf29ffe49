"""Build a sequence by placing each number left or right of the previous one."""


def build_sequence(directions):
    """Return the sequence grown from ``[0]`` by the ``directions`` string.

    For the i-th character, number i goes right of i-1 on ``R`` and left of
    it on anything else.
    """
    sequence = [0]
    position = 0
    for number, direction in enumerate(directions, start=1):
        if direction == "R":
            position += 1
        sequence.insert(position, number)
    return sequence