"""Count occurrences of the triple "abc" in a string."""


def count_abc(text):
    """Return how many times "abc" is found scanning ``text`` left to right.

    After a partial match fails, scanning resumes past the character that
    broke it.
    """
    size = len(text)
    if size < 3:
        return 0
    count = 0
    i = 0
    while i < size:
        if text[i] != "a":
            i += 1
            continue
        b_at = i + 1
        if b_at >= size:
            break
        if text[b_at] != "b":
            i = b_at + 1
            continue
        c_at = b_at + 1
        if c_at >= size:
            break
        if text[c_at] == "c":
            count += 1
        i = c_at + 1
    return count