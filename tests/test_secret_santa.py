import pytest

from puzzlebox.secret_santa import find_fix, is_single_cycle


@pytest.mark.parametrize("assignment", [[2, 3, 1], [3, 1, 2], [2, 1], [1]])
def test_single_cycles(assignment):
    assert is_single_cycle(assignment) is True


@pytest.mark.parametrize("assignment", [[1, 2, 3], [2, 1, 3], [2, 1, 4, 3], [1, 3, 1]])
def test_not_single_cycles(assignment):
    assert is_single_cycle(assignment) is False


def test_worked_example():
    assert find_fix([1, 3, 1]) == (1, 2)


def test_already_valid_has_no_fix():
    assert find_fix([2, 3, 1]) is None


@pytest.mark.parametrize("assignment", [[1, 3, 1], [2, 2, 4, 1], [3, 3, 4, 5, 1]])
def test_fix_yields_single_cycle(assignment):
    fix = find_fix(assignment)
    assert fix is not None
    giver, recipient = fix
    assert assignment[giver - 1] != recipient
    repaired = list(assignment)
    repaired[giver - 1] = recipient
    assert is_single_cycle(repaired)


def test_out_of_range_recipient_is_rejected():
    with pytest.raises(ValueError):
        find_fix([1, 5, 2])