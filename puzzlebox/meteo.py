"""Work out the missed diary day of a weekly note keeper."""

DAYS_IN_WEEK = 7


def expected_note_day(today, last_note):
    """Return the day of the month last week's note should have been made.

    ``today`` is the current Sunday and ``last_note`` the day of the note two
    weeks ago; last Sunday is one week before today whatever the month.
    """
    days_between = 2 * DAYS_IN_WEEK - today + last_note
    return last_note + DAYS_IN_WEEK - days_between