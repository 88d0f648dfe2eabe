"""Calendar stepping by whole months and years.

Days that do not exist in the target month are clamped to its last day,
so Jan 31 + 1 month is Feb 28 (or Feb 29) and never rolls into March.
"""

from datetime import date

from dateutil.relativedelta import relativedelta


def last_day_of_month(year: int, month: int) -> int:
    """Return the number of days in ``month`` of ``year``."""
    return (date(year, month, 1) + relativedelta(day=31)).day


def add_months(d: date, n: int) -> date:
    """Return the date ``n`` months after ``d``, clamping the day.

    Parameters
    ----------
    d : date
        Start date.
    n : int
        Number of months to step forward (non-negative).

    Returns
    -------
    date
        Stepped date.
    """
    return d + relativedelta(months=n)


def add_years(d: date, n: int) -> date:
    """Return the date ``n`` years after ``d``; Feb 29 clamps to Feb 28."""
    return d + relativedelta(years=n)
