"""Recurring account expansion."""

from backoffice.recurrence.dates import add_months, add_years, last_day_of_month
from backoffice.recurrence.expander import (
    RecurrenceExpander,
    expand,
    expand_all,
    occurrence_status,
)

__all__ = [
    "RecurrenceExpander",
    "add_months",
    "add_years",
    "expand",
    "expand_all",
    "last_day_of_month",
    "occurrence_status",
]
