"""Domain models for back-office accounts."""

from backoffice.models.account import BaseAccount
from backoffice.models.enums import (
    PERIOD_MONTHS,
    AccountKind,
    AccountStatus,
    RecurringPeriod,
)
from backoffice.models.occurrence import ProjectedOccurrence

__all__ = [
    "PERIOD_MONTHS",
    "AccountKind",
    "AccountStatus",
    "BaseAccount",
    "ProjectedOccurrence",
    "RecurringPeriod",
]
