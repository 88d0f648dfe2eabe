"""Enumeration types for back-office accounts."""

from enum import Enum


class AccountKind(str, Enum):
    PAYABLE = "payable"
    RECEIVABLE = "receivable"


class AccountStatus(str, Enum):
    OPEN = "open"
    OVERDUE = "overdue"
    PAID = "paid"
    RECEIVED = "received"

    @property
    def is_settled(self) -> bool:
        return self in (AccountStatus.PAID, AccountStatus.RECEIVED)


class RecurringPeriod(str, Enum):
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    SEMIANNUAL = "semiannual"
    YEARLY = "yearly"

    @classmethod
    def parse(cls, value: "RecurringPeriod | str | None") -> "RecurringPeriod | None":
        """Resolve a stored period value, returning None when unrecognised.

        Accepts enum members, canonical values and the Portuguese labels
        written by older forms (``mensal``, ``trimestral``, ``semestral``,
        ``anual``).
        """
        if value is None:
            return None
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        key = value.strip().lower()
        try:
            return cls(key)
        except ValueError:
            return _LEGACY_PERIOD_LABELS.get(key)


_LEGACY_PERIOD_LABELS = {
    "mensal": RecurringPeriod.MONTHLY,
    "trimestral": RecurringPeriod.QUARTERLY,
    "semestral": RecurringPeriod.SEMIANNUAL,
    "anual": RecurringPeriod.YEARLY,
}

PERIOD_MONTHS: dict[RecurringPeriod, int] = {
    RecurringPeriod.MONTHLY: 1,
    RecurringPeriod.QUARTERLY: 3,
    RecurringPeriod.SEMIANNUAL: 6,
    RecurringPeriod.YEARLY: 12,
}
