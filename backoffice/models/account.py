"""Stored account model for payables and receivables."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from backoffice.models.enums import AccountKind, AccountStatus, RecurringPeriod


@dataclass(frozen=True)
class BaseAccount:
    """Account payable or receivable as kept by the persistence layer.

    The recurrence core reads these and never modifies them. Descriptive
    fields (counterparty, description, category, company) are carried
    through to every projected occurrence untouched.

    ``recurring_period`` keeps unrecognised strings as-is so that the
    expander can report them instead of losing them at load time.
    """

    account_id: str
    kind: AccountKind
    description: str
    amount: Decimal
    due_date: date
    status: AccountStatus = AccountStatus.OPEN
    is_recurring: bool = False
    recurring_period: RecurringPeriod | str | None = None
    counterparty_name: str = ""  # supplier for payables, client for receivables
    category: str | None = None
    company_id: str | None = None

    @property
    def title(self) -> str:
        return f"{self.counterparty_name} - {self.description}"

    @property
    def is_settled(self) -> bool:
        return AccountStatus(self.status).is_settled
