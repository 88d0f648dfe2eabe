"""Projected occurrence model produced by recurrence expansion."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from backoffice.models.account import BaseAccount
from backoffice.models.enums import AccountKind, AccountStatus, RecurringPeriod


@dataclass(frozen=True)
class ProjectedOccurrence:
    """One computed instance of an account's due date.

    Carries every field of the originating ``BaseAccount`` plus the
    occurrence-specific ones. Never persisted.

    - ``occurrence_id``: ``"{account_id}#{index}"``, index 0 is the anchor
    - ``original_id``: None for the anchor, the base account id for
      follow-ons, so consumers can leave projections out of totals
    """

    account_id: str
    kind: AccountKind
    description: str
    amount: Decimal
    due_date: date
    status: AccountStatus
    is_recurring: bool
    recurring_period: RecurringPeriod | str | None
    counterparty_name: str
    category: str | None
    company_id: str | None
    occurrence_due_date: date
    occurrence_id: str
    original_id: str | None
    index: int = 0

    @classmethod
    def from_account(
        cls,
        account: BaseAccount,
        occurrence_due_date: date,
        index: int,
        status: AccountStatus,
    ) -> "ProjectedOccurrence":
        """Build the ``index``-th occurrence of ``account``."""
        return cls(
            account_id=account.account_id,
            kind=account.kind,
            description=account.description,
            amount=account.amount,
            due_date=account.due_date,
            status=status,
            is_recurring=account.is_recurring,
            recurring_period=account.recurring_period,
            counterparty_name=account.counterparty_name,
            category=account.category,
            company_id=account.company_id,
            occurrence_due_date=occurrence_due_date,
            occurrence_id=f"{account.account_id}#{index}",
            original_id=None if index == 0 else account.account_id,
            index=index,
        )

    @property
    def is_projection(self) -> bool:
        return self.original_id is not None

    @property
    def title(self) -> str:
        return f"{self.counterparty_name} - {self.description}"
