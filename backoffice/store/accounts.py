"""In-memory account store and stored-row normalization."""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, Mapping

from backoffice.dashboard import filter_by_range
from backoffice.exceptions import (
    AccountNotFoundError,
    DuplicateAccountError,
    InvalidAccountError,
)
from backoffice.models import (
    AccountKind,
    AccountStatus,
    BaseAccount,
    ProjectedOccurrence,
    RecurringPeriod,
)
from backoffice.recurrence.expander import RecurrenceExpander

logger = logging.getLogger(__name__)

_TRUE_LABELS = {"true", "sim", "yes", "1"}

_COUNTERPARTY_COLUMNS = {
    AccountKind.PAYABLE: "supplier_name",
    AccountKind.RECEIVABLE: "client_name",
}


def _parse_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        # Timestamps come back as "2024-01-31T00:00:00+00:00"
        return date.fromisoformat(value[:10])
    raise ValueError(f"unsupported date value {value!r}")


def _parse_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_LABELS
    return bool(value)


def account_from_row(row: Mapping[str, Any], kind: AccountKind | str) -> BaseAccount:
    """Build a BaseAccount from an ``accounts_payable``/``accounts_receivable`` row.

    Parameters
    ----------
    row : Mapping[str, Any]
        Stored row with ``id``, ``description``, ``amount``, ``due_date``,
        ``status``, ``is_recurring``, ``recurring_period`` and the
        kind-specific ``supplier_name`` or ``client_name``.
    kind : AccountKind | str
        Which table the row came from.

    Returns
    -------
    BaseAccount
        Normalized account.

    Raises
    ------
    InvalidAccountError
        If the row is not a mapping, the id is missing, the due date
        cannot be parsed or the amount is not a non-negative number.
    """
    kind = AccountKind(kind)
    if not isinstance(row, Mapping):
        raise InvalidAccountError(f"{kind.value} row is not an object: {row!r}")
    account_id = row.get("id")
    if not account_id:
        raise InvalidAccountError(f"{kind.value} row without id: {dict(row)!r}")

    try:
        due_date = _parse_date(row.get("due_date"))
    except ValueError as exc:
        raise InvalidAccountError(f"Account {account_id} has invalid due_date: {exc}") from exc

    try:
        amount = Decimal(str(row.get("amount", "0")))
    except InvalidOperation as exc:
        raise InvalidAccountError(
            f"Account {account_id} has invalid amount {row.get('amount')!r}"
        ) from exc
    if not amount.is_finite() or amount < 0:
        raise InvalidAccountError(f"Account {account_id} has invalid amount {amount}")

    raw_status = row.get("status") or AccountStatus.OPEN.value
    try:
        status = AccountStatus(str(raw_status).lower())
    except ValueError as exc:
        raise InvalidAccountError(
            f"Account {account_id} has unknown status {raw_status!r}"
        ) from exc

    is_recurring = _parse_bool(row.get("is_recurring", False))
    raw_period = row.get("recurring_period") or None
    period = RecurringPeriod.parse(raw_period)

    return BaseAccount(
        account_id=str(account_id),
        kind=kind,
        description=row.get("description") or "",
        amount=amount,
        due_date=due_date,
        status=status,
        is_recurring=is_recurring,
        recurring_period=period if period is not None else raw_period,
        counterparty_name=row.get(_COUNTERPARTY_COLUMNS[kind]) or "",
        category=row.get("category"),
        company_id=row.get("company_id"),
    )


@dataclass
class AccountStore:
    """In-memory store of payables and receivables keyed by account id."""

    accounts: dict[str, BaseAccount] = field(default_factory=dict)

    # Relationship index
    _company_accounts: dict[str | None, list[str]] = field(default_factory=dict)

    def add_account(self, account: BaseAccount) -> None:
        """Add an account to the store."""
        if account.account_id in self.accounts:
            raise DuplicateAccountError(f"Account {account.account_id} already exists")

        self.accounts[account.account_id] = account
        self._company_accounts.setdefault(account.company_id, []).append(account.account_id)

    def get_account(self, account_id: str) -> BaseAccount:
        """Return the account with ``account_id``."""
        try:
            return self.accounts[account_id]
        except KeyError:
            raise AccountNotFoundError(f"Account {account_id} not found") from None

    def remove_account(self, account_id: str) -> BaseAccount:
        """Remove and return the account with ``account_id``."""
        account = self.get_account(account_id)
        del self.accounts[account_id]
        self._company_accounts[account.company_id].remove(account_id)
        return account

    def load_rows(
        self, rows: Iterable[Mapping[str, Any]], kind: AccountKind | str
    ) -> int:
        """Normalize stored rows of one kind and add them.

        Returns
        -------
        int
            Number of accounts added.
        """
        count = 0
        for row in rows:
            self.add_account(account_from_row(row, kind))
            count += 1
        logger.info("Loaded %d %s accounts", count, AccountKind(kind).value)
        return count

    def all_accounts(self) -> list[BaseAccount]:
        """All accounts ordered by due date."""
        return sorted(self.accounts.values(), key=lambda a: (a.due_date, a.account_id))

    def payables(self) -> list[BaseAccount]:
        return [a for a in self.all_accounts() if a.kind == AccountKind.PAYABLE]

    def receivables(self) -> list[BaseAccount]:
        return [a for a in self.all_accounts() if a.kind == AccountKind.RECEIVABLE]

    def for_company(self, company_id: str | None) -> list[BaseAccount]:
        """Accounts belonging to one company, ordered by due date."""
        ids = self._company_accounts.get(company_id, [])
        return sorted(
            (self.accounts[i] for i in ids), key=lambda a: (a.due_date, a.account_id)
        )

    def project(
        self,
        today: date,
        expander: RecurrenceExpander | None = None,
    ) -> list[ProjectedOccurrence]:
        """Expand every stored account into occurrences sorted by due date."""
        expander = expander or RecurrenceExpander()
        return expander.expand_all(self.accounts.values(), today)

    def project_range(
        self,
        today: date,
        start: date,
        end: date,
        expander: RecurrenceExpander | None = None,
    ) -> list[ProjectedOccurrence]:
        """Occurrences due between ``start`` and ``end`` inclusive."""
        return filter_by_range(self.project(today, expander), start, end)

    def __len__(self) -> int:
        return len(self.accounts)
