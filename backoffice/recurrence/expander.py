"""Expansion of stored accounts into projected occurrences."""

import logging
from datetime import date
from typing import Iterable

from backoffice.config import ProjectionConfig
from backoffice.models import (
    PERIOD_MONTHS,
    AccountStatus,
    BaseAccount,
    ProjectedOccurrence,
    RecurringPeriod,
)
from backoffice.recurrence.dates import add_months, add_years

logger = logging.getLogger(__name__)

DEFAULT_HORIZON_MONTHS = 12
DEFAULT_MAX_OCCURRENCES = 24


def occurrence_status(
    due: date,
    today: date,
    stored: AccountStatus | None = None,
) -> AccountStatus:
    """Derive the status of an occurrence due on ``due``.

    A settled stored status (paid/received) is returned unchanged;
    otherwise the occurrence is overdue strictly before ``today``.
    """
    if stored is not None and AccountStatus(stored).is_settled:
        return AccountStatus(stored)
    return AccountStatus.OVERDUE if due < today else AccountStatus.OPEN


def step_date(anchor: date, period: RecurringPeriod, steps: int) -> date:
    """Return the date ``steps`` periods after ``anchor``."""
    if period is RecurringPeriod.YEARLY:
        return add_years(anchor, steps)
    return add_months(anchor, PERIOD_MONTHS[period] * steps)


def expand(
    account: BaseAccount,
    today: date,
    horizon_months: int = DEFAULT_HORIZON_MONTHS,
    max_occurrences: int = DEFAULT_MAX_OCCURRENCES,
) -> list[ProjectedOccurrence]:
    """Expand one account into its anchor and projected follow-ons.

    Follow-ons are stepped from the anchor date (not from the previous,
    possibly clamped, occurrence) until the next date falls after
    ``today`` plus ``horizon_months`` or ``max_occurrences`` follow-ons
    have been produced. Malformed recurrence settings yield the anchor
    alone and a warning; this function never raises for a well-typed
    account.

    Parameters
    ----------
    account : BaseAccount
        Stored account to expand.
    today : date
        Reference date for status derivation and the horizon.
    horizon_months : int
        Forward window measured from ``today``.
    max_occurrences : int
        Maximum number of follow-on occurrences.

    Returns
    -------
    list[ProjectedOccurrence]
        Occurrences in strictly increasing due-date order.
    """
    anchor = ProjectedOccurrence.from_account(
        account,
        account.due_date,
        index=0,
        status=occurrence_status(account.due_date, today, account.status),
    )
    if not account.is_recurring:
        return [anchor]

    period = RecurringPeriod.parse(account.recurring_period)
    if period is None:
        logger.warning(
            "Account %s is recurring with unrecognised period %r; projecting anchor only",
            account.account_id,
            account.recurring_period,
            extra={"account_id": account.account_id, "company_id": account.company_id},
        )
        return [anchor]

    horizon_end = add_months(today, max(horizon_months, 0))
    if account.due_date >= horizon_end:
        return [anchor]

    occurrences = [anchor]
    for index in range(1, max(max_occurrences, 0) + 1):
        due = step_date(account.due_date, period, index)
        if due > horizon_end:
            break
        occurrences.append(
            ProjectedOccurrence.from_account(
                account, due, index=index, status=occurrence_status(due, today)
            )
        )
    return occurrences


def expand_all(
    accounts: Iterable[BaseAccount],
    today: date,
    horizon_months: int = DEFAULT_HORIZON_MONTHS,
    max_occurrences: int = DEFAULT_MAX_OCCURRENCES,
) -> list[ProjectedOccurrence]:
    """Expand many accounts and merge them ordered by due date."""
    accounts = list(accounts)
    result: list[ProjectedOccurrence] = []
    for account in accounts:
        result.extend(expand(account, today, horizon_months, max_occurrences))
    result.sort(key=lambda o: (o.occurrence_due_date, o.account_id, o.index))
    logger.debug(
        "Expanded %d accounts into %d occurrences",
        len(accounts),
        len(result),
        extra={"account_count": len(accounts), "occurrence_count": len(result)},
    )
    return result


class RecurrenceExpander:
    """Expander bound to one ProjectionConfig.

    Lets the calendar, dashboard and notification consumers share the
    same horizon and cap.
    """

    def __init__(self, config: ProjectionConfig | None = None) -> None:
        self.config = config or ProjectionConfig()
        self.config.validate()

    def expand(self, account: BaseAccount, today: date) -> list[ProjectedOccurrence]:
        """Expand a single account with the configured bounds."""
        return expand(
            account,
            today,
            horizon_months=self.config.horizon_months,
            max_occurrences=self.config.max_occurrences,
        )

    def expand_all(
        self, accounts: Iterable[BaseAccount], today: date
    ) -> list[ProjectedOccurrence]:
        """Expand many accounts with the configured bounds."""
        return expand_all(
            accounts,
            today,
            horizon_months=self.config.horizon_months,
            max_occurrences=self.config.max_occurrences,
        )
