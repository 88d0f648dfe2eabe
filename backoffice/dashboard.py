"""Aggregations over projected occurrences for dashboards and the calendar."""

from collections import defaultdict
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal
from typing import Iterable

from backoffice.models import AccountKind, AccountStatus, ProjectedOccurrence
from backoffice.recurrence.dates import last_day_of_month


@dataclass
class AccountTotals:
    """Dashboard totals.

    ``account_count`` counts stored rows; projected follow-ons are left
    out unless explicitly included.
    """

    total_receivable: Decimal = Decimal("0")
    total_payable: Decimal = Decimal("0")
    total_overdue: Decimal = Decimal("0")
    account_count: int = 0


@dataclass
class MonthSummary:
    """Summary cards shown above the calendar for one month."""

    year: int
    month: int
    receivable_total: Decimal = Decimal("0")
    receivable_count: int = 0
    payable_total: Decimal = Decimal("0")
    payable_count: int = 0
    overdue_total: Decimal = Decimal("0")
    overdue_count: int = 0


def compute_totals(
    occurrences: Iterable[ProjectedOccurrence],
    include_projections: bool = False,
) -> AccountTotals:
    """Sum open receivables, open payables and overdue amounts.

    Parameters
    ----------
    occurrences : Iterable[ProjectedOccurrence]
        Expanded occurrences.
    include_projections : bool
        Also count projected follow-ons (``original_id`` set).

    Returns
    -------
    AccountTotals
        Aggregated totals.
    """
    totals = AccountTotals()
    for occ in occurrences:
        if occ.is_projection and not include_projections:
            continue
        totals.account_count += 1
        if occ.kind == AccountKind.RECEIVABLE and occ.status != AccountStatus.RECEIVED:
            totals.total_receivable += occ.amount
        elif occ.kind == AccountKind.PAYABLE and occ.status != AccountStatus.PAID:
            totals.total_payable += occ.amount
        if occ.status == AccountStatus.OVERDUE:
            totals.total_overdue += occ.amount
    return totals


def filter_by_range(
    occurrences: Iterable[ProjectedOccurrence], start: date, end: date
) -> list[ProjectedOccurrence]:
    """Occurrences due between ``start`` and ``end`` inclusive."""
    return [o for o in occurrences if start <= o.occurrence_due_date <= end]


def group_by_date(
    occurrences: Iterable[ProjectedOccurrence],
) -> dict[date, list[ProjectedOccurrence]]:
    """Group occurrences by due date, one entry per calendar cell."""
    grouped: dict[date, list[ProjectedOccurrence]] = defaultdict(list)
    for occ in occurrences:
        grouped[occ.occurrence_due_date].append(occ)
    return dict(grouped)


def month_summary(
    occurrences: Iterable[ProjectedOccurrence], year: int, month: int
) -> MonthSummary:
    """Build the calendar summary cards for ``year``/``month``.

    Settled occurrences are ignored; overdue ones are counted on their
    own card as well as under their kind.
    """
    start = date(year, month, 1)
    end = date(year, month, last_day_of_month(year, month))
    summary = MonthSummary(year=year, month=month)

    for occ in filter_by_range(occurrences, start, end):
        if AccountStatus(occ.status).is_settled:
            continue
        if occ.kind == AccountKind.RECEIVABLE:
            summary.receivable_total += occ.amount
            summary.receivable_count += 1
        else:
            summary.payable_total += occ.amount
            summary.payable_count += 1
        if occ.status == AccountStatus.OVERDUE:
            summary.overdue_total += occ.amount
            summary.overdue_count += 1
    return summary


def upcoming(
    occurrences: Iterable[ProjectedOccurrence], today: date, days: int = 7
) -> list[ProjectedOccurrence]:
    """Unsettled occurrences due within the next ``days`` days."""
    end = today + timedelta(days=days)
    return [
        o
        for o in filter_by_range(occurrences, today, end)
        if not AccountStatus(o.status).is_settled
    ]
