"""Pytest configuration and fixtures."""

from datetime import date
from decimal import Decimal

import pytest

from backoffice.models import AccountKind, AccountStatus, BaseAccount, RecurringPeriod


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def today() -> date:
    """Fixed reference date."""
    return date(2024, 6, 15)


@pytest.fixture
def payable() -> BaseAccount:
    """Non-recurring open payable."""
    return BaseAccount(
        account_id="pay-001",
        kind=AccountKind.PAYABLE,
        description="Aluguel",
        amount=Decimal("2500.00"),
        due_date=date(2024, 6, 10),
        counterparty_name="Imobiliária Central",
        category="Aluguel",
        company_id="company-001",
    )


@pytest.fixture
def monthly_receivable() -> BaseAccount:
    """Recurring monthly receivable."""
    return BaseAccount(
        account_id="rec-001",
        kind=AccountKind.RECEIVABLE,
        description="Mensalidade",
        amount=Decimal("1200.00"),
        due_date=date(2024, 5, 20),
        status=AccountStatus.OPEN,
        is_recurring=True,
        recurring_period=RecurringPeriod.MONTHLY,
        counterparty_name="Cliente Alfa",
        company_id="company-001",
    )
