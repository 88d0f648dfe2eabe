"""Sample payable/receivable account generator."""

import random
from datetime import date, timedelta
from decimal import Decimal
from typing import Iterator

from backoffice.generators.base import BaseGenerator
from backoffice.models import AccountKind, AccountStatus, BaseAccount, RecurringPeriod


class AccountGenerator(BaseGenerator):
    """Generate synthetic accounts payable and receivable.

    Roughly 40% of accounts are recurring, mostly monthly. Due dates fall
    within 90 days either side of the reference date; past-due accounts
    are settled about half of the time.
    """

    PAYABLE_CATEGORIES = [
        "Aluguel",
        "Energia",
        "Internet",
        "Fornecedores",
        "Impostos",
        "Folha de pagamento",
        "Software",
    ]
    RECEIVABLE_CATEGORIES = [
        "Consultoria",
        "Mensalidade",
        "Projeto",
        "Licenciamento",
        "Suporte",
    ]

    RECURRING_RATE = 0.40
    PERIODS = list(RecurringPeriod)
    PERIOD_WEIGHTS = [0.70, 0.15, 0.05, 0.10]

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "pt_BR",
        company_id: str | None = None,
    ) -> None:
        super().__init__(seed, locale=locale)
        self.company_id = company_id

    def generate(
        self,
        kind: AccountKind | None = None,
        reference_date: date | None = None,
    ) -> BaseAccount:
        """Generate a single account.

        Parameters
        ----------
        kind : AccountKind | None
            Payable or receivable; random when None.
        reference_date : date | None
            Date the due dates are spread around (default: today).

        Returns
        -------
        BaseAccount
            Generated account.
        """
        if reference_date is None:
            reference_date = date.today()
        if kind is None:
            kind = random.choice(list(AccountKind))

        if kind == AccountKind.PAYABLE:
            category = random.choice(self.PAYABLE_CATEGORIES)
            amount = Decimal(str(round(random.uniform(80, 15000), 2)))
            settled_status = AccountStatus.PAID
        else:
            category = random.choice(self.RECEIVABLE_CATEGORIES)
            amount = Decimal(str(round(random.uniform(300, 40000), 2)))
            settled_status = AccountStatus.RECEIVED

        due_date = reference_date + timedelta(days=random.randint(-90, 90))
        if due_date < reference_date and random.random() < 0.5:
            status = settled_status
        else:
            status = AccountStatus.OPEN

        is_recurring = random.random() < self.RECURRING_RATE
        period = (
            random.choices(self.PERIODS, weights=self.PERIOD_WEIGHTS, k=1)[0]
            if is_recurring
            else None
        )

        return BaseAccount(
            account_id=self.fake.uuid4(),
            kind=kind,
            description=f"{category} {self.fake.month_name()}",
            amount=amount.quantize(Decimal("0.01")),
            due_date=due_date,
            status=status,
            is_recurring=is_recurring,
            recurring_period=period,
            counterparty_name=self.fake.company(),
            category=category,
            company_id=self.company_id,
        )

    def generate_batch(
        self,
        count: int,
        reference_date: date | None = None,
    ) -> Iterator[BaseAccount]:
        """Generate ``count`` accounts of mixed kinds."""
        for _ in range(count):
            yield self.generate(reference_date=reference_date)
