"""Loan generator for sample registries."""

from __future__ import annotations

import random
from datetime import date
from decimal import Decimal

from loanbook.dates import add_months, months_between
from loanbook.generators.base import BaseGenerator
from loanbook.models import Loan, LoanKind
from loanbook.models.loan import CENTS


class LoanGenerator(BaseGenerator):
    """Generate synthetic simple and compound interest loans."""

    # Monthly interest rate ranges per interest model
    INTEREST_RATES = {
        LoanKind.SIMPLE: (0.005, 0.02),
        LoanKind.COMPOUND: (0.003, 0.015),
    }
    TERMS_MONTHS = [3, 6, 12, 18, 24, 36]

    def generate(self, today: date | None = None) -> Loan:
        """Generate a loan granted up to two years before ``today``.

        Some loans receive a few payments, so the result may be active,
        partially paid or paid, and possibly overdue.
        """
        today = today or date.today()
        kind = random.choice(list(LoanKind))
        principal = Decimal(random.randint(1, 200) * 50)
        interest_rate = Decimal(str(round(random.uniform(*self.INTEREST_RATES[kind]), 4)))
        term_months = random.choice(self.TERMS_MONTHS)

        date_created = add_months(today, -random.randint(0, 24))
        loan = Loan.create(
            kind,
            principal,
            interest_rate,
            due_date=add_months(date_created, term_months),
            date_created=date_created,
        )

        self._apply_payments(loan, today)
        return loan

    def _apply_payments(self, loan: Loan, today: date) -> None:
        months_elapsed = min(
            months_between(loan.date_created, today), loan.get_loan_length_months()
        )
        instalment = loan.get_monthly_instalment_amount().quantize(CENTS)
        for month in range(random.randint(0, max(0, months_elapsed))):
            if loan.is_paid:
                break
            paid_on = min(add_months(loan.date_created, month + 1), today)
            if month == loan.get_loan_length_months() - 1:
                # Last instalment absorbs the rounding remainder
                loan.pay(loan.get_remaining_owed(), today=paid_on)
            else:
                loan.pay(instalment, today=paid_on)
