"""Loan model with simple and compound interest variants.

A single ``Loan`` dataclass carries the fields shared by every loan. The
interest model is selected by ``Loan.kind``; each kind maps to a pure
function computing the total value of the loan over its whole length.
Rates are per month and loan length is measured in whole months.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Callable

from loanbook.dates import months_between
from loanbook.exceptions import InvalidPaymentError, LoanAlreadyPaidError, ValidationError
from loanbook.models.enums import LoanKind, LoanState

CENTS = Decimal("0.01")
ZERO = Decimal("0")


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """Convert a money or rate value to ``Decimal``.

    Floats go through ``str`` so that ``0.1`` becomes ``Decimal("0.1")``.
    NaN and infinities are rejected.
    """
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value))
        except InvalidOperation as e:
            raise ValidationError(f"Not a number: {value!r}") from e
    if not result.is_finite():
        raise ValidationError(f"Not a finite number: {value!r}")
    return result


def simple_interest_value(principal: Decimal, rate: Decimal, months: int) -> Decimal:
    """Total repayable under linear accrual."""
    return principal * (1 + rate * months)


def compound_interest_value(principal: Decimal, rate: Decimal, months: int) -> Decimal:
    """Total repayable under monthly compounding."""
    return principal * (1 + rate) ** months


_VALUE_FORMULAS: dict[LoanKind, Callable[[Decimal, Decimal, int], Decimal]] = {
    LoanKind.SIMPLE: simple_interest_value,
    LoanKind.COMPOUND: compound_interest_value,
}

_DISPLAY_NAMES = {
    LoanKind.SIMPLE: "Simple Interest Loan",
    LoanKind.COMPOUND: "Compound Interest Loan",
}


@dataclass
class Loan:
    """Loan owned by a person.

    ``amount_owed`` is the contractual total (principal plus interest over
    the loan length, rounded to cents). Payments only ever increase
    ``amount_paid``; the outstanding balance is ``get_remaining_owed()``.

    Use ``Loan.simple`` / ``Loan.compound`` to grant a new loan; the plain
    constructor is for rebuilding a loan from stored fields.
    """

    kind: LoanKind
    principal: Decimal
    interest_rate: Decimal  # Monthly rate (e.g., 0.01 for 1%)
    date_created: date
    due_date: date
    amount_owed: Decimal
    amount_paid: Decimal = ZERO
    date_last_paid: date | None = None
    is_paid: bool = False

    def __post_init__(self) -> None:
        self.kind = LoanKind(self.kind)
        self.principal = to_decimal(self.principal)
        self.interest_rate = to_decimal(self.interest_rate)
        self.amount_owed = to_decimal(self.amount_owed)
        self.amount_paid = to_decimal(self.amount_paid)

        for name in ("principal", "interest_rate", "amount_owed", "amount_paid"):
            if getattr(self, name) < 0:
                raise ValidationError(f"{name} must not be negative")

        if self.get_loan_length_months() < 1:
            raise ValidationError(
                f"Due date {self.due_date} must be at least one month after {self.date_created}"
            )

        if self.is_paid != (self.get_remaining_owed() <= 0):
            raise ValidationError(
                f"Paid flag {self.is_paid} contradicts remaining owed {self.get_remaining_owed()}"
            )

    @classmethod
    def create(
        cls,
        kind: LoanKind,
        principal: Decimal | int | float | str,
        interest_rate: Decimal | int | float | str,
        due_date: date,
        date_created: date | None = None,
    ) -> Loan:
        """Grant a new loan, computing what is owed from the interest model."""
        kind = LoanKind(kind)
        date_created = date_created or date.today()
        principal = to_decimal(principal)
        interest_rate = to_decimal(interest_rate)

        months = months_between(date_created, due_date)
        if months < 1:
            raise ValidationError(
                f"Due date {due_date} must be at least one month after {date_created}"
            )

        value = _VALUE_FORMULAS[kind](principal, interest_rate, months)
        amount_owed = value.quantize(CENTS, rounding=ROUND_HALF_UP)

        return cls(
            kind=kind,
            principal=principal,
            interest_rate=interest_rate,
            date_created=date_created,
            due_date=due_date,
            amount_owed=amount_owed,
            is_paid=amount_owed <= 0,
        )

    @classmethod
    def simple(
        cls,
        principal: Decimal | int | float | str,
        interest_rate: Decimal | int | float | str,
        due_date: date,
        date_created: date | None = None,
    ) -> Loan:
        """Grant a simple interest loan."""
        return cls.create(LoanKind.SIMPLE, principal, interest_rate, due_date, date_created)

    @classmethod
    def compound(
        cls,
        principal: Decimal | int | float | str,
        interest_rate: Decimal | int | float | str,
        due_date: date,
        date_created: date | None = None,
    ) -> Loan:
        """Grant a compound interest loan."""
        return cls.create(LoanKind.COMPOUND, principal, interest_rate, due_date, date_created)

    # Variant-specific operations

    def get_name(self) -> str:
        return _DISPLAY_NAMES[self.kind]

    def get_loan_value(self) -> Decimal:
        """Total value of the loan under its interest model, in cents.

        This is ``amount_owed``, fixed when the loan was granted, so paying
        it in full always settles the loan.
        """
        return self.amount_owed

    def get_monthly_instalment_amount(self) -> Decimal:
        return self.get_loan_value() / self.get_loan_length_months()

    def pay(self, amount: Decimal | int | float | str, today: date | None = None) -> None:
        """Record a payment against the loan.

        Parameters
        ----------
        amount : Decimal | int | float | str
            Payment amount, must be positive. Overpayment settles the loan.
        today : date | None
            Payment date (default: today).

        Raises
        ------
        InvalidPaymentError
            If ``amount`` is not a positive finite number.
        LoanAlreadyPaidError
            If the loan is already settled.
        """
        try:
            amount = to_decimal(amount)
        except ValidationError as e:
            raise InvalidPaymentError(f"Invalid payment amount {amount!r}") from e
        if amount <= 0:
            raise InvalidPaymentError(f"Payment amount must be positive, got {amount}")
        if self.is_paid:
            raise LoanAlreadyPaidError(f"{self.get_name()} is already paid")

        self.amount_paid += amount
        self.date_last_paid = today or date.today()
        if self.get_remaining_owed() <= 0:
            self.is_paid = True

    def get_payment_difference(self, today: date | None = None) -> Decimal:
        """Amount expected by now minus amount paid (positive = behind schedule)."""
        expected = self.get_monthly_instalment_amount() * self._months_elapsed(today)
        return expected - self.amount_paid

    # Shared operations

    @property
    def state(self) -> LoanState:
        if self.is_paid:
            return LoanState.PAID
        if self.amount_paid > 0:
            return LoanState.PARTIALLY_PAID
        return LoanState.ACTIVE

    def is_overdue(self, today: date | None = None) -> bool:
        today = today or date.today()
        return today > self.due_date and not self.is_paid

    def missed_instalments(self, today: date | None = None) -> bool:
        """True if fewer instalments were paid than months have elapsed."""
        if self.is_paid:
            return False
        instalment = self.get_monthly_instalment_amount()
        if instalment <= 0:
            return False
        instalments_paid = int(self.amount_paid // instalment)
        return self._months_elapsed(today) > instalments_paid

    def get_remaining_owed(self) -> Decimal:
        return max(self.amount_owed - self.amount_paid, ZERO)

    def get_months_until_due_date(self, today: date | None = None) -> int:
        return months_between(today or date.today(), self.due_date)

    def get_loan_length_months(self) -> int:
        return months_between(self.date_created, self.due_date)

    def to_save_string(self) -> str:
        """Encode the loan as a single pipe-delimited line.

        Field order: kind, principal, amount owed, amount paid, interest
        rate, due date, date last paid (empty if never paid), date created,
        paid flag.
        """
        fields = [
            self.kind.value,
            str(self.principal),
            str(self.amount_owed),
            str(self.amount_paid),
            str(self.interest_rate),
            self.due_date.isoformat(),
            self.date_last_paid.isoformat() if self.date_last_paid else "",
            self.date_created.isoformat(),
            "true" if self.is_paid else "false",
        ]
        return "|".join(fields)

    def _months_elapsed(self, today: date | None) -> int:
        elapsed = months_between(self.date_created, today or date.today())
        return max(0, min(elapsed, self.get_loan_length_months()))
