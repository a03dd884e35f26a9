"""Loan predicates used to filter a person's loans."""

from __future__ import annotations

from decimal import Decimal
from typing import Callable

from loanbook.models.enums import LoanKind
from loanbook.models.loan import Loan, to_decimal

LoanPredicate = Callable[[Loan], bool]


def show_all(loan: Loan) -> bool:
    return True


def is_overdue(loan: Loan) -> bool:
    return loan.is_overdue()


def is_paid(loan: Loan) -> bool:
    return loan.is_paid


def is_unpaid(loan: Loan) -> bool:
    return not loan.is_paid


def missed_instalments(loan: Loan) -> bool:
    return loan.missed_instalments()


def of_kind(kind: LoanKind | str) -> LoanPredicate:
    """Match loans of the given interest model."""
    kind = LoanKind(kind)
    return lambda loan: loan.kind == kind


def owed_at_least(amount: Decimal | int | float | str) -> LoanPredicate:
    """Match loans whose remaining balance is at least ``amount``."""
    threshold = to_decimal(amount)
    return lambda loan: loan.get_remaining_owed() >= threshold


def all_of(*predicates: LoanPredicate) -> LoanPredicate:
    """Match loans satisfying every predicate (all loans if none given)."""
    return lambda loan: all(predicate(loan) for predicate in predicates)
