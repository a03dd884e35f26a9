"""Per-person loan collection with a non-destructive filtered view."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Iterable, Iterator

from loanbook.exceptions import IndexOutOfRangeError
from loanbook.models.loan import ZERO, Loan
from loanbook.models.predicates import LoanPredicate, show_all


class LoanCollection:
    """Ordered loans belonging to one person.

    All loans live in a backing list. ``filter`` only recomputes which
    backing indices are visible, so hidden loans come back as soon as a
    more permissive predicate is applied. Aggregates always cover every
    loan, visible or not.

    Indices taken by ``get`` and ``remove`` refer to the visible subset.
    """

    def __init__(self, loans: Iterable[Loan] | None = None) -> None:
        self._loans: list[Loan] = list(loans or [])
        self._predicate: LoanPredicate = show_all
        self._visible: list[int] = []
        self._recompute_visible()

    def add(self, loan: Loan) -> None:
        """Append a loan; it is visible only if it passes the active filter."""
        self._loans.append(loan)
        if self._predicate(loan):
            self._visible.append(len(self._loans) - 1)

    def get(self, index: int) -> Loan:
        """Return the loan at ``index`` in the visible subset."""
        return self._loans[self._backing_index(index)]

    def remove(self, index: int) -> Loan:
        """Delete the loan at ``index`` in the visible subset and return it."""
        loan = self._loans.pop(self._backing_index(index))
        self._recompute_visible()
        return loan

    def filter(self, predicate: LoanPredicate) -> None:
        """Narrow the visible subset to loans matching ``predicate``."""
        self._predicate = predicate
        self._recompute_visible()

    def clear_filter(self) -> None:
        self.filter(show_all)

    def visible(self) -> list[Loan]:
        return [self._loans[i] for i in self._visible]

    @property
    def visible_count(self) -> int:
        return len(self._visible)

    def get_total_loan_owed(self) -> Decimal:
        """Sum of remaining balances over all loans."""
        return sum((loan.get_remaining_owed() for loan in self._loans), ZERO)

    def get_most_overdue_months(self, today: date | None = None) -> int:
        """Months past due of the most overdue unpaid loan, as a value <= 0.

        Returns 0 when no unpaid loan is past its due month.
        """
        months = [
            loan.get_months_until_due_date(today) for loan in self._loans if not loan.is_paid
        ]
        return min([0, *months])

    def _backing_index(self, index: int) -> int:
        if not 0 <= index < len(self._visible):
            raise IndexOutOfRangeError(
                f"Loan index {index} out of range (0-{len(self._visible) - 1})"
            )
        return self._visible[index]

    def _recompute_visible(self) -> None:
        self._visible = [i for i, loan in enumerate(self._loans) if self._predicate(loan)]

    def __iter__(self) -> Iterator[Loan]:
        return iter(self._loans)

    def __len__(self) -> int:
        return len(self._loans)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LoanCollection):
            return NotImplemented
        return self._loans == other._loans

    def __repr__(self) -> str:
        return f"LoanCollection({self._loans!r})"
