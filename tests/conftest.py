"""Pytest configuration and fixtures."""

from datetime import date
from decimal import Decimal
from typing import Callable

import pytest

from loanbook.models import Loan, LoanKind, Person
from loanbook.store import PersonRegistry


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def today() -> date:
    """Fixed reference date for schedule-dependent tests."""
    return date(2024, 6, 15)


@pytest.fixture
def make_loan() -> Callable[..., Loan]:
    """Factory for loans granted on 2024-01-01 and due a year later."""

    def _make(
        principal: Decimal | int | str = 1200,
        rate: Decimal | str = "0",
        kind: LoanKind = LoanKind.SIMPLE,
        date_created: date = date(2024, 1, 1),
        due_date: date = date(2025, 1, 1),
    ) -> Loan:
        return Loan.create(kind, principal, rate, due_date=due_date, date_created=date_created)

    return _make


@pytest.fixture
def make_person(make_loan: Callable[..., Loan]) -> Callable[..., Person]:
    """Factory for persons owning interest-free loans of the given principals."""

    def _make(name: str, *principals: int, phone: str = "91234567") -> Person:
        person = Person(name=name, phone=phone, email=f"{name.lower()}@example.com")
        for principal in principals:
            person.loans.add(make_loan(principal))
        return person

    return _make


@pytest.fixture
def registry() -> PersonRegistry:
    """Create a fresh registry for each test."""
    return PersonRegistry()
