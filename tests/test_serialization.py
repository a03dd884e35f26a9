"""Tests for save-string decoding and dict export."""

from datetime import date
from typing import Callable

import pytest

from loanbook.exceptions import SerializationError
from loanbook.models import Loan, LoanKind, Person
from loanbook.models import predicates
from loanbook.serialization import parse_loan, parse_person, serialize_value, to_dict


class TestParseLoan:
    """Tests for parse_loan."""

    def test_round_trip_unpaid(self, make_loan: Callable[..., Loan]) -> None:
        loan = make_loan(1200, rate="0.01")
        assert parse_loan(loan.to_save_string()) == loan

    def test_round_trip_paid_compound(self, make_loan: Callable[..., Loan]) -> None:
        loan = make_loan(1000, rate="0.02", kind=LoanKind.COMPOUND)
        loan.pay(2000, today=date(2024, 5, 1))

        parsed = parse_loan(loan.to_save_string())

        assert parsed == loan
        assert parsed.is_paid is True
        assert parsed.date_last_paid == date(2024, 5, 1)

    def test_wrong_field_count(self) -> None:
        with pytest.raises(SerializationError, match="Expected 9 loan fields"):
            parse_loan("SIMPLE|1200|1344.00")

    @pytest.mark.parametrize(
        "line",
        [
            "FIXED|1200|1344.00|0|0.01|2025-01-01||2024-01-01|false",
            "SIMPLE|abc|1344.00|0|0.01|2025-01-01||2024-01-01|false",
            "SIMPLE|1200|1344.00|0|0.01|2025-13-01||2024-01-01|false",
            "SIMPLE|1200|1344.00|0|0.01|2025-01-01||2024-01-01|maybe",
            "SIMPLE|1200|1344.00|0|0.01|2024-01-10||2024-01-01|false",
            "SIMPLE|1200|1344.00|0|0.01|2025-01-01||2024-01-01|true",
            "SIMPLE|1200|1344.00|NaN|0.01|2025-01-01||2024-01-01|false",
            "SIMPLE|1200|1344.00|Infinity|0.01|2025-01-01||2024-01-01|true",
        ],
    )
    def test_invalid_fields(self, line: str) -> None:
        with pytest.raises(SerializationError):
            parse_loan(line)


class TestParsePerson:
    """Tests for parse_person."""

    def test_round_trip_with_loans(
        self, make_person: Callable[..., Person], make_loan: Callable[..., Loan]
    ) -> None:
        person = make_person("Alice", 100, 250)
        person.tags = frozenset({"friends", "work"})
        person.loans.add(make_loan(500, rate="0.015", kind=LoanKind.COMPOUND))
        person.loans.get(0).pay(40, today=date(2024, 2, 1))

        assert parse_person(person.to_save_string()) == person

    def test_round_trip_without_loans_or_contacts(self) -> None:
        person = Person(name="Bob")
        assert person.to_save_string() == "Bob||||"
        assert parse_person(person.to_save_string()) == person

    def test_hidden_loans_are_saved(self, make_person: Callable[..., Person]) -> None:
        person = make_person("Alice", 100, 200)
        person.loans.filter(predicates.is_paid)

        parsed = parse_person(person.to_save_string())

        assert len(parsed.loans) == 2
        assert parsed.loans.visible_count == 2

    def test_empty_record(self) -> None:
        with pytest.raises(SerializationError, match="Empty"):
            parse_person("")

    def test_bad_person_line(self) -> None:
        with pytest.raises(SerializationError, match="person fields"):
            parse_person("Alice|123")

    def test_blank_name(self) -> None:
        with pytest.raises(SerializationError, match="Invalid person record"):
            parse_person(" ||||")


class TestToDict:
    """Tests for dictionary export."""

    def test_loan_to_dict(self, make_loan: Callable[..., Loan]) -> None:
        data = to_dict(make_loan(1200, rate="0.01"))

        assert data["kind"] == "SIMPLE"
        assert data["principal"] == "1200"
        assert data["amount_owed"] == "1344.00"
        assert data["due_date"] == "2025-01-01"
        assert data["date_last_paid"] is None
        assert data["is_paid"] is False

    def test_person_to_dict(self, make_person: Callable[..., Person]) -> None:
        person = make_person("Alice", 100, 200)
        person.tags = frozenset({"b", "a"})

        data = to_dict(person)

        assert data["name"] == "Alice"
        assert data["tags"] == ["a", "b"]
        assert len(data["loans"]) == 2
        assert data["total_owed"] == "300.00"

    def test_other_values(self) -> None:
        assert to_dict({"x": 1}) == {"x": 1}
        assert to_dict(42) == {"value": "42"}
        assert serialize_value([LoanKind.COMPOUND, date(2024, 1, 2)]) == ["COMPOUND", "2024-01-02"]
