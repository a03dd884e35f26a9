"""Tests for sample data generators."""

from datetime import date

from loanbook.config import SampleDataConfig
from loanbook.generators import LoanGenerator, PersonGenerator, build_sample_registry
from loanbook.models import Loan, LoanKind, Person
from loanbook.serialization import parse_person


class TestPersonGenerator:
    """Tests for PersonGenerator."""

    def test_generate(self, seed: int) -> None:
        person = PersonGenerator(seed=seed).generate()

        assert isinstance(person, Person)
        assert person.name
        assert "@" in person.email
        assert "\n" not in person.address
        assert person.tags <= set(PersonGenerator.TAGS)
        assert len(person.loans) == 0

    def test_generate_batch(self, seed: int) -> None:
        persons = list(PersonGenerator(seed=seed).generate_batch(5))
        assert len(persons) == 5

    def test_seed_is_reproducible(self, seed: int) -> None:
        first = PersonGenerator(seed=seed).generate()
        second = PersonGenerator(seed=seed).generate()
        assert first == second


class TestLoanGenerator:
    """Tests for LoanGenerator."""

    def test_generate(self, seed: int, today: date) -> None:
        gen = LoanGenerator(seed=seed)

        for _ in range(20):
            loan = gen.generate(today)

            assert isinstance(loan, Loan)
            assert loan.kind in set(LoanKind)
            assert loan.date_created <= today
            assert loan.get_loan_length_months() >= 1
            assert loan.principal > 0
            if loan.date_last_paid is not None:
                assert loan.date_last_paid <= today
            assert loan.is_paid == (loan.get_remaining_owed() == 0)


class TestBuildSampleRegistry:
    """Tests for build_sample_registry."""

    def test_builds_unique_persons(self, seed: int, today: date) -> None:
        registry = build_sample_registry(
            SampleDataConfig(num_persons=5, max_loans_per_person=2, seed=seed), today=today
        )

        assert len(registry) == 5
        persons = list(registry)
        for i, person in enumerate(persons):
            assert not any(person.is_same_person(other) for other in persons[i + 1 :])
            assert len(person.loans) <= 2

    def test_sample_persons_round_trip(self, seed: int, today: date) -> None:
        registry = build_sample_registry(SampleDataConfig(num_persons=3, seed=seed), today=today)

        for person in registry:
            assert parse_person(person.to_save_string()) == person

    def test_default_config(self) -> None:
        registry = build_sample_registry()
        assert registry.is_changeable
        assert 0 < len(registry) <= SampleDataConfig().num_persons
