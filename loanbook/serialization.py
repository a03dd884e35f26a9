"""Save-string decoding and dictionary export.

Encoding lives on the models (``Loan.to_save_string`` and
``Person.to_save_string``); this module reads those strings back and turns
entities into JSON-friendly dictionaries.
"""

from dataclasses import fields, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from loanbook.exceptions import SerializationError, ValidationError
from loanbook.models import Loan, LoanCollection, LoanKind, Person
from loanbook.models.loan import to_decimal

_LOAN_FIELD_COUNT = 9
_PERSON_FIELD_COUNT = 5


def parse_loan(line: str) -> Loan:
    """Rebuild a loan from ``Loan.to_save_string`` output."""
    parts = line.split("|")
    if len(parts) != _LOAN_FIELD_COUNT:
        raise SerializationError(
            f"Expected {_LOAN_FIELD_COUNT} loan fields, got {len(parts)}: {line!r}"
        )
    kind, principal, owed, paid, rate, due, last_paid, created, is_paid = parts

    if is_paid not in ("true", "false"):
        raise SerializationError(f"Invalid paid flag {is_paid!r}")

    try:
        return Loan(
            kind=LoanKind(kind),
            principal=to_decimal(principal),
            interest_rate=to_decimal(rate),
            date_created=date.fromisoformat(created),
            due_date=date.fromisoformat(due),
            amount_owed=to_decimal(owed),
            amount_paid=to_decimal(paid),
            date_last_paid=date.fromisoformat(last_paid) if last_paid else None,
            is_paid=is_paid == "true",
        )
    except (ValueError, ValidationError) as e:
        raise SerializationError(f"Invalid loan record {line!r}: {e}") from e


def parse_person(text: str) -> Person:
    """Rebuild a person and their loans from ``Person.to_save_string`` output."""
    lines = text.splitlines()
    if not lines:
        raise SerializationError("Empty person record")

    parts = lines[0].split("|")
    if len(parts) != _PERSON_FIELD_COUNT:
        raise SerializationError(
            f"Expected {_PERSON_FIELD_COUNT} person fields, got {len(parts)}: {lines[0]!r}"
        )
    name, phone, email, address, tags = parts

    loans = LoanCollection(parse_loan(line) for line in lines[1:] if line)
    try:
        return Person(
            name=name,
            phone=phone,
            email=email,
            address=address,
            tags=frozenset(tag for tag in tags.split(",") if tag),
            loans=loans,
        )
    except ValidationError as e:
        raise SerializationError(f"Invalid person record {lines[0]!r}: {e}") from e


def to_dict(obj: Any) -> dict:
    """Convert a person, loan or other dataclass to a dictionary."""
    if isinstance(obj, Person):
        return person_to_dict(obj)
    elif is_dataclass(obj):
        return {f.name: serialize_value(getattr(obj, f.name)) for f in fields(obj)}
    elif isinstance(obj, dict):
        return obj
    else:
        return {"value": str(obj)}


def person_to_dict(person: Person) -> dict:
    """Serialize a person with all of their loans, hidden ones included."""
    return {
        "name": person.name,
        "phone": person.phone,
        "email": person.email,
        "address": person.address,
        "tags": sorted(person.tags),
        "loans": [to_dict(loan) for loan in person.loans],
        "total_owed": serialize_value(person.loans.get_total_loan_owed()),
    }


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [serialize_value(v) for v in value]
    return value
