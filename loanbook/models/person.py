"""Person model: a contact owning a collection of loans."""

from __future__ import annotations

from dataclasses import dataclass, field

from loanbook.exceptions import ValidationError
from loanbook.models.loan_collection import LoanCollection

_RESERVED = ("|", "\n", "\r")


@dataclass
class Person:
    """Contact entity.

    The name is the identity of a person: ``is_same_person`` compares
    names only, while ``==`` compares every field including loans.
    """

    name: str
    phone: str = ""
    email: str = ""
    address: str = ""
    tags: frozenset[str] = field(default_factory=frozenset)
    loans: LoanCollection = field(default_factory=LoanCollection)

    def __post_init__(self) -> None:
        self.name = self.name.strip()
        if not self.name:
            raise ValidationError("Name must not be blank")

        self.tags = frozenset(self.tags)
        for value in (self.name, self.phone, self.email, self.address, *self.tags):
            if any(ch in value for ch in _RESERVED):
                raise ValidationError(f"Field value {value!r} contains a reserved character")
        if any("," in tag for tag in self.tags):
            raise ValidationError("Tags must not contain commas")

    def is_same_person(self, other: Person | None) -> bool:
        """True if ``other`` has the same identity (name)."""
        if other is self:
            return True
        return other is not None and other.name == self.name

    def to_save_string(self) -> str:
        """Encode the person line followed by one line per loan."""
        person_line = "|".join(
            [self.name, self.phone, self.email, self.address, ",".join(sorted(self.tags))]
        )
        return "\n".join([person_line, *(loan.to_save_string() for loan in self.loans)])
