"""Domain models for the loan book."""

from loanbook.models.enums import (
    ChangeKind,
    LoanKind,
    LoanState,
    RegistryState,
    SortKey,
    SortOrder,
)
from loanbook.models.loan import Loan
from loanbook.models.loan_collection import LoanCollection
from loanbook.models.person import Person

__all__ = [
    "ChangeKind",
    "Loan",
    "LoanCollection",
    "LoanKind",
    "LoanState",
    "Person",
    "RegistryState",
    "SortKey",
    "SortOrder",
]
