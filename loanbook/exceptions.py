"""Custom exception hierarchy for loanbook."""

UNMODIFIABLE_MESSAGE = (
    "Person List cannot be modified in this window, please go back to Person Page."
)


class LoanBookError(Exception):
    """Base exception for all loanbook errors."""


class EntityNotFoundError(LoanBookError):
    """Raised when a referenced entity does not exist."""


class PersonNotFoundError(EntityNotFoundError):
    """Raised when a person is not present in the registry."""


class DuplicatePersonError(LoanBookError):
    """Raised when an operation would leave two identity-equal persons."""


class RegistryLockedError(LoanBookError):
    """Raised by any mutating call while the registry is locked."""

    def __init__(self, message: str = UNMODIFIABLE_MESSAGE) -> None:
        super().__init__(message)


class IndexOutOfRangeError(LoanBookError, IndexError):
    """Raised when a person or loan index is out of bounds."""


class ValidationError(LoanBookError):
    """Raised when a field value is invalid."""


class InvalidPaymentError(ValidationError):
    """Raised when a payment amount is not positive."""


class InvalidLoanStateError(LoanBookError):
    """Raised when a loan is in an invalid state for the operation."""


class LoanAlreadyPaidError(InvalidLoanStateError):
    """Raised when paying a loan that is already settled."""


class ConfigurationError(LoanBookError):
    """Raised when configuration is invalid or missing."""


class SerializationError(LoanBookError):
    """Raised when a save string cannot be decoded."""
