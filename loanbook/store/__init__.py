"""In-memory person registry."""

from loanbook.store.registry import (
    ALL_PERSONS,
    ChangeEvent,
    ChangeListener,
    PersonRegistry,
    RegistryView,
)

__all__ = ["ALL_PERSONS", "ChangeEvent", "ChangeListener", "PersonRegistry", "RegistryView"]
