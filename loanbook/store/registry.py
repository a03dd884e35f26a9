"""Person registry enforcing identity uniqueness."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Iterable, Iterator, overload

from loanbook.exceptions import (
    DuplicatePersonError,
    IndexOutOfRangeError,
    PersonNotFoundError,
    RegistryLockedError,
)
from loanbook.logging import get_logger
from loanbook.models import ChangeKind, Person, RegistryState, SortKey, SortOrder
from loanbook.models.predicates import LoanPredicate

logger = get_logger(__name__)

# Filter index meaning "every person"
ALL_PERSONS = -2


@dataclass(frozen=True)
class ChangeEvent:
    """Notification delivered to registry listeners."""

    kind: ChangeKind
    index: int | None = None  # Affected position, None for whole-list changes


ChangeListener = Callable[[ChangeEvent], None]


class RegistryView(Sequence):
    """Read-only live view over a registry's persons."""

    def __init__(self, persons: list[Person]) -> None:
        self._persons = persons

    @overload
    def __getitem__(self, index: int) -> Person: ...

    @overload
    def __getitem__(self, index: slice) -> list[Person]: ...

    def __getitem__(self, index: int | slice) -> Person | list[Person]:
        return self._persons[index]

    def __len__(self) -> int:
        return len(self._persons)

    def __repr__(self) -> str:
        return f"RegistryView({self._persons!r})"


class PersonRegistry:
    """Ordered collection of persons with no two sharing an identity.

    Adding and replacing use ``Person.is_same_person`` so that identities
    stay unique, while removal and the lookup of a replacement target use
    full value equality so that only the exact person is affected.

    Every mutating call checks the lock first and validates its input
    before touching the list, so a failed call leaves the registry as it
    was and notifies nobody. Listeners are called synchronously after each
    successful change and must not mutate the registry themselves.
    """

    def __init__(self, persons: Iterable[Person] | None = None) -> None:
        self._persons: list[Person] = []
        self._view = RegistryView(self._persons)
        self._state = RegistryState.EDITABLE
        self._listeners: list[ChangeListener] = []
        if persons is not None:
            self.set_persons(list(persons))

    # Lock state

    @property
    def state(self) -> RegistryState:
        return self._state

    @property
    def is_changeable(self) -> bool:
        return self._state is RegistryState.EDITABLE

    def set_changeable(self, changeable: bool) -> None:
        """Allow or forbid mutation of the registry."""
        self._state = RegistryState.EDITABLE if changeable else RegistryState.LOCKED
        logger.info("Person registry is now %s", self._state.value)

    def lock(self) -> None:
        self.set_changeable(False)

    def unlock(self) -> None:
        self.set_changeable(True)

    def _require_editable(self) -> None:
        if self._state is RegistryState.LOCKED:
            raise RegistryLockedError()

    # Notifications

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """Register ``listener`` and return a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, kind: ChangeKind, index: int | None = None) -> None:
        event = ChangeEvent(kind=kind, index=index)
        for listener in list(self._listeners):
            listener(event)

    # Queries

    def contains(self, person: Person) -> bool:
        """Return True if a person with the same identity is present."""
        return any(person.is_same_person(existing) for existing in self._persons)

    def get(self, index: int) -> Person:
        if not 0 <= index < len(self._persons):
            raise IndexOutOfRangeError(f"Person index {index} out of range")
        return self._persons[index]

    def find(self, name: str) -> Person | None:
        """Return the person called ``name``, if any."""
        for person in self._persons:
            if person.name == name:
                return person
        return None

    def as_unmodifiable_view(self) -> RegistryView:
        return self._view

    # Mutations

    def add(self, person: Person) -> None:
        """Append ``person``; its identity must not already be present."""
        self._require_editable()
        if self.contains(person):
            raise DuplicatePersonError(f"Person {person.name!r} already exists")

        self._persons.append(person)
        logger.debug("Added person %r", person.name)
        self._notify(ChangeKind.ADD, len(self._persons) - 1)

    def set_person(self, target: Person, edited: Person) -> None:
        """Replace ``target`` with ``edited`` at the same position.

        Raises
        ------
        PersonNotFoundError
            If no element equals ``target``.
        DuplicatePersonError
            If ``edited`` takes the identity of another existing person.
        """
        self._require_editable()
        index = self._index_of(target)

        if not target.is_same_person(edited) and self.contains(edited):
            raise DuplicatePersonError(f"Person {edited.name!r} already exists")

        self._persons[index] = edited
        logger.debug("Replaced person at %d with %r", index, edited.name)
        self._notify(ChangeKind.REPLACE, index)

    def remove(self, person: Person) -> None:
        """Remove the element equal to ``person`` in every field."""
        self._require_editable()
        index = self._index_of(person)

        del self._persons[index]
        logger.debug("Removed person %r", person.name)
        self._notify(ChangeKind.REMOVE, index)

    def set_persons(self, persons: Iterable[Person] | PersonRegistry) -> None:
        """Replace the whole contents, keeping the order of ``persons``."""
        self._require_editable()
        if isinstance(persons, PersonRegistry):
            replacement = list(persons._persons)
        else:
            replacement = list(persons)

        if not _persons_are_unique(replacement):
            raise DuplicatePersonError("Persons list contains duplicate persons")

        self._persons[:] = replacement
        logger.debug("Reset registry with %d persons", len(replacement))
        self._notify(ChangeKind.RESET)

    def sort(
        self,
        sort_key: SortKey | str = SortKey.NAME,
        order: SortOrder | str = SortOrder.ASC,
        today: date | None = None,
    ) -> None:
        """Reorder persons by name, most overdue loan or total amount owed.

        Unknown sort keys fall back to sorting by name. Sorting is stable
        in both directions.
        """
        self._require_editable()
        key = _sort_key_function(sort_key, today)

        self._persons.sort(key=key, reverse=order == SortOrder.DESC)
        logger.debug("Sorted registry by %s (%s)", sort_key, order)
        self._notify(ChangeKind.SORT)

    def filter(self, index: int, predicate: LoanPredicate) -> None:
        """Filter the loans of the person at ``index``, or of everyone.

        Parameters
        ----------
        index : int
            Person position, or ``ALL_PERSONS``.
        predicate : LoanPredicate
            Loans failing the predicate are hidden, not deleted.
        """
        self._require_editable()
        if index == ALL_PERSONS:
            targets = list(self._persons)
        elif 0 <= index < len(self._persons):
            targets = [self._persons[index]]
        else:
            raise IndexOutOfRangeError(f"Person index {index} out of range")

        for person in targets:
            person.loans.filter(predicate)
        self.refresh()

    def refresh(self) -> None:
        """Tell listeners to re-render without changing the contents."""
        if not self._persons:
            return
        self._notify(ChangeKind.REFRESH)

    def _index_of(self, person: Person) -> int:
        try:
            return self._persons.index(person)
        except ValueError:
            raise PersonNotFoundError(f"Person {person.name!r} not found") from None

    # Container protocol

    def __iter__(self) -> Iterator[Person]:
        return iter(self._persons)

    def __len__(self) -> int:
        return len(self._persons)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PersonRegistry):
            return NotImplemented
        return self._persons == other._persons

    def __repr__(self) -> str:
        return f"PersonRegistry({self._persons!r})"


def _sort_key_function(sort_key: SortKey | str, today: date | None) -> Callable[[Person], Any]:
    try:
        resolved = SortKey(sort_key)
    except ValueError:
        logger.warning("Unknown sort key %r, sorting by name", sort_key)
        resolved = SortKey.NAME

    if resolved is SortKey.OVERDUE:
        return lambda person: person.loans.get_most_overdue_months(today)
    if resolved is SortKey.AMOUNT:
        return lambda person: person.loans.get_total_loan_owed()
    return lambda person: person.name


def _persons_are_unique(persons: list[Person]) -> bool:
    for i, person in enumerate(persons):
        for other in persons[i + 1 :]:
            if person.is_same_person(other):
                return False
    return True
