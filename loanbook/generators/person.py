"""Person generator for sample registries."""

from __future__ import annotations

import random
from typing import Iterator

from loanbook.generators.base import BaseGenerator
from loanbook.models import Person


class PersonGenerator(BaseGenerator):
    """Generate synthetic contacts without loans."""

    TAGS = ["friends", "family", "colleagues", "neighbours", "classmates"]

    def generate(self) -> Person:
        """Generate a single person.

        Returns
        -------
        Person
            Generated person with an empty loan collection.
        """
        return Person(
            name=self.fake.name(),
            phone=self.fake.numerify("########"),
            email=self.fake.email(),
            address=self.fake.address().replace("\n", ", "),
            tags=frozenset(random.sample(self.TAGS, k=random.randint(0, 2))),
        )

    def generate_batch(self, count: int) -> Iterator[Person]:
        """Generate ``count`` persons (names may repeat)."""
        for _ in range(count):
            yield self.generate()
