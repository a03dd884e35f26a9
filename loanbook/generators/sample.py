"""Sample registry construction."""

from __future__ import annotations

import random
from datetime import date

from loanbook.config import SampleDataConfig
from loanbook.exceptions import DuplicatePersonError
from loanbook.generators.loan import LoanGenerator
from loanbook.generators.person import PersonGenerator
from loanbook.logging import get_logger
from loanbook.store import PersonRegistry

logger = get_logger(__name__)

# Give up after this many generated names per requested person
_MAX_ATTEMPTS_FACTOR = 10


def build_sample_registry(
    config: SampleDataConfig | None = None,
    today: date | None = None,
) -> PersonRegistry:
    """Build a registry of unique sample persons holding random loans.

    Parameters
    ----------
    config : SampleDataConfig | None
        Sample size, locale and seed (defaults if omitted).
    today : date | None
        Reference date for loan schedules and payments.

    Returns
    -------
    PersonRegistry
        Editable registry with ``config.num_persons`` persons, or fewer if
        the locale keeps producing repeated names.
    """
    config = config or SampleDataConfig()
    person_gen = PersonGenerator(seed=config.seed, locale=config.locale)
    loan_gen = LoanGenerator(seed=config.seed, locale=config.locale)
    registry = PersonRegistry()

    attempts = 0
    max_attempts = config.num_persons * _MAX_ATTEMPTS_FACTOR
    while len(registry) < config.num_persons and attempts < max_attempts:
        attempts += 1
        person = person_gen.generate()
        try:
            registry.add(person)
        except DuplicatePersonError:
            logger.debug("Skipping repeated sample name %r", person.name)
            continue

        for _ in range(random.randint(0, config.max_loans_per_person)):
            person.loans.add(loan_gen.generate(today))

    logger.info("Built sample registry with %d persons", len(registry))
    return registry
