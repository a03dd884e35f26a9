#!/usr/bin/env python3
"""Generate a sample person registry and print it.

Builds a registry of unique Faker-generated persons with random simple and
compound interest loans, optionally sorts it, and prints either the save
strings or a JSON export.
"""

import argparse
import json

from loanbook.config import LoanBookConfig
from loanbook.generators import build_sample_registry
from loanbook.logging import get_logger, setup_logging
from loanbook.models import SortKey, SortOrder
from loanbook.serialization import to_dict

logger = get_logger(__name__)


def main() -> None:
    """Parse arguments and print a sample registry."""
    parser = argparse.ArgumentParser(description="Generate a sample loan book")
    parser.add_argument("--persons", type=int, help="Number of persons (default: from env or 6)")
    parser.add_argument("--max-loans", type=int, help="Maximum loans per person")
    parser.add_argument("--seed", type=int, help="Random seed")
    parser.add_argument(
        "--sort",
        choices=[key.value for key in SortKey],
        help="Sort key applied before printing",
    )
    parser.add_argument(
        "--order",
        choices=[order.value for order in SortOrder],
        default=SortOrder.ASC.value,
        help="Sort order (default: asc)",
    )
    parser.add_argument(
        "--format",
        choices=["save", "json"],
        default="save",
        help="Output format (default: save)",
    )
    args = parser.parse_args()

    config = LoanBookConfig.from_env()
    if args.persons is not None:
        config.sample.num_persons = args.persons
    if args.max_loans is not None:
        config.sample.max_loans_per_person = args.max_loans
    if args.seed is not None:
        config.sample.seed = args.seed

    setup_logging(config.logging.level, config.logging.format_type)

    registry = build_sample_registry(config.sample)
    if args.sort:
        registry.sort(args.sort, args.order)
        logger.info("Sorted by %s %s", args.sort, args.order)

    if args.format == "json":
        print(json.dumps([to_dict(person) for person in registry], indent=2, ensure_ascii=False))
    else:
        for person in registry:
            print(person.to_save_string())
            print()


if __name__ == "__main__":
    main()
