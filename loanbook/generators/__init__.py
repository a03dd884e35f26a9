"""Sample data generators."""

from loanbook.generators.loan import LoanGenerator
from loanbook.generators.person import PersonGenerator
from loanbook.generators.sample import build_sample_registry

__all__ = ["LoanGenerator", "PersonGenerator", "build_sample_registry"]
