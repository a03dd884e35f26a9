"""Configuration management for loanbook."""

import os
from dataclasses import dataclass, field

from loanbook.exceptions import ConfigurationError


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format_type: str = "standard"


@dataclass
class SampleDataConfig:
    """Configuration for sample registry generation."""

    num_persons: int = 6
    max_loans_per_person: int = 3
    locale: str = "en_US"
    seed: int | None = None


@dataclass
class LoanBookConfig:
    """Main configuration for loanbook."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    sample: SampleDataConfig = field(default_factory=SampleDataConfig)

    @classmethod
    def from_env(cls) -> "LoanBookConfig":
        """Create config from environment variables."""
        logging_config = LoggingConfig(
            level=os.getenv("LOG_LEVEL", "INFO"),
            format_type=os.getenv("LOG_FORMAT", "standard"),
        )

        seed = os.getenv("SEED")
        sample = SampleDataConfig(
            num_persons=_env_int("SAMPLE_PERSONS", 6),
            max_loans_per_person=_env_int("SAMPLE_MAX_LOANS", 3),
            locale=os.getenv("FAKER_LOCALE", "en_US"),
            seed=_env_int("SEED", 0) if seed else None,
        )

        return cls(logging=logging_config, sample=sample)


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from e
