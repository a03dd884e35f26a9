"""Person registry and loan interest engine."""

__version__ = "0.1.0"
