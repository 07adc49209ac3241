"""Task workflows with semantic checks, an intermediate representation and simulated execution."""

__version__ = "0.1.0"
__all__ = ["model", "ir", "executor", "checks"]