"""Check result domain model."""

from enum import Enum


class CheckResult(str, Enum):
    """Outcome of a single redirect check."""

    CONTINUE = "continue"
    HALT = "halt"
