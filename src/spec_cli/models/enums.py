"""Enum types for spec-cli.

This module provides type-safe enumerations for validation outcomes, retry
states and process exit codes. Using enums instead of string constants
provides:
- IDE autocomplete and type checking
- Exhaustive pattern matching
- Clear documentation of allowed values
"""

from enum import Enum, IntEnum


class SlugValidation(str, Enum):
    """Outcome of checking a candidate slug against the slug grammar."""

    VALID = "valid"
    INVALID_FORMAT = "invalid_format"
    TOO_LONG = "too_long"

    @classmethod
    def values(cls) -> list[str]:
        """Return list of all validation outcomes."""
        return [v.value for v in cls]


class RetryState(str, Enum):
    """States of the slug generation retry loop."""

    ATTEMPTING = "attempting"
    RETRYING = "retrying"
    SUCCEEDED = "succeeded"
    EXHAUSTED = "exhausted"


class CollisionSource(str, Enum):
    """Authorities a candidate slug must not collide with."""

    DOCS = "docs"  # docs/<slug>/ already exists
    BRANCH = "branch"  # branch_format with slug already exists
    SCAFFOLD = "scaffold"  # a scaffold path exists or escapes the repo


class ExitCode(IntEnum):
    """Process exit codes reported by the CLI."""

    SUCCESS = 0
    UNKNOWN_ERROR = 1
    CONFIG_ERROR = 2
    PRECHECK_FAILED = 3
    LLM_ERROR = 4
    GIT_ERROR = 5
