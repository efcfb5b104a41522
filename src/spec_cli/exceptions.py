"""Custom exceptions for spec-cli.

This module defines a hierarchy of exceptions for consistent error handling
across services and commands. All exceptions inherit from SpecError, allowing
callers to catch every spec-cli error with a single except clause if desired.

Exception hierarchy:
    SpecError (base)
    ├── ConfigurationError
    ├── PreconditionError
    ├── GitError
    └── SlugGenerationError
        ├── GeneratorBackendError
        ├── GenerationExhausted
        ├── TransportFailure
        └── UniquenessExhausted

Commands map each branch of the hierarchy to a distinct exit code (see
spec_cli.utils.command_decorators.handle_spec_errors).
"""

from pathlib import Path
from typing import Any

from spec_cli.models.enums import ExitCode


class SpecError(Exception):
    """Base exception for all spec-cli errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional context.
    """

    exit_code: ExitCode = ExitCode.UNKNOWN_ERROR

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """Initialize spec error.

        Args:
            message: Error description.
            details: Optional dictionary with additional context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation."""
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(SpecError):
    """Raised when the configuration file is missing or invalid.

    Examples:
        - spec.config.yaml not found
        - Invalid YAML syntax
        - A scaffold path without {slug}
    """

    exit_code = ExitCode.CONFIG_ERROR

    def __init__(self, message: str, config_file: Path | None = None):
        """Initialize configuration error.

        Args:
            message: Error description.
            config_file: Path to the problematic config file.
        """
        details = {}
        if config_file:
            details["config_file"] = str(config_file)
        super().__init__(message, details)
        self.config_file = config_file


# =============================================================================
# Precondition Errors
# =============================================================================


class PreconditionError(SpecError):
    """Raised when the environment is not ready for a command.

    Examples:
        - Not inside a git repository
        - Working tree has uncommitted changes
        - Feature or target branch missing
        - OPENAI_API_KEY not set
    """

    exit_code = ExitCode.PRECHECK_FAILED

    def __init__(self, message: str, exit_code: ExitCode | None = None):
        """Initialize precondition error.

        Args:
            message: Error description.
            exit_code: Override for the default PRECHECK_FAILED exit code.
        """
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


# =============================================================================
# Git Errors
# =============================================================================


class GitError(SpecError):
    """Raised when a git command fails.

    Attributes:
        code: Failure category (SWITCH_FAILED, MERGE_FAILED, ...).
        hint: Optional suggestion shown to the user.
    """

    exit_code = ExitCode.GIT_ERROR

    def __init__(self, code: str, message: str, hint: str | None = None):
        """Initialize git error.

        Args:
            code: Failure category.
            message: Error description (usually git's stderr).
            hint: Optional suggestion for the user.
        """
        super().__init__(message)
        self.code = code
        self.hint = hint


# =============================================================================
# Slug Generation Errors
# =============================================================================


class SlugGenerationError(SpecError):
    """Base for every failure to obtain a usable feature slug."""

    exit_code = ExitCode.LLM_ERROR


class GeneratorBackendError(SlugGenerationError):
    """Raised by a slug generator when a single backend call fails.

    Examples:
        - Network error or timeout
        - Non-2xx response from the model API
        - Response without any message content
    """


class GenerationExhausted(SlugGenerationError):
    """Raised when every generation attempt produced an invalid or taken slug.

    Attributes:
        attempts: The attempt budget that was consumed.
        last_reason: Why the final attempt was rejected, if any attempt ran.
    """

    def __init__(self, message: str, attempts: int, last_reason: str | None = None):
        super().__init__(message)
        self.attempts = attempts
        self.last_reason = last_reason


class TransportFailure(SlugGenerationError):
    """Raised when the backend call itself failed on the final permitted attempt."""

    def __init__(self, message: str, attempts: int, cause: Exception | None = None):
        super().__init__(message)
        self.attempts = attempts
        self.cause = cause


class UniquenessExhausted(SlugGenerationError):
    """Raised when no candidate cleared the docs, branch and scaffold checks.

    Attributes:
        attempts: The outer attempt budget that was consumed.
        rejected: Candidates rejected during the session, in order.
    """

    def __init__(self, message: str, attempts: int, rejected: list[str] | None = None):
        super().__init__(message)
        self.attempts = attempts
        self.rejected = rejected or []
