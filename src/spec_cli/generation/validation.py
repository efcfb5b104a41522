"""Slug grammar validation.

Pure functions, no I/O. A slug is lowercase alphanumerics separated by single
hyphens (no leading, trailing or doubled hyphens) and at most 50 characters.
"""

from spec_cli.constants import MAX_SLUG_LENGTH, SLUG_PATTERN, SLUG_PATTERN_TEXT
from spec_cli.models.enums import SlugValidation


def validate_slug(candidate: str) -> SlugValidation:
    """Check a candidate against the slug grammar and length bound.

    Rules are applied in order and the first failure wins:
    format first, then length.

    Args:
        candidate: Text proposed as a slug.

    Returns:
        SlugValidation outcome.
    """
    if not SLUG_PATTERN.fullmatch(candidate):
        return SlugValidation.INVALID_FORMAT
    if len(candidate) > MAX_SLUG_LENGTH:
        return SlugValidation.TOO_LONG
    return SlugValidation.VALID


def is_valid_slug(candidate: str) -> bool:
    """Return True when the candidate is a well-formed slug."""
    return validate_slug(candidate) is SlugValidation.VALID


def describe_rejection(candidate: str, outcome: SlugValidation) -> str | None:
    """Explain a failed validation in words a model can act on.

    Returns:
        Reason text, or None for a valid outcome.
    """
    if outcome is SlugValidation.INVALID_FORMAT:
        return f"Invalid format: slug must match pattern {SLUG_PATTERN_TEXT}"
    if outcome is SlugValidation.TOO_LONG:
        return (
            f"Too long: slug must be {MAX_SLUG_LENGTH} characters or less "
            f"(got {len(candidate)})"
        )
    return None
