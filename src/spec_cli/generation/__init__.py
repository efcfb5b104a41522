"""Slug generation for new features.

A SlugGenerator proposes raw candidates; SlugRetryController validates them
and retries with feedback and exponential backoff. Uniqueness against the
repository (docs, branches, scaffold paths) is checked one level up by
spec_cli.services.slug_service.SlugResolver.
"""

from spec_cli.generation.base import GenerationAttempt, SlugGenerator
from spec_cli.generation.factory import create_generator
from spec_cli.generation.local import KeywordSlugGenerator, slugify_description
from spec_cli.generation.openai_compat import OpenAICompatGenerator, build_prompt
from spec_cli.generation.retry import (
    SlugRetryController,
    exponential_backoff,
    no_backoff,
)
from spec_cli.generation.validation import describe_rejection, is_valid_slug, validate_slug

__all__ = [
    "GenerationAttempt",
    "KeywordSlugGenerator",
    "OpenAICompatGenerator",
    "SlugGenerator",
    "SlugRetryController",
    "build_prompt",
    "create_generator",
    "describe_rejection",
    "exponential_backoff",
    "is_valid_slug",
    "no_backoff",
    "slugify_description",
    "validate_slug",
]
