"""Tests for the offline keyword slug generator."""

import pytest

from spec_cli.generation.base import SlugGenerator
from spec_cli.generation.local import KeywordSlugGenerator, slugify_description
from spec_cli.generation.validation import is_valid_slug


@pytest.mark.parametrize(
    "description,expected",
    [
        ("Add dark mode toggle", "add-dark-mode-toggle"),
        ("Add the password reset flow for users", "add-password-reset-flow-users"),
        ("  Export   CSV, then e-mail it!  ", "export-csv-then-e-mail"),
        ("Café menu", "cafe-menu"),
        ("OAuth2 login", "oauth2-login"),
        ("   ", "feature"),
        ("the and of", "feature"),
    ],
)
def test_slugify_description(description: str, expected: str) -> None:
    assert slugify_description(description) == expected


def test_slugify_respects_length_limit() -> None:
    slug = slugify_description("internationalization " * 5)
    assert len(slug) <= 50
    assert is_valid_slug(slug)


def test_slugify_truncates_single_long_word() -> None:
    slug = slugify_description("x" * 80)
    assert slug == "x" * 50


def test_keyword_generator_satisfies_protocol() -> None:
    assert isinstance(KeywordSlugGenerator(), SlugGenerator)


def test_keyword_generator_returns_base_slug() -> None:
    generator = KeywordSlugGenerator()
    assert generator.generate("Add dark mode", []) == "add-dark-mode"


def test_keyword_generator_avoids_excluded_slugs() -> None:
    generator = KeywordSlugGenerator()
    first = generator.generate("Add dark mode", ["add-dark-mode"])
    second = generator.generate("Add dark mode", ["add-dark-mode", first])

    assert first.startswith("add-dark-mode-")
    assert second != first
    assert second not in {"add-dark-mode", first}
    assert is_valid_slug(first) and is_valid_slug(second)


def test_keyword_generator_suffix_fits_length_limit() -> None:
    generator = KeywordSlugGenerator()
    base = slugify_description("internationalization localization translation pipeline")
    candidate = generator.generate(
        "internationalization localization translation pipeline", [base]
    )
    assert len(candidate) <= 50
    assert is_valid_slug(candidate)
