"""Offline slug generator.

Derives a slug from the words of the description without any network call.
Used when SPEC_LLM_PROVIDER=local, e.g. on machines without API access.
"""

import hashlib
import re
import unicodedata
from collections.abc import Sequence

from spec_cli.constants import (
    LOCAL_SLUG_HASH_LENGTH,
    LOCAL_SLUG_MAX_WORDS,
    MAX_SLUG_LENGTH,
    SLUG_STOPWORDS,
)

_WORD_RE = re.compile(r"[a-z0-9]+")

FALLBACK_SLUG = "feature"


def slugify_description(description: str, max_words: int = LOCAL_SLUG_MAX_WORDS) -> str:
    """Build a kebab-case slug from the leading meaningful words.

    Accents are folded to ASCII, filler words are dropped, and the result is
    cut at a word boundary so it fits MAX_SLUG_LENGTH.

    Examples:
        >>> slugify_description("Add the Password reset flow for users")
        'add-password-reset-flow-users'
        >>> slugify_description("   ")
        'feature'
    """
    folded = unicodedata.normalize("NFKD", description).encode("ascii", "ignore").decode("ascii")
    words = [w for w in _WORD_RE.findall(folded.lower()) if w not in SLUG_STOPWORDS]
    if not words:
        return FALLBACK_SLUG

    slug = ""
    for word in words[:max_words]:
        extended = f"{slug}-{word}" if slug else word
        if len(extended) > MAX_SLUG_LENGTH:
            break
        slug = extended
    # A single word longer than the limit is truncated outright
    return slug or words[0][:MAX_SLUG_LENGTH]


def _suffixed(base: str, salt: str) -> str:
    digest = hashlib.sha1(salt.encode("utf-8")).hexdigest()[:LOCAL_SLUG_HASH_LENGTH]
    room = MAX_SLUG_LENGTH - LOCAL_SLUG_HASH_LENGTH - 1
    trimmed = base[:room].rstrip("-")
    return f"{trimmed}-{digest}"


class KeywordSlugGenerator:
    """Deterministic slug generator. Satisfies the SlugGenerator protocol.

    The first proposal is the keyword slug. When that slug is excluded, a
    short hash suffix derived from the description and the size of the
    excluded set is appended, so every retry with a grown excluded set gets
    a fresh candidate.
    """

    def generate(
        self,
        description: str,
        excluded: Sequence[str],
        feedback: str | None = None,
    ) -> str:
        base = slugify_description(description)
        if base not in excluded:
            return base

        taken = set(excluded)
        for counter in range(len(taken), len(taken) + 100):
            candidate = _suffixed(base, f"{description}\x00{counter}")
            if candidate not in taken:
                return candidate
        return _suffixed(base, description)
