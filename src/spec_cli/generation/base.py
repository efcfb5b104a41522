"""Slug generator interface.

A slug generator turns a free-text feature description into a raw candidate
slug. Generators are untrusted: whatever they return is validated and checked
for collisions by the callers in this package and in SlugResolver.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class SlugGenerator(Protocol):
    """Protocol for anything that can propose a slug.

    Implementations only need a matching ``generate`` method; the hosted
    model client, the offline keyword generator and test stubs all satisfy
    it structurally.
    """

    def generate(
        self,
        description: str,
        excluded: Sequence[str],
        feedback: str | None = None,
    ) -> str:
        """Propose a slug for a feature description.

        Args:
            description: Free-text feature description (untrusted).
            excluded: Slugs known to be unusable. Advisory only.
            feedback: Why the previous candidate was rejected, if any.

        Returns:
            Raw candidate text.

        Raises:
            GeneratorBackendError: If the backend call fails.
        """
        ...


@dataclass(frozen=True)
class GenerationAttempt:
    """One pass through the generation retry loop."""

    attempt_number: int
    candidate: str | None
    rejection_reason: str | None = None

    @property
    def accepted(self) -> bool:
        """Whether this attempt produced the returned slug."""
        return self.candidate is not None and self.rejection_reason is None
