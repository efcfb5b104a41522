"""Unique slug resolution for new features.

SlugResolver is the authority on whether a slug can be used. It asks the
generation retry loop for candidates and checks each one, in order, against:

    1. docs     - a documentation folder with that name exists
    2. branch   - the branch built from branch_format exists
    3. scaffold - an expanded scaffold path exists or leaves the repository

The first collision rejects the candidate; rejected candidates join the
session's excluded set so later prompts steer away from them. Errors from the
retry loop (GenerationExhausted, TransportFailure) propagate unchanged.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from spec_cli.config.messages import ERROR_MESSAGES
from spec_cli.constants import DEFAULT_UNIQUENESS_ATTEMPTS
from spec_cli.exceptions import UniquenessExhausted
from spec_cli.generation.retry import SlugRetryController
from spec_cli.models.enums import CollisionSource, RetryState
from spec_cli.services.feature_service import ScaffoldPlan

logger = logging.getLogger(__name__)


class FeatureStore(Protocol):
    """Documentation store and scaffold planner consulted for collisions."""

    def list_feature_slugs(self) -> list[str]: ...

    def feature_exists(self, slug: str) -> bool: ...

    def plan_scaffold_paths(self, slug: str) -> ScaffoldPlan: ...


class BranchLookup(Protocol):
    """Branch namespace consulted for collisions."""

    def branch_exists(self, branch_name: str) -> bool: ...


class BranchNamer(Protocol):
    """Anything that maps a slug to its feature branch name."""

    def branch_name(self, slug: str) -> str: ...


@dataclass(frozen=True)
class Rejection:
    """A candidate that collided with an existing artifact."""

    candidate: str
    source: CollisionSource
    detail: str


class ExcludedSlugs:
    """Ordered, duplicate-free set of slugs unusable for this session."""

    def __init__(self, initial: Sequence[str] = ()):
        self._items: list[str] = []
        self._lookup: set[str] = set()
        for slug in initial:
            self.add(slug)

    def add(self, slug: str) -> None:
        if slug not in self._lookup:
            self._lookup.add(slug)
            self._items.append(slug)

    def __contains__(self, slug: object) -> bool:
        return slug in self._lookup

    def __len__(self) -> int:
        return len(self._items)

    def as_list(self) -> list[str]:
        return list(self._items)


class SlugResolver:
    """Find a slug that is free in docs, branches and scaffold paths.

    Example:
        >>> resolver = SlugResolver(controller, features, git, config)
        >>> resolver.resolve("Add dark mode toggle")
        'add-dark-mode-toggle'
    """

    def __init__(
        self,
        controller: SlugRetryController,
        features: FeatureStore,
        branches: BranchLookup,
        namer: BranchNamer,
    ):
        """Initialize the resolver.

        Args:
            controller: Retry loop that produces valid candidates
            features: Documentation store and scaffold planner
            branches: Branch existence lookup
            namer: Builds the branch name for a slug (usually SpecConfig)
        """
        self.controller = controller
        self.features = features
        self.branches = branches
        self.namer = namer
        self.state = RetryState.ATTEMPTING
        self.rejections: list[Rejection] = []

    def find_collision(self, candidate: str) -> Rejection | None:
        """Check a candidate against every collision source, in order.

        Returns:
            The first collision found, or None when the candidate is free
        """
        if self.features.feature_exists(candidate):
            return Rejection(candidate, CollisionSource.DOCS, "documentation folder exists")

        branch_name = self.namer.branch_name(candidate)
        if self.branches.branch_exists(branch_name):
            return Rejection(candidate, CollisionSource.BRANCH, f"branch '{branch_name}' exists")

        plan = self.features.plan_scaffold_paths(candidate)
        if not plan.valid:
            return Rejection(
                candidate,
                CollisionSource.SCAFFOLD,
                f"scaffold path conflicts: {', '.join(plan.conflicts)}",
            )

        return None

    def resolve(self, description: str, max_attempts: int = DEFAULT_UNIQUENESS_ATTEMPTS) -> str:
        """Generate a slug that collides with nothing in the repository.

        Args:
            description: Free-text feature description
            max_attempts: Candidates to try before giving up

        Returns:
            Accepted slug

        Raises:
            UniquenessExhausted: No candidate cleared all checks
            GenerationExhausted: The retry loop could not produce a valid slug
            TransportFailure: The generator backend failed on its last attempt
        """
        self.state = RetryState.ATTEMPTING
        self.rejections = []
        excluded = ExcludedSlugs(self.features.list_feature_slugs())
        logger.debug(f"Resolving slug with {len(excluded)} existing features excluded")

        for attempt in range(1, max_attempts + 1):
            self.state = RetryState.ATTEMPTING
            candidate = self.controller.generate(description, excluded.as_list())

            rejection = self.find_collision(candidate)
            if rejection is None:
                self.state = RetryState.SUCCEEDED
                logger.info(f"Resolved slug '{candidate}' after {attempt} attempt(s)")
                return candidate

            logger.debug(
                f"Candidate '{candidate}' rejected ({rejection.source.value}): {rejection.detail}"
            )
            self.rejections.append(rejection)
            excluded.add(candidate)
            self.state = RetryState.RETRYING

        self.state = RetryState.EXHAUSTED
        raise UniquenessExhausted(
            ERROR_MESSAGES["uniqueness_exhausted"].format(attempts=max_attempts),
            attempts=max_attempts,
            rejected=[r.candidate for r in self.rejections],
        )
