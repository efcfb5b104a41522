"""Feature workflow service for spec-cli.

Runs the two multi-step git workflows:

- create: pick a unique slug, branch off, scaffold docs and test files, commit
- merge: bring a feature branch into the merge target and push

Each step is reported to an optional StepTracker so commands can show
progress; failures mark the current step failed and propagate unchanged.

Key Classes:
    WorkflowService: create_feature / merge_feature for one repository
    CreateResult, MergeResult: what each workflow produced
"""

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path

from spec_cli.config.messages import ERROR_MESSAGES, STEP_MESSAGES
from spec_cli.config.settings import LLMSettings, get_llm_settings
from spec_cli.constants import SCAFFOLD_COMMIT_MESSAGE
from spec_cli.exceptions import ConfigurationError, PreconditionError
from spec_cli.generation.base import SlugGenerator
from spec_cli.generation.factory import create_generator
from spec_cli.generation.retry import BackoffPolicy, SlugRetryController, exponential_backoff
from spec_cli.generation.validation import is_valid_slug
from spec_cli.models.config import SpecConfig
from spec_cli.services.config_service import ConfigService
from spec_cli.services.feature_service import FeatureService
from spec_cli.services.git_service import GitService
from spec_cli.services.slug_service import SlugResolver
from spec_cli.utils.step_tracker import StepTracker

logger = logging.getLogger(__name__)

CREATE_STEPS = 5
MERGE_STEPS = 5


@dataclass
class CreateResult:
    """Outcome of creating a feature."""

    slug: str
    branch: str
    commit_hash: str
    doc_files: list[Path] = field(default_factory=list)
    scaffold_paths: list[Path] = field(default_factory=list)


@dataclass
class MergeResult:
    """Outcome of merging a feature."""

    slug: str
    branch: str
    target: str
    commit_hash: str
    upstream: str | None = None


class WorkflowService:
    """Create and merge features in one repository.

    Example:
        >>> workflow = WorkflowService(repo_root)
        >>> result = workflow.create_feature("Add password reset via email")
        >>> result.branch
        'feature-add-password-reset-email'
    """

    def __init__(
        self,
        repo_root: Path,
        config: SpecConfig | None = None,
        git: GitService | None = None,
        settings: LLMSettings | None = None,
        generator_factory: Callable[[LLMSettings], SlugGenerator] = create_generator,
        backoff: BackoffPolicy = exponential_backoff,
    ):
        """Initialize workflow service.

        Args:
            repo_root: Repository root directory
            config: Configuration (loaded from spec.config.yaml when omitted)
            git: Git service (created for repo_root when omitted)
            settings: Generator settings (read from the environment when omitted)
            generator_factory: Builds the slug generator from settings
            backoff: Delay policy between generation attempts
        """
        self.repo_root = repo_root
        self._config = config
        self.git = git or GitService(repo_root)
        self._settings = settings
        self.generator_factory = generator_factory
        self.backoff = backoff

    @property
    def config(self) -> SpecConfig:
        """Configuration, loaded on first use."""
        if self._config is None:
            self._config = ConfigService(self.repo_root).load_config()
        return self._config

    @property
    def settings(self) -> LLMSettings:
        """Generator settings, read on first use."""
        if self._settings is None:
            self._settings = get_llm_settings()
        return self._settings

    # -------------------------------------------------------------------------
    # Preflight
    # -------------------------------------------------------------------------

    def ensure_clean(self) -> None:
        """Raise PreconditionError if the working tree has changes."""
        if not self.git.is_clean():
            raise PreconditionError(ERROR_MESSAGES["dirty_tree"])

    def preflight_merge(self, feature_branch: str, target_branch: str) -> None:
        """Check the tree is clean and both branches exist locally."""
        self.ensure_clean()
        if not self.git.branch_exists(feature_branch):
            raise PreconditionError(
                ERROR_MESSAGES["feature_branch_missing"].format(branch=feature_branch)
            )
        if not self.git.branch_exists(target_branch):
            raise PreconditionError(
                ERROR_MESSAGES["target_branch_missing"].format(branch=target_branch)
            )

    # -------------------------------------------------------------------------
    # Workflows
    # -------------------------------------------------------------------------

    def create_feature(self, description: str, tracker: StepTracker | None = None) -> CreateResult:
        """Create a feature branch with documentation and scaffold files.

        Args:
            description: Free-text feature description
            tracker: Optional progress display

        Returns:
            CreateResult with the slug, branch, commit and created paths

        Raises:
            PreconditionError: Dirty tree or missing API key
            ConfigurationError: Missing or invalid configuration
            SlugGenerationError: No usable slug could be produced
            GitError: A git command failed
        """
        tracker = tracker or StepTracker(CREATE_STEPS, enabled=False)

        self.ensure_clean()
        config = self.config
        features = FeatureService(self.repo_root, config)

        generator = self.generator_factory(self.settings)
        try:
            with _step(tracker, STEP_MESSAGES["generate_slug"]):
                controller = SlugRetryController(
                    generator, self.settings.max_attempts, backoff=self.backoff
                )
                resolver = SlugResolver(controller, features, self.git, config)
                slug = resolver.resolve(description)
        finally:
            close = getattr(generator, "close", None)
            if callable(close):
                close()

        branch = config.branch_name(slug)
        with _step(tracker, STEP_MESSAGES["create_branch"]):
            self.git.switch(branch, create=True)

        with _step(tracker, STEP_MESSAGES["create_docs"]):
            doc_files = features.create_feature_docs(slug)

        with _step(tracker, STEP_MESSAGES["create_scaffold"]):
            scaffold_paths = features.create_scaffold_paths(slug)

        with _step(tracker, STEP_MESSAGES["commit"]):
            self.git.add(features.relative_paths([*doc_files, *scaffold_paths]))
            commit_hash = self.git.commit(SCAFFOLD_COMMIT_MESSAGE.format(slug=slug))

        logger.info(f"Created feature '{slug}' on branch '{branch}' ({commit_hash})")
        return CreateResult(
            slug=slug,
            branch=branch,
            commit_hash=commit_hash,
            doc_files=doc_files,
            scaffold_paths=scaffold_paths,
        )

    def merge_feature(self, slug: str, tracker: StepTracker | None = None) -> MergeResult:
        """Merge a feature branch into the default merge target and push.

        Args:
            slug: Feature slug
            tracker: Optional progress display

        Returns:
            MergeResult with the merge commit and upstream

        Raises:
            ConfigurationError: Invalid slug, missing or invalid configuration
            PreconditionError: Dirty tree or a missing branch
            GitError: A git command failed (MERGE_FAILED on conflicts)
        """
        if not is_valid_slug(slug):
            raise ConfigurationError(ERROR_MESSAGES["invalid_slug"].format(slug=slug))

        tracker = tracker or StepTracker(MERGE_STEPS, enabled=False)
        config = self.config
        feature_branch = config.branch_name(slug)
        target = config.default_merge_target

        with _step(tracker, STEP_MESSAGES["preflight"]):
            self.preflight_merge(feature_branch, target)

        with _step(tracker, STEP_MESSAGES["switch_target"].format(target=target)):
            self.git.switch(target)

        with _step(tracker, STEP_MESSAGES["pull"]):
            self.git.pull()

        with _step(tracker, STEP_MESSAGES["merge"].format(branch=feature_branch)):
            commit_hash = self.git.merge(feature_branch)

        with _step(tracker, STEP_MESSAGES["push"]):
            self.git.push()

        upstream = self.git.upstream(target)
        logger.info(f"Merged '{feature_branch}' into '{target}' ({commit_hash})")
        return MergeResult(
            slug=slug,
            branch=feature_branch,
            target=target,
            commit_hash=commit_hash,
            upstream=upstream,
        )


@contextmanager
def _step(tracker: StepTracker, message: str) -> Iterator[None]:
    tracker.start_step(message)
    try:
        yield
    except Exception as e:
        tracker.fail_step(error=str(e))
        raise
    tracker.complete_step()
