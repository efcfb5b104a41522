"""Feature service for spec-cli.

Owns the on-disk side of a feature: its documentation folder under
``docs_dir`` and the scaffold files expanded from ``scaffold_paths``.

Key Classes:
    FeatureService: list existing features, plan and create scaffolding
    ScaffoldPlan: result of expanding scaffold templates for one slug
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from spec_cli.config.messages import ERROR_MESSAGES
from spec_cli.config.paths import SLUG_PLACEHOLDER
from spec_cli.exceptions import ConfigurationError
from spec_cli.generation.validation import is_valid_slug
from spec_cli.models.config import SpecConfig
from spec_cli.utils.file_utils import ensure_dir, is_within, list_dirs, write_file

logger = logging.getLogger(__name__)


@dataclass
class ScaffoldPlan:
    """Scaffold templates expanded for one slug.

    Attributes:
        valid: True when no expanded path conflicts
        conflicts: Expanded templates that escape the repository or already exist
        paths: Absolute target paths, in template order
    """

    valid: bool
    conflicts: list[str] = field(default_factory=list)
    paths: list[Path] = field(default_factory=list)


def expand_template(template: str, slug: str) -> str:
    """Substitute the slug into a path or branch template."""
    return template.replace(SLUG_PLACEHOLDER, slug)


class FeatureService:
    """Service for feature documentation folders and scaffold files."""

    def __init__(self, repo_root: Path, config: SpecConfig):
        """Initialize feature service.

        Args:
            repo_root: Repository root directory
            config: Loaded spec-cli configuration
        """
        self.repo_root = repo_root
        self.config = config
        self.docs_dir = repo_root / config.docs_dir

    # -------------------------------------------------------------------------
    # Documentation store
    # -------------------------------------------------------------------------

    def list_feature_slugs(self) -> list[str]:
        """List existing features.

        Returns:
            Names of directories directly under docs_dir that are valid slugs,
            sorted ascending. Empty if docs_dir does not exist.
        """
        return sorted(d.name for d in list_dirs(self.docs_dir) if is_valid_slug(d.name))

    def feature_exists(self, slug: str) -> bool:
        """Check whether a documentation folder for the slug exists."""
        return (self.docs_dir / slug).exists()

    def get_feature_dir(self, slug: str) -> Path:
        """Get the documentation folder for a slug."""
        return self.docs_dir / slug

    # -------------------------------------------------------------------------
    # Scaffold planning
    # -------------------------------------------------------------------------

    def plan_scaffold_paths(self, slug: str, templates: list[str] | None = None) -> ScaffoldPlan:
        """Expand scaffold templates for a slug and check each target.

        A template conflicts when its expanded path resolves to the repository
        root itself, outside of it, or to something that already exists.

        Args:
            slug: Candidate slug
            templates: Templates to expand (defaults to config.scaffold_paths)

        Returns:
            ScaffoldPlan with every conflict listed
        """
        templates = self.config.scaffold_paths if templates is None else templates
        conflicts: list[str] = []
        paths: list[Path] = []

        for template in templates:
            expanded = expand_template(template, slug)
            target = self.repo_root / expanded
            paths.append(target)

            if not is_within(target, self.repo_root):
                logger.debug(f"Scaffold path escapes repository root: {expanded}")
                conflicts.append(expanded)
                continue

            if target.exists():
                conflicts.append(expanded)

        return ScaffoldPlan(valid=not conflicts, conflicts=conflicts, paths=paths)

    # -------------------------------------------------------------------------
    # Scaffolding
    # -------------------------------------------------------------------------

    def create_feature_docs(self, slug: str) -> list[Path]:
        """Create the documentation folder and an empty file per doc template.

        Returns:
            Created file paths

        Raises:
            ConfigurationError: If a template does not name a file directly
                inside the feature folder
        """
        feature_dir = self.get_feature_dir(slug)
        resolved_dir = feature_dir.resolve()
        for template in self.config.doc_templates:
            if (feature_dir / template).resolve().parent != resolved_dir:
                raise ConfigurationError(
                    ERROR_MESSAGES["doc_template_escapes"].format(template=template)
                )

        ensure_dir(feature_dir)
        created: list[Path] = []
        for template in self.config.doc_templates:
            path = feature_dir / template
            write_file(path, "")
            created.append(path)

        logger.debug(f"Created {len(created)} documentation files in {feature_dir}")
        return created

    def create_scaffold_paths(self, slug: str) -> list[Path]:
        """Create scaffold targets for a slug.

        Templates ending in '/' become directories, anything else an empty
        file with its parent directories.

        Returns:
            Created paths
        """
        created: list[Path] = []
        for template in self.config.scaffold_paths:
            target = self.repo_root / expand_template(template, slug)
            if template.endswith("/"):
                ensure_dir(target)
            else:
                write_file(target, "")
            created.append(target)

        logger.debug(f"Created {len(created)} scaffold paths for '{slug}'")
        return created

    def relative_paths(self, paths: list[Path]) -> list[str]:
        """Express paths relative to the repository root (for git add)."""
        return [p.relative_to(self.repo_root).as_posix() for p in paths]
