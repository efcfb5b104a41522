"""Path constants for spec-cli.

This module defines the file names spec-cli reads and writes inside a
repository. Feature directories themselves are config-driven (docs_dir).
"""

CONFIG_FILE = "spec.config.yaml"

# Files written into a fresh docs/<slug>/ directory when none are configured
DEFAULT_DOC_TEMPLATES: tuple[str, ...] = (
    "requirements.md",
    "tech-spec.md",
    "user-stories.md",
)

DEFAULT_DOCS_DIR = "docs"
DEFAULT_BRANCH_FORMAT = "feature-{slug}"
DEFAULT_MERGE_TARGET = "main"

SLUG_PLACEHOLDER = "{slug}"
