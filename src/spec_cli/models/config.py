"""Configuration models for spec-cli."""

from pathlib import Path, PurePosixPath
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from spec_cli.config.paths import (
    DEFAULT_BRANCH_FORMAT,
    DEFAULT_DOC_TEMPLATES,
    DEFAULT_DOCS_DIR,
    DEFAULT_MERGE_TARGET,
    SLUG_PLACEHOLDER,
)


def _is_unsafe_relative(path: str) -> bool:
    """Return True for absolute paths or paths that climb out with '..'."""
    normalized = path.replace("\\", "/")
    if normalized.startswith("/") or PurePosixPath(normalized).is_absolute():
        return True
    # Windows drive letters (C:/...) are absolute too
    if len(normalized) > 1 and normalized[1] == ":":
        return True
    return ".." in PurePosixPath(normalized).parts


class SpecConfig(BaseModel):
    """Main spec-cli configuration, stored in spec.config.yaml."""

    schema_version: int = Field(default=1, gt=0, description="Config schema version")
    docs_dir: str = Field(
        default=DEFAULT_DOCS_DIR,
        description="Directory holding one documentation folder per feature",
    )
    doc_templates: list[str] = Field(
        default_factory=lambda: list(DEFAULT_DOC_TEMPLATES),
        description="Files created in each new feature's documentation folder",
    )
    scaffold_paths: list[str] = Field(
        default_factory=list,
        description="Path templates containing {slug}; trailing '/' creates a directory",
    )
    branch_format: str = Field(
        default=DEFAULT_BRANCH_FORMAT,
        description="Feature branch name template containing {slug}",
    )
    default_merge_target: str = Field(
        default=DEFAULT_MERGE_TARGET,
        description="Branch that 'spec merge' merges features into",
    )

    @field_validator("docs_dir")
    @classmethod
    def _validate_docs_dir(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("docs_dir must not be empty")
        if _is_unsafe_relative(value):
            raise ValueError("docs_dir must be a relative path and not contain ..")
        return value

    @field_validator("doc_templates")
    @classmethod
    def _validate_doc_templates(cls, value: list[str]) -> list[str]:
        for name in value:
            if (
                not name.strip()
                or name in (".", "..")
                or "/" in name
                or "\\" in name
                or _is_unsafe_relative(name)
            ):
                raise ValueError(
                    "Each doc template must be a plain file name without path separators"
                )
        return value

    @field_validator("scaffold_paths")
    @classmethod
    def _validate_scaffold_paths(cls, value: list[str]) -> list[str]:
        for path in value:
            if SLUG_PLACEHOLDER not in path or _is_unsafe_relative(path):
                raise ValueError(
                    "Each scaffold path must be a relative path containing {slug} "
                    "and not contain .."
                )
        return value

    @field_validator("branch_format")
    @classmethod
    def _validate_branch_format(cls, value: str) -> str:
        if SLUG_PLACEHOLDER not in value:
            raise ValueError("branch_format must contain {slug}")
        return value

    @field_validator("default_merge_target")
    @classmethod
    def _validate_merge_target(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("default_merge_target must not be empty")
        return value

    def branch_name(self, slug: str) -> str:
        """Return the feature branch name for a slug."""
        return self.branch_format.replace(SLUG_PLACEHOLDER, slug)

    @classmethod
    def load(cls, config_path: Path) -> "SpecConfig":
        """Load configuration from file.

        Raises:
            yaml.YAMLError: If the file is not valid YAML
            pydantic.ValidationError: If values fail validation
            ValueError: If the document is not a mapping
        """
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if not data:
            return cls()
        if not isinstance(data, dict):
            raise ValueError("configuration must be a mapping")
        return cls(**data)

    def save(self, config_path: Path) -> None:
        """Save configuration to file."""

        # Custom representer to keep short lists inline (more readable)
        class InlineListDumper(yaml.SafeDumper):
            pass

        def represent_list(dumper: yaml.SafeDumper, data: list[Any]) -> yaml.nodes.Node:
            # Keep short lists (≤3 items) inline, longer ones multi-line
            if len(data) <= 3:
                return dumper.represent_sequence("tag:yaml.org,2002:seq", data, flow_style=True)
            return dumper.represent_sequence("tag:yaml.org,2002:seq", data, flow_style=False)

        InlineListDumper.add_representer(list, represent_list)

        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            yaml.dump(
                self.model_dump(mode="json"),
                f,
                Dumper=InlineListDumper,
                default_flow_style=False,
                sort_keys=False,
            )
