"""Initialize command for setting up spec-cli in a repository."""

from pathlib import Path
from typing import Any

import typer

from spec_cli.config.messages import (
    ERROR_MESSAGES,
    INFO_MESSAGES,
    PROMPTS,
    SUCCESS_MESSAGES,
    WARNING_MESSAGES,
)
from spec_cli.config.paths import (
    DEFAULT_BRANCH_FORMAT,
    DEFAULT_DOC_TEMPLATES,
    DEFAULT_DOCS_DIR,
    DEFAULT_MERGE_TARGET,
    SLUG_PLACEHOLDER,
)
from spec_cli.models.enums import ExitCode
from spec_cli.services.config_service import ConfigService
from spec_cli.services.scaffold_detection import detect_test_frameworks
from spec_cli.utils import (
    print_error,
    print_header,
    print_info,
    print_success,
    print_warning,
)
from spec_cli.utils.command_decorators import handle_spec_errors, require_git_repo


@handle_spec_errors
@require_git_repo
def init_command(
    force: bool = False,
    no_interactive: bool = False,
    repo_root: Path | None = None,
) -> None:
    """Write spec.config.yaml for the current repository.

    Args:
        force: Overwrite an existing configuration without asking
        no_interactive: Skip prompts; use defaults plus detected scaffold paths
        repo_root: Injected by require_git_repo
    """
    assert repo_root is not None
    config_service = ConfigService(repo_root)

    if config_service.config_exists() and not force:
        if no_interactive:
            print_error(ERROR_MESSAGES["config_exists"].format(path=config_service.config_path))
            raise typer.Exit(code=int(ExitCode.UNKNOWN_ERROR))
        overwrite = typer.confirm(
            PROMPTS["overwrite_config"].format(path=config_service.config_path), default=False
        )
        if not overwrite:
            print_info(INFO_MESSAGES["init_cancelled"])
            raise typer.Exit(code=int(ExitCode.SUCCESS))

    print_header(INFO_MESSAGES["init_intro"])

    candidates = detect_test_frameworks(repo_root)

    if no_interactive:
        values: dict[str, Any] = {"scaffold_paths": candidates}
    else:
        values = _gather_interactive(candidates)

    config = config_service.build_config(**values)
    path = config_service.save_config(config)
    print_success(SUCCESS_MESSAGES["config_saved"].format(path=path))


def _gather_interactive(candidates: list[str]) -> dict[str, Any]:
    """Prompt for every configuration value.

    Args:
        candidates: Detected scaffold templates to offer

    Returns:
        Keyword arguments for SpecConfig
    """
    docs_dir = typer.prompt(PROMPTS["docs_dir"], default=DEFAULT_DOCS_DIR)
    scaffold_paths = _gather_scaffold_paths(candidates)
    branch_format = typer.prompt(PROMPTS["branch_format"], default=DEFAULT_BRANCH_FORMAT)
    merge_target = typer.prompt(PROMPTS["merge_target"], default=DEFAULT_MERGE_TARGET)
    doc_templates = _gather_doc_templates()

    return {
        "docs_dir": docs_dir,
        "doc_templates": doc_templates,
        "scaffold_paths": scaffold_paths,
        "branch_format": branch_format,
        "default_merge_target": merge_target,
    }


def _gather_scaffold_paths(candidates: list[str]) -> list[str]:
    """Offer detected scaffold templates, then accept manual ones."""
    selected: list[str] = []

    if candidates:
        print_info(INFO_MESSAGES["detected_scaffold"].format(candidates=", ".join(candidates)))
    for candidate in candidates:
        prompt = PROMPTS["use_scaffold_candidate"].format(candidate=candidate)
        if typer.confirm(prompt, default=True):
            selected.append(candidate)

    if not typer.confirm(PROMPTS["add_scaffold_paths"], default=False):
        return selected

    while True:
        path = typer.prompt(PROMPTS["scaffold_path"], default="", show_default=False).strip()
        if path:
            if SLUG_PLACEHOLDER not in path:
                print_warning(WARNING_MESSAGES["scaffold_needs_slug"])
            elif path not in selected:
                selected.append(path)
        if not typer.confirm(PROMPTS["another_scaffold_path"], default=False):
            return selected


def _gather_doc_templates() -> list[str]:
    """Choose document templates created for each feature."""
    templates = [
        t
        for t in DEFAULT_DOC_TEMPLATES
        if typer.confirm(PROMPTS["use_doc_template"].format(template=t), default=True)
    ]

    if typer.confirm(PROMPTS["edit_doc_templates"], default=False):
        _edit_doc_templates(templates)

    if not templates:
        print_warning(WARNING_MESSAGES["no_templates"])
        templates = list(DEFAULT_DOC_TEMPLATES)

    return templates


def _edit_doc_templates(templates: list[str]) -> None:
    """Add or remove document templates in place until the user is done."""
    while True:
        action = typer.prompt(PROMPTS["doc_template_action"], default="done").strip().lower()

        if action == "done":
            return

        if action == "add":
            name = typer.prompt(PROMPTS["doc_template_name"], default="", show_default=False)
            name = name.strip()
            if not name:
                continue
            if "/" in name or "\\" in name:
                print_warning(WARNING_MESSAGES["template_not_file_name"])
            elif not name.endswith(".md"):
                print_warning(WARNING_MESSAGES["template_not_markdown"])
            elif name in templates:
                print_warning(WARNING_MESSAGES["template_exists"].format(template=name))
            else:
                templates.append(name)
                print_success(SUCCESS_MESSAGES["template_added"].format(template=name))
        elif action == "remove":
            if not templates:
                continue
            name = typer.prompt(
                PROMPTS["doc_template_remove"].format(templates=", ".join(templates))
            ).strip()
            if name in templates:
                templates.remove(name)
                print_success(SUCCESS_MESSAGES["template_removed"].format(template=name))
            else:
                print_warning(WARNING_MESSAGES["template_not_found"].format(template=name))
        else:
            print_warning(WARNING_MESSAGES["unknown_action"].format(action=action))
