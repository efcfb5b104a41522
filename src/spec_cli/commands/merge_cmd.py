"""Merge command: merge a feature branch into the default target and push."""

from pathlib import Path

import typer

from spec_cli.config.messages import (
    ERROR_MESSAGES,
    INFO_MESSAGES,
    SUCCESS_MESSAGES,
)
from spec_cli.exceptions import GitError
from spec_cli.generation.validation import is_valid_slug
from spec_cli.models.enums import ExitCode
from spec_cli.services.workflow_service import MERGE_STEPS, WorkflowService
from spec_cli.utils import StepTracker, enable_verbose, print_error, print_info, print_success
from spec_cli.utils.command_decorators import handle_spec_errors, require_git_repo


def merge_command(slug: str, verbose: bool = False) -> None:
    """Merge the feature branch for a slug.

    Args:
        slug: Feature slug
        verbose: Show each git command as it runs
    """
    if not is_valid_slug(slug):
        print_error(ERROR_MESSAGES["invalid_slug"].format(slug=slug))
        print_info(INFO_MESSAGES["slug_rules"])
        raise typer.Exit(code=int(ExitCode.CONFIG_ERROR))

    if verbose:
        enable_verbose()

    _merge(slug)


@handle_spec_errors
@require_git_repo
def _merge(slug: str, repo_root: Path | None = None) -> None:
    assert repo_root is not None

    tracker = StepTracker(MERGE_STEPS)
    try:
        result = WorkflowService(repo_root).merge_feature(slug, tracker)
    except GitError as e:
        if e.code != "MERGE_FAILED":
            raise
        print_error(ERROR_MESSAGES["merge_conflicts"])
        print_info(INFO_MESSAGES["resolve_conflicts"])
        raise typer.Exit(code=int(ExitCode.GIT_ERROR)) from e

    tracker.finish(SUCCESS_MESSAGES["feature_merged"])
    print_success(SUCCESS_MESSAGES["merge_commit"].format(hash=result.commit_hash))
    if result.upstream:
        print_info(INFO_MESSAGES["pushed_to"].format(upstream=result.upstream))
    print_info(f"\n{INFO_MESSAGES['merge_outro'].format(slug=slug, target=result.target)}")
