"""Create command: branch, document and scaffold a new feature."""

from pathlib import Path

from spec_cli.config.messages import INFO_MESSAGES, SUCCESS_MESSAGES
from spec_cli.services.workflow_service import CREATE_STEPS, WorkflowService
from spec_cli.utils import StepTracker, print_info, print_success
from spec_cli.utils.command_decorators import handle_spec_errors, require_git_repo


@handle_spec_errors
@require_git_repo
def create_command(description: str, repo_root: Path | None = None) -> None:
    """Create a feature branch named by the slug generator.

    Args:
        description: Free-text feature description
        repo_root: Injected by require_git_repo
    """
    assert repo_root is not None

    tracker = StepTracker(CREATE_STEPS)
    result = WorkflowService(repo_root).create_feature(description, tracker)
    tracker.finish(SUCCESS_MESSAGES["feature_created"])

    print_success(SUCCESS_MESSAGES["feature_slug"].format(slug=result.slug))
    print_success(SUCCESS_MESSAGES["feature_branch"].format(branch=result.branch))
    print_info(INFO_MESSAGES["docs_created"].format(count=len(result.doc_files)))
    print_info(INFO_MESSAGES["scaffold_created"].format(count=len(result.scaffold_paths)))
    print_info(f"\n{INFO_MESSAGES['create_outro']}")
