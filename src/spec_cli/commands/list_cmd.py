"""List command: print existing feature slugs."""

from pathlib import Path

import typer

from spec_cli.services.config_service import get_config_service
from spec_cli.services.feature_service import FeatureService
from spec_cli.utils.command_decorators import handle_spec_errors, require_git_repo


@handle_spec_errors
@require_git_repo
def list_command(repo_root: Path | None = None) -> None:
    """Print one feature slug per line, sorted.

    Output is plain text so it can be piped into other tools.
    """
    assert repo_root is not None
    config = get_config_service(repo_root).load_config()
    for slug in FeatureService(repo_root, config).list_feature_slugs():
        typer.echo(slug)
