"""Main CLI entry point for spec-cli."""

import sys
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console

from spec_cli.commands.create_cmd import create_command
from spec_cli.commands.init_cmd import init_command
from spec_cli.commands.list_cmd import list_command
from spec_cli.commands.merge_cmd import merge_command
from spec_cli.config.messages import HELP_TEXT, PROJECT_TAGLINE
from spec_cli.constants import VERSION
from spec_cli.utils import configure_logging, print_error, print_panel

# Load .env file from current directory if it exists
load_dotenv(Path.cwd() / ".env", verbose=False)

# Create main Typer app
app = typer.Typer(
    name="spec",
    help=PROJECT_TAGLINE,
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)

# Create console for output
console = Console()


@app.command("init")
def init(
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite an existing spec.config.yaml without asking",
    ),
    no_interactive: bool = typer.Option(
        False,
        "--no-interactive",
        help="Skip interactive prompts and use defaults",
    ),
) -> None:
    """Initialize Spec CLI configuration.

    Writes spec.config.yaml at the repository root, offering scaffold paths
    for the test frameworks detected in the repository.
    """
    init_command(force=force, no_interactive=no_interactive)


@app.command("create")
def create(
    description: str = typer.Argument(..., help="What the feature does, in plain words"),
) -> None:
    """Create a new feature branch with docs and scaffold files.

    The feature slug is generated from the description and checked against
    existing docs folders, branches and scaffold paths.
    """
    create_command(description)


@app.command("list")
def list_features() -> None:
    """List all features (one slug per line)."""
    list_command()


@app.command("merge")
def merge(
    slug: str = typer.Argument(..., help="Feature slug to merge"),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Show git commands as they run",
    ),
) -> None:
    """Merge a feature branch to the default target branch and push."""
    merge_command(slug, verbose=verbose)


@app.command("version")
def version() -> None:
    """Show version information."""
    print_panel(
        f"[bold cyan]spec-cli[/bold cyan] version [green]{VERSION}[/green]\n\n{PROJECT_TAGLINE}",
        title="Version",
        style="cyan",
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool | None = typer.Option(
        None,
        "--version",
        help="Show version information",
        is_eager=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Write debug logs to stderr",
    ),
    log_file: Path | None = typer.Option(
        None,
        "--log-file",
        help="Also write debug logs to this file",
        dir_okay=False,
    ),
) -> None:
    """spec - standardize the feature development workflow.

    Get started:
        spec init                      # Configure the repository
        spec create "Add dark mode"    # Branch, docs and scaffold files
        spec list                      # List features
        spec merge add-dark-mode       # Merge and push
    """
    configure_logging(verbose=verbose, log_file=log_file)

    if version_flag:
        version()
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(HELP_TEXT)
        raise typer.Exit()


def cli_main() -> None:
    """Main entry point for the CLI.

    This is the function that gets called when running the 'spec' command.
    It handles interrupts and unexpected exceptions with a short message.
    """
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled by user[/yellow]")
        sys.exit(130)
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
