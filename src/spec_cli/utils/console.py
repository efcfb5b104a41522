"""Console output helpers built on rich.

All user-facing output goes through these helpers so commands share one
Console and one visual vocabulary. Errors go to stderr.
"""

from rich.console import Console
from rich.panel import Panel

from spec_cli.config.messages import COLORS

_console = Console()
_err_console = Console(stderr=True)


def get_console() -> Console:
    """Return the shared stdout console."""
    return _console


def print_success(message: str) -> None:
    """Print a success message."""
    _console.print(f"[{COLORS['success']}]✓[/{COLORS['success']}] {message}")


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    _err_console.print(f"[{COLORS['error']}]✗ {message}[/{COLORS['error']}]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    _console.print(f"[{COLORS['warning']}]! {message}[/{COLORS['warning']}]")


def print_info(message: str) -> None:
    """Print an informational message."""
    _console.print(message)


def print_header(message: str) -> None:
    """Print a section header."""
    _console.print(f"\n[bold {COLORS['primary']}]{message}[/bold {COLORS['primary']}]")


def print_panel(message: str, title: str | None = None, style: str = "cyan") -> None:
    """Print a message inside a bordered panel."""
    _console.print(Panel(message, title=title, border_style=style))
