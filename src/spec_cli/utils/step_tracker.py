"""Step tracker for displaying progress during multi-step operations."""

from spec_cli.utils.console import get_console


class StepTracker:
    """Track and display progress through multiple steps.

    Example:
        >>> tracker = StepTracker(3)
        >>> tracker.start_step("Generating feature slug")
        >>> # ... do work ...
        >>> tracker.complete_step("Feature slug: add-dark-mode")
    """

    def __init__(self, total_steps: int, enabled: bool = True):
        """Initialize step tracker.

        Args:
            total_steps: Total number of steps to track
            enabled: When False, nothing is printed (plain/verbose output modes)
        """
        self.total_steps = total_steps
        self.current_step = 0
        self.enabled = enabled
        self.console = get_console()
        self._current_message: str | None = None

    def _prefix(self) -> str:
        return f"[{self.current_step}/{self.total_steps}]"

    def start_step(self, message: str) -> None:
        """Start a new step.

        Args:
            message: Description of the step being started
        """
        self.current_step += 1
        self._current_message = message
        if self.enabled:
            self.console.print(f"[cyan bold]{self._prefix()}[/cyan bold] {message}...", end="")

    def complete_step(self, message: str | None = None) -> None:
        """Mark current step as complete.

        Args:
            message: Optional completion message (uses start message if not provided)
        """
        if message is None:
            message = self._current_message or "Done"
        if not self.enabled:
            return

        # Move to beginning of line and clear
        self.console.print("\r", end="")
        self.console.print(f"[green]✓[/green] [cyan bold]{self._prefix()}[/cyan bold] {message}")

    def fail_step(self, message: str | None = None, error: str | None = None) -> None:
        """Mark current step as failed.

        Args:
            message: Optional failure message
            error: Optional error details
        """
        if message is None:
            message = self._current_message or "Failed"
        if not self.enabled:
            return

        self.console.print("\r", end="")
        self.console.print(f"[red]✗[/red] [cyan bold]{self._prefix()}[/cyan bold] {message}")

        if error:
            self.console.print(f"  [red]{error}[/red]")

    def finish(self, message: str = "All steps completed!") -> None:
        """Mark all steps as finished.

        Args:
            message: Final completion message
        """
        if self.enabled:
            self.console.print(f"\n[green bold]✓ {message}[/green bold]")
