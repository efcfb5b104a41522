"""Command decorators for DRY pattern enforcement.

This module provides decorators that reduce code duplication across command files.
Decorators handle common patterns like repository discovery and mapping errors
to exit codes, so command bodies only deal with the happy path.
"""

import logging
from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar

import typer

from spec_cli.exceptions import GitError, SpecError
from spec_cli.services.git_service import find_repo_root
from spec_cli.utils.console import print_error, print_info

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def require_git_repo(func: F) -> F:
    """Decorator to ensure the command runs inside a git repository.

    Injects the repository's top-level directory as the ``repo_root``
    keyword argument. The decorated function should accept repo_root with a
    default value of None:
        def my_command(repo_root: Path | None = None, ...other params) -> None:
            ...

    Raises:
        typer.Exit: With code PRECHECK_FAILED if not inside a git repository

    Example:
        @handle_spec_errors
        @require_git_repo
        def list_command(repo_root: Path | None = None) -> None:
            assert repo_root is not None
            ...
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            repo_root = find_repo_root()
        except SpecError as e:
            print_error(e.message)
            raise typer.Exit(code=int(e.exit_code)) from e
        kwargs["repo_root"] = repo_root
        return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def handle_spec_errors(func: F) -> F:
    """Decorator that turns SpecError into a message and an exit code.

    ConfigurationError exits 2, PreconditionError 3 (or its override),
    SlugGenerationError 4, GitError 5, anything else in the hierarchy 1.
    A GitError's hint is printed below the message. Exceptions outside the
    hierarchy propagate.
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except SpecError as e:
            logger.debug(f"{type(e).__name__}: {e}")
            print_error(e.message)
            if isinstance(e, GitError) and e.hint:
                print_info(e.hint)
            raise typer.Exit(code=int(e.exit_code)) from e

    return wrapper  # type: ignore[return-value]
