"""Git service for spec-cli.

Thin wrapper over the git command line. Query helpers (branch existence,
clean tree, upstream) return plain values; mutating helpers raise GitError
with a failure code and a hint for the user.

Key Classes:
    GitService: git operations rooted at one repository

Typical Usage:
    >>> root = find_repo_root()
    >>> git = GitService(root)
    >>> git.branch_exists("feature-add-dark-mode")
    False
    >>> git.switch("feature-add-dark-mode", create=True)
"""

import logging
import subprocess
from pathlib import Path

from spec_cli.config.messages import ERROR_MESSAGES
from spec_cli.config.settings import git_settings
from spec_cli.exceptions import GitError, PreconditionError

logger = logging.getLogger(__name__)


def find_repo_root(cwd: Path | None = None) -> Path:
    """Return the top-level directory of the enclosing git repository.

    Args:
        cwd: Directory to start from (defaults to current directory)

    Raises:
        PreconditionError: If not inside a git work tree or git is missing
    """
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--show-toplevel"],
            cwd=cwd or Path.cwd(),
            capture_output=True,
            text=True,
            check=True,
            timeout=git_settings.command_timeout_seconds,
        )
    except (subprocess.CalledProcessError, subprocess.TimeoutExpired, FileNotFoundError) as e:
        raise PreconditionError(ERROR_MESSAGES["not_git_repo"]) from e
    return Path(result.stdout.strip())


class GitService:
    """Service for git operations on a single repository."""

    def __init__(self, repo_root: Path, timeout: float | None = None):
        """Initialize git service.

        Args:
            repo_root: Repository top-level directory
            timeout: Per-command timeout in seconds (defaults to git settings)
        """
        self.repo_root = repo_root
        self.timeout = timeout if timeout is not None else git_settings.command_timeout_seconds

    def _run(self, *args: str, check: bool = True) -> subprocess.CompletedProcess[str]:
        logger.debug(f"git {' '.join(args)}")
        return subprocess.run(
            ["git", *args],
            cwd=self.repo_root,
            capture_output=True,
            text=True,
            check=check,
            timeout=self.timeout,
        )

    def _run_or_raise(self, code: str, hint: str | None, *args: str) -> str:
        try:
            result = self._run(*args)
        except subprocess.CalledProcessError as e:
            message = (e.stderr or e.stdout or "").strip() or f"git {args[0]} failed"
            raise GitError(code, message, hint) from e
        except subprocess.TimeoutExpired as e:
            raise GitError(code, f"git {args[0]} timed out after {self.timeout:.0f}s", hint) from e
        return result.stdout.strip()

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def is_clean(self) -> bool:
        """Return True if there are no staged, unstaged or untracked changes.

        Raises:
            GitError: STATUS_FAILED if git status itself fails
        """
        return self._run_or_raise("STATUS_FAILED", None, "status", "--porcelain") == ""

    def branch_exists(self, branch_name: str) -> bool:
        """Check if a local branch already exists.

        Raises:
            GitError: SHOW_REF_FAILED if git cannot answer (timeout, not a repository)
        """
        args = ("show-ref", "--verify", "--quiet", f"refs/heads/{branch_name}")
        try:
            result = self._run(*args, check=False)
        except subprocess.TimeoutExpired as e:
            raise GitError(
                "SHOW_REF_FAILED", f"git show-ref timed out after {self.timeout:.0f}s"
            ) from e
        # show-ref exits 1 for a missing ref; anything else is a failure
        if result.returncode not in (0, 1):
            message = result.stderr.strip() or "git show-ref failed"
            raise GitError("SHOW_REF_FAILED", message)
        return result.returncode == 0

    def current_branch(self) -> str | None:
        """Get current branch name, or None for a detached HEAD."""
        try:
            result = self._run("branch", "--show-current")
        except (subprocess.CalledProcessError, subprocess.TimeoutExpired):
            return None
        return result.stdout.strip() or None

    def upstream(self, branch_name: str) -> str | None:
        """Return the upstream of a branch (e.g. origin/main), if one is set."""
        try:
            result = self._run("rev-parse", "--abbrev-ref", f"{branch_name}@{{u}}", check=False)
        except subprocess.TimeoutExpired:
            return None
        if result.returncode != 0:
            return None
        return result.stdout.strip() or None

    def head_short_hash(self) -> str:
        """Return the abbreviated hash of HEAD."""
        return self._run_or_raise("REV_PARSE_FAILED", None, "rev-parse", "--short", "HEAD")

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def switch(self, branch_name: str, create: bool = False) -> None:
        """Switch to a branch, optionally creating it."""
        hint = (
            f"Failed to create and switch to branch '{branch_name}'"
            if create
            else f"Failed to switch to branch '{branch_name}'"
        )
        args = ["switch", "-c", branch_name] if create else ["switch", branch_name]
        self._run_or_raise("SWITCH_FAILED", hint, *args)

    def add(self, paths: list[str]) -> None:
        """Stage paths (relative to the repository root)."""
        if not paths:
            return
        self._run_or_raise("ADD_FAILED", None, "add", "--", *paths)

    def commit(self, message: str) -> str:
        """Create a commit and return its short hash."""
        self._run_or_raise("COMMIT_FAILED", None, "commit", "-m", message)
        return self.head_short_hash()

    def pull(self) -> None:
        """Pull the current branch from its upstream."""
        self._run_or_raise(
            "PULL_FAILED",
            "Check if upstream is set: git branch --set-upstream-to <remote>/<branch> <branch>",
            "pull",
        )

    def merge(self, branch_name: str) -> str:
        """Merge a branch with --no-ff and return the merge commit's short hash."""
        self._run_or_raise(
            "MERGE_FAILED",
            "Merge conflicts detected. Please resolve conflicts manually and commit.",
            "merge",
            "--no-ff",
            "--no-edit",
            branch_name,
        )
        return self.head_short_hash()

    def push(self) -> None:
        """Push the current branch."""
        self._run_or_raise("PUSH_FAILED", "Set upstream: git push -u origin <branch>", "push")
