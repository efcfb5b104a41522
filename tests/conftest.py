"""Pytest configuration and fixtures for spec-cli tests."""

import logging
import os
import shutil
import subprocess
import tempfile
from collections.abc import Callable, Iterator, Sequence
from pathlib import Path

import pytest

from spec_cli.config.paths import CONFIG_FILE
from spec_cli.models.config import SpecConfig

# Environment variables read by LLMSettings; cleared so the host never leaks in
LLM_ENV_VARS = (
    "OPENAI_API_KEY",
    "OPENAI_BASE_URL",
    "SPEC_OPENAI_MODEL",
    "SPEC_LLM_TIMEOUT_MS",
    "SPEC_LLM_MAX_ATTEMPTS",
    "SPEC_LLM_PROVIDER",
)


def run_git(cwd: Path, *args: str) -> str:
    """Run a git command in a test repository and return its stdout."""
    result = subprocess.run(
        ["git", *args],
        cwd=cwd,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout.strip()


class SequenceGenerator:
    """Slug generator stub that replays candidates in order.

    Exceptions in the sequence are raised instead of returned. The last item
    repeats once the sequence is used up.
    """

    def __init__(self, *candidates: str | Exception):
        self.candidates = list(candidates)
        self.calls: list[tuple[str, list[str], str | None]] = []
        self.closed = False

    def generate(
        self,
        description: str,
        excluded: Sequence[str],
        feedback: str | None = None,
    ) -> str:
        self.calls.append((description, list(excluded), feedback))
        index = min(len(self.calls), len(self.candidates)) - 1
        value = self.candidates[index]
        if isinstance(value, Exception):
            raise value
        return value

    def close(self) -> None:
        self.closed = True


@pytest.fixture(autouse=True)
def clean_llm_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove generator settings inherited from the developer's shell."""
    for name in LLM_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_app_logger() -> Iterator[None]:
    """Undo logging configuration applied by CLI invocations."""
    yield
    app_logger = logging.getLogger("spec_cli")
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
        handler.close()
    app_logger.propagate = True
    app_logger.setLevel(logging.NOTSET)


@pytest.fixture
def temp_project_dir() -> Iterator[Path]:
    """Create a temporary project directory for testing.

    Yields:
        Path to temporary directory
    """
    temp_dir = Path(tempfile.mkdtemp(prefix="spec-cli-test-")).resolve()
    original_cwd = Path.cwd()
    try:
        os.chdir(temp_dir)
        yield temp_dir
    finally:
        os.chdir(original_cwd)
        shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def git_repo(temp_project_dir: Path) -> Path:
    """Create a git repository on branch main with one commit.

    Args:
        temp_project_dir: Temporary project directory

    Returns:
        Path to the repository root
    """
    run_git(temp_project_dir, "init", "--quiet")
    run_git(temp_project_dir, "symbolic-ref", "HEAD", "refs/heads/main")
    run_git(temp_project_dir, "config", "user.email", "dev@example.com")
    run_git(temp_project_dir, "config", "user.name", "Spec Tester")
    run_git(temp_project_dir, "config", "commit.gpgsign", "false")
    run_git(temp_project_dir, "config", "pull.rebase", "false")

    (temp_project_dir / "README.md").write_text("# Test repository\n", encoding="utf-8")
    run_git(temp_project_dir, "add", "README.md")
    run_git(temp_project_dir, "commit", "--quiet", "-m", "Initial commit")
    return temp_project_dir


@pytest.fixture
def spec_config() -> SpecConfig:
    """Configuration used by initialized_repo."""
    return SpecConfig(scaffold_paths=["tests/test_{slug}.py"])


@pytest.fixture
def initialized_repo(git_repo: Path, spec_config: SpecConfig) -> Path:
    """Create a git repository with a committed spec.config.yaml.

    Args:
        git_repo: Repository with an initial commit
        spec_config: Configuration to write

    Returns:
        Path to the repository root
    """
    spec_config.save(git_repo / CONFIG_FILE)
    run_git(git_repo, "add", CONFIG_FILE)
    run_git(git_repo, "commit", "--quiet", "-m", "Add spec config")
    return git_repo


@pytest.fixture
def remote_repo(initialized_repo: Path) -> Iterator[Path]:
    """Attach a bare origin to initialized_repo and push main with upstream.

    Yields:
        Path to the bare remote repository
    """
    remote_dir = Path(tempfile.mkdtemp(prefix="spec-cli-remote-")).resolve()
    try:
        run_git(remote_dir, "init", "--quiet", "--bare")
        run_git(remote_dir, "symbolic-ref", "HEAD", "refs/heads/main")
        run_git(initialized_repo, "remote", "add", "origin", str(remote_dir))
        run_git(initialized_repo, "push", "--quiet", "-u", "origin", "main")
        yield remote_dir
    finally:
        shutil.rmtree(remote_dir, ignore_errors=True)


@pytest.fixture
def sequence_generator() -> type[SequenceGenerator]:
    """Stub generator class replaying fixed candidates."""
    return SequenceGenerator


@pytest.fixture
def git_cli() -> Callable[..., str]:
    """Run raw git commands in a test repository: git_cli(cwd, *args)."""
    return run_git
