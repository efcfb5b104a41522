"""File system utilities for spec-cli."""

import json
from pathlib import Path
from typing import Any


def ensure_dir(path: Path) -> None:
    """Ensure directory exists, creating it if necessary.

    Args:
        path: Directory path to ensure exists
    """
    path.mkdir(parents=True, exist_ok=True)


def write_file(path: Path, content: str) -> None:
    """Write content to text file.

    Args:
        path: Path to file to write
        content: Content to write

    Creates parent directories if they don't exist.
    """
    ensure_dir(path.parent)
    path.write_text(content, encoding="utf-8")


def read_json_dict(path: Path) -> dict[str, Any] | None:
    """Read a JSON object from a file.

    Returns:
        Parsed object, or None if the file is missing, unreadable, not JSON,
        or not a JSON object
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError, UnicodeDecodeError):
        return None
    return data if isinstance(data, dict) else None


def file_exists(path: Path) -> bool:
    """Check if file exists.

    Args:
        path: Path to check

    Returns:
        True if file exists, False otherwise
    """
    return path.exists() and path.is_file()


def dir_exists(path: Path) -> bool:
    """Check if directory exists.

    Args:
        path: Path to check

    Returns:
        True if directory exists, False otherwise
    """
    return path.exists() and path.is_dir()


def list_dirs(directory: Path, pattern: str = "*") -> list[Path]:
    """List subdirectories in directory matching pattern.

    Args:
        directory: Directory to search
        pattern: Glob pattern to match

    Returns:
        List of matching directory paths
    """
    if not dir_exists(directory):
        return []

    return sorted([p for p in directory.glob(pattern) if p.is_dir()])


def is_within(path: Path, root: Path) -> bool:
    """Return True if ``path`` resolves strictly inside ``root``.

    The root itself does not count as inside.
    """
    resolved = path.resolve()
    resolved_root = root.resolve()
    return resolved != resolved_root and resolved.is_relative_to(resolved_root)
