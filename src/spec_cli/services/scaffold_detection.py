"""Detect test frameworks in a repository and suggest scaffold templates.

Used by ``spec init`` to offer sensible ``scaffold_paths`` defaults. Each
suggestion is a template containing ``{slug}``.
"""

import logging
from pathlib import Path
from typing import Any

from spec_cli.utils.file_utils import read_json_dict

logger = logging.getLogger(__name__)

MAX_CANDIDATES = 5

JEST_CONFIGS = ("jest.config.js", "jest.config.ts", "jest.config.json")
VITEST_CONFIGS = ("vitest.config.js", "vitest.config.ts", "vitest.config.json")
PLAYWRIGHT_CONFIGS = ("playwright.config.js", "playwright.config.ts")
CYPRESS_CONFIGS = ("cypress.config.js", "cypress.config.ts")
PYTEST_CONFIGS = ("pytest.ini", "tox.ini", "pyproject.toml")


def _has_dependency(package_json: dict[str, Any], name: str) -> bool:
    for section in ("dependencies", "devDependencies"):
        deps = package_json.get(section)
        if isinstance(deps, dict) and deps.get(name):
            return True
    return False


def _any_exists(repo_root: Path, names: tuple[str, ...]) -> bool:
    return any((repo_root / name).exists() for name in names)


def _has_pytest_files(tests_dir: Path) -> bool:
    if not tests_dir.is_dir():
        return False
    try:
        return any(p.is_file() for p in tests_dir.glob("test_*.py"))
    except OSError:
        return False


def _is_e2e(template: str) -> bool:
    return "e2e" in template or template.startswith("cypress/")


def detect_test_frameworks(repo_root: Path) -> list[str]:
    """Suggest scaffold path templates for the test frameworks in use.

    End-to-end suggestions (Playwright, Cypress) come first, then unit test
    runners (Jest, Vitest), then pytest.

    Args:
        repo_root: Repository root directory

    Returns:
        Up to five scaffold templates
    """
    # A missing or malformed package.json just means no JS dependencies
    package_json = read_json_dict(repo_root / "package.json") or {}
    ext = "ts" if (repo_root / "tsconfig.json").exists() else "js"
    tests_dir = repo_root / "tests"

    candidates: list[str] = []

    if (
        _any_exists(repo_root, JEST_CONFIGS)
        or _any_exists(repo_root, VITEST_CONFIGS)
        or _has_dependency(package_json, "jest")
        or _has_dependency(package_json, "vitest")
    ):
        if (repo_root / "__tests__").exists():
            candidates.append(f"__tests__/{{slug}}.test.{ext}")
        else:
            candidates.append(f"tests/{{slug}}.test.{ext}")

    if _any_exists(repo_root, PLAYWRIGHT_CONFIGS) or _has_dependency(
        package_json, "@playwright/test"
    ):
        if (tests_dir / "e2e").exists():
            candidates.append(f"tests/e2e/{{slug}}.spec.{ext}")
        elif tests_dir.exists():
            candidates.append(f"tests/{{slug}}.spec.{ext}")
        else:
            candidates.append(f"e2e/{{slug}}.spec.{ext}")

    cypress_dir = repo_root / "cypress"
    if (
        _any_exists(repo_root, CYPRESS_CONFIGS)
        or cypress_dir.exists()
        or _has_dependency(package_json, "cypress")
    ):
        if not (cypress_dir / "e2e").exists() and (cypress_dir / "integration").exists():
            candidates.append(f"cypress/integration/{{slug}}.spec.{ext}")
        else:
            candidates.append(f"cypress/e2e/{{slug}}.cy.{ext}")

    if _any_exists(repo_root, PYTEST_CONFIGS) or _has_pytest_files(tests_dir):
        candidates.append("tests/test_{slug}.py")

    e2e = [c for c in candidates if _is_e2e(c)]
    python = [c for c in candidates if c.endswith(".py")]
    unit = [c for c in candidates if c not in e2e and c not in python]

    ordered = [*e2e, *unit, *python][:MAX_CANDIDATES]
    logger.debug(f"Detected scaffold candidates: {ordered}")
    return ordered
