"""Tests for test framework detection used by spec init."""

import json
from pathlib import Path

from spec_cli.services.scaffold_detection import detect_test_frameworks


def _package_json(root: Path, dev_dependencies: dict[str, str]) -> None:
    (root / "package.json").write_text(
        json.dumps({"name": "app", "devDependencies": dev_dependencies}), encoding="utf-8"
    )


def test_empty_repository_has_no_candidates(tmp_path: Path) -> None:
    assert detect_test_frameworks(tmp_path) == []


def test_jest_dependency_with_typescript(tmp_path: Path) -> None:
    _package_json(tmp_path, {"jest": "^29.0.0"})
    (tmp_path / "tsconfig.json").write_text("{}", encoding="utf-8")
    assert detect_test_frameworks(tmp_path) == ["tests/{slug}.test.ts"]


def test_vitest_config_prefers_dunder_tests(tmp_path: Path) -> None:
    (tmp_path / "vitest.config.js").write_text("", encoding="utf-8")
    (tmp_path / "__tests__").mkdir()
    assert detect_test_frameworks(tmp_path) == ["__tests__/{slug}.test.js"]


def test_playwright_locations(tmp_path: Path) -> None:
    (tmp_path / "playwright.config.ts").write_text("", encoding="utf-8")
    assert detect_test_frameworks(tmp_path) == ["e2e/{slug}.spec.js"]

    (tmp_path / "tests" / "e2e").mkdir(parents=True)
    assert detect_test_frameworks(tmp_path) == ["tests/e2e/{slug}.spec.js"]


def test_cypress_legacy_integration_folder(tmp_path: Path) -> None:
    (tmp_path / "cypress" / "integration").mkdir(parents=True)
    assert detect_test_frameworks(tmp_path) == ["cypress/integration/{slug}.spec.js"]


def test_cypress_dependency_defaults_to_e2e(tmp_path: Path) -> None:
    _package_json(tmp_path, {"cypress": "^13.0.0"})
    assert detect_test_frameworks(tmp_path) == ["cypress/e2e/{slug}.cy.js"]


def test_pytest_from_config_or_test_files(tmp_path: Path) -> None:
    (tmp_path / "tests").mkdir()
    assert detect_test_frameworks(tmp_path) == []

    (tmp_path / "tests" / "test_api.py").write_text("", encoding="utf-8")
    assert detect_test_frameworks(tmp_path) == ["tests/test_{slug}.py"]


def test_pyproject_means_pytest(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[project]\nname = 'x'\n", encoding="utf-8")
    assert detect_test_frameworks(tmp_path) == ["tests/test_{slug}.py"]


def test_ordering_puts_end_to_end_first(tmp_path: Path) -> None:
    _package_json(
        tmp_path,
        {"jest": "^29.0.0", "@playwright/test": "^1.40.0", "cypress": "^13.0.0"},
    )
    (tmp_path / "pytest.ini").write_text("[pytest]\n", encoding="utf-8")

    assert detect_test_frameworks(tmp_path) == [
        "e2e/{slug}.spec.js",
        "cypress/e2e/{slug}.cy.js",
        "tests/{slug}.test.js",
        "tests/test_{slug}.py",
    ]


def test_invalid_package_json_is_ignored(tmp_path: Path) -> None:
    (tmp_path / "package.json").write_text("{not json", encoding="utf-8")
    (tmp_path / "jest.config.js").write_text("", encoding="utf-8")
    assert detect_test_frameworks(tmp_path) == ["tests/{slug}.test.js"]
