"""Tests for rich console helpers."""

import pytest

import spec_cli.utils as utils
from spec_cli.utils.console import print_error, print_success, print_warning


def test_console_helpers_exported() -> None:
    console_helpers = {name for name in utils.__all__ if name.startswith("print_")}
    assert console_helpers == {
        "print_error",
        "print_header",
        "print_info",
        "print_panel",
        "print_success",
        "print_warning",
    }


def test_success_and_warning_go_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    print_success("Configuration saved")
    print_warning("No templates selected")

    captured = capsys.readouterr()
    assert "✓ Configuration saved" in captured.out
    assert "! No templates selected" in captured.out
    assert captured.err == ""


def test_error_goes_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    print_error("Working tree is not clean")

    captured = capsys.readouterr()
    assert "✗ Working tree is not clean" in captured.err
    assert captured.out == ""
