"""Utility modules for spec-cli."""

from spec_cli.utils.console import (
    get_console,
    print_error,
    print_header,
    print_info,
    print_panel,
    print_success,
    print_warning,
)
from spec_cli.utils.file_utils import (
    dir_exists,
    ensure_dir,
    file_exists,
    is_within,
    list_dirs,
    read_json_dict,
    write_file,
)
from spec_cli.utils.logging_setup import configure_logging, enable_verbose
from spec_cli.utils.step_tracker import StepTracker

__all__ = [
    # Console
    "get_console",
    "print_error",
    "print_header",
    "print_info",
    "print_panel",
    "print_success",
    "print_warning",
    # File utils
    "dir_exists",
    "ensure_dir",
    "file_exists",
    "is_within",
    "list_dirs",
    "read_json_dict",
    "write_file",
    # Logging
    "configure_logging",
    "enable_verbose",
    # Progress
    "StepTracker",
]
