"""Logging configuration for the spec CLI.

Library modules only create loggers (logging.getLogger(__name__)); the CLI
callback decides where records go.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

APP_LOGGER_NAME = "spec_cli"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_FILE_MAX_BYTES = 1_000_000
LOG_FILE_BACKUP_COUNT = 3


def configure_logging(verbose: bool = False, log_file: Path | None = None) -> None:
    """Configure the spec_cli logger.

    Args:
        verbose: Emit DEBUG records to stderr; otherwise only warnings.
        log_file: Optional file that receives DEBUG records regardless of verbosity.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    app_logger = logging.getLogger(APP_LOGGER_NAME)
    app_logger.setLevel(logging.DEBUG if (verbose or log_file) else logging.WARNING)

    # Keep records out of the root logger so library users' handlers stay quiet
    app_logger.propagate = False

    # Clear any existing handlers to avoid duplicates on repeated invocation
    app_logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT)

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setLevel(level)
    stream_handler.setFormatter(formatter)
    app_logger.addHandler(stream_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        # Use RotatingFileHandler to prevent unbounded log growth
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        app_logger.addHandler(file_handler)

    # httpx logs every request at INFO; only show it when debugging
    http_level = logging.DEBUG if verbose else logging.WARNING
    logging.getLogger("httpx").setLevel(http_level)
    logging.getLogger("httpcore").setLevel(http_level)


def enable_verbose() -> None:
    """Raise stderr output to DEBUG, keeping any file handler in place.

    Used by commands with their own --verbose flag after the CLI callback
    has already configured logging.
    """
    app_logger = logging.getLogger(APP_LOGGER_NAME)
    if not app_logger.handlers:
        configure_logging(verbose=True)
        return

    app_logger.setLevel(logging.DEBUG)
    for handler in app_logger.handlers:
        # RotatingFileHandler is a StreamHandler too; it already logs DEBUG
        if not isinstance(handler, RotatingFileHandler):
            handler.setLevel(logging.DEBUG)

    logging.getLogger("httpx").setLevel(logging.DEBUG)
    logging.getLogger("httpcore").setLevel(logging.DEBUG)
