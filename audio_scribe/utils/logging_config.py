"""Centralized logging configuration for Audio Scribe.

This module provides consistent logging setup for the CLI and any host
embedding the export subsystem. Configuration respects explicit levels and
provides sensible defaults for production and development.
"""

from __future__ import annotations

import logging
import sys
import warnings
from typing import Literal

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# Loggers of PDF dependencies that are chatty at DEBUG level
_NOISY_LOGGERS: tuple[str, ...] = ("fontTools", "fontTools.subset", "fpdf", "PIL")


def _configure_third_party_log_levels(*, verbose: bool) -> None:
    """Set explicit levels for noisy third-party loggers.

    Args:
        verbose: Whether the application runs in verbose mode. Font
            subsetting output stays at WARNING unless verbose is set.
    """
    level = logging.INFO if verbose else logging.WARNING
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(level)


def configure_logging(
    *,
    level: LogLevel | None = None,
    verbose: bool = False,
    quiet: bool = False,
    format_string: str | None = None,
) -> None:
    """Configure centralized logging for the application.

    This should be called once at application startup (CLI entry or host
    application launch).

    Args:
        level: Explicit log level (overrides verbose/quiet).
        verbose: Enable verbose logging (DEBUG level).
        quiet: Suppress all non-critical logs and Python warnings.
        format_string: Custom log format (uses default if None).

    Examples:
        >>> # CLI verbose mode
        >>> configure_logging(verbose=True)

        >>> # Production quiet mode
        >>> configure_logging(quiet=True)
    """
    # Determine effective log level
    if level is not None:
        log_level = getattr(logging, level.upper())
    elif verbose:
        log_level = logging.DEBUG
    elif quiet:
        log_level = logging.CRITICAL
    else:
        log_level = logging.INFO

    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=log_level,
        format=format_string,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Reconfigure even if already configured
    )
    _configure_third_party_log_levels(verbose=verbose)

    if quiet:
        warnings.filterwarnings("ignore")
    else:
        logger = logging.getLogger(__name__)
        logger.debug(f"Logging configured: level={logging.getLevelName(log_level)}")


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name.

    Args:
        name: Logger name (typically __name__ of calling module).

    Returns:
        Configured logger instance.

    Examples:
        >>> logger = get_logger(__name__)
        >>> logger.info("Export started")
    """
    return logging.getLogger(name)
