"""
Logging configuration for ccscan.

The level comes from the CLI flags, falling back to the CCSCAN_LOG_LEVEL
environment variable and then WARNING. Log records go to stderr so they
never mix with a rendered commit message on stdout.
"""

import logging
import os
import sys
from typing import Optional


LOG_LEVEL_ENV_VAR = "CCSCAN_LOG_LEVEL"

VALID_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def resolve_level(verbose: bool = False, debug: bool = False) -> str:
    """Pick the log level name from flags and environment.

    Args:
        verbose: --verbose was given.
        debug: --debug was given. Wins over verbose.

    Returns:
        A level name from VALID_LEVELS.
    """
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"

    level = os.getenv(LOG_LEVEL_ENV_VAR, "WARNING").upper()
    if level not in VALID_LEVELS:
        sys.stderr.write(f"Warning: Invalid {LOG_LEVEL_ENV_VAR} '{level}', defaulting to WARNING\n")
        level = "WARNING"
    return level


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure logging for the application.

    Args:
        level: Log level name. Defaults to resolve_level().
    """
    log_level = (level or resolve_level()).upper()
    numeric_level = getattr(logging, log_level)

    if numeric_level <= logging.DEBUG:
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
    else:
        formatter = logging.Formatter(fmt="%(levelname)s - %(message)s")

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    root_logger.debug(f"Logging configured: level={log_level}")
