"""Logging utilities for the plugin.

protoc reads the response from stdout, so every handler writes to stderr.
"""

from __future__ import annotations

import logging
import os

from .config import DEFAULT_LOG_LEVEL, GENERATOR_NAME, LOG_LEVEL_ENV

_LOGGER_NAME = "protoc_gen_twirp_js"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the plugin hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def _env_level() -> int:
    value = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(value)
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(*, verbose: bool = False) -> logging.Logger:
    """Configure the plugin logger with a single stderr handler."""
    level = logging.DEBUG if verbose else _env_level()
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Reset handlers to avoid duplicate output when main() runs more than once.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(f"[{GENERATOR_NAME}] %(levelname)s %(message)s"))
    logger.addHandler(handler)

    return logger


__all__ = ["configure_logging", "get_logger"]
