"""Logging setup for windsurf-relay.

All diagnostics go to stderr. The relay's stdout belongs to the child
process, so nothing in this package may log there.
"""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "windsurf_relay"

_HANDLER_TAG = "_windsurf_relay_handler"
_DEFAULT_FORMAT = "[windsurf-relay] %(message)s"
_DEBUG_FORMAT = "[windsurf-relay] %(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name."""
    return logging.getLogger(name)


def configure_logging(
    *,
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
) -> None:
    """Configure the package logger.

    Safe to call repeatedly; the handler installed by a previous call is
    replaced rather than duplicated.

    Args:
        debug: Enable debug output (takes precedence over the other flags).
        verbose: Enable info-level output.
        quiet: Only show errors.
    """
    if debug:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_DEBUG_FORMAT if debug else _DEFAULT_FORMAT))
    setattr(handler, _HANDLER_TAG, True)

    logger.addHandler(handler)
    logger.setLevel(level)
