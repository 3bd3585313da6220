"""Logging configuration for the ``ledgerapi`` package.

Every module logs through ``get_logger("ledgerapi.<module>")``. Nothing is
emitted until an entry point (``ledgerapi`` CLI ``main`` or ``serve``) calls
``configure_logging``, which attaches one ``StreamHandler`` to the
``ledgerapi`` logger. The level comes from the caller, else from
``LEDGERAPI_LOG_LEVEL``, else INFO.

Tokens, secrets and plaintext passwords are never passed to a logger.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

LOG_LEVEL_ENV = "LEDGERAPI_LOG_LEVEL"
DEFAULT_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

_PKG_LOGGER_NAME = "ledgerapi"
_CONFIGURED = False


def _level_from_name(name: str) -> int | None:
    name = name.strip().upper()
    if name.isdigit():
        return int(name)
    numeric = logging.getLevelName(name)
    return numeric if isinstance(numeric, int) else None


def resolve_level(level: int | str | None = None) -> int:
    """Turn an explicit level, the environment override or the default into a number.

    Unknown level names fall through to the next source instead of failing
    startup.
    """
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        numeric = _level_from_name(level)
        if numeric is not None:
            return numeric
    env_val = os.getenv(LOG_LEVEL_ENV)
    if env_val:
        numeric = _level_from_name(env_val)
        if numeric is not None:
            return numeric
    return logging.INFO


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] = sys.stderr,
) -> None:
    """Attach the package handler; later calls are no-ops.

    Args:
        level: Level as ``int`` or name. ``None`` reads ``LEDGERAPI_LOG_LEVEL``.
        fmt: Format string, ``DEFAULT_FORMAT`` when omitted
        stream: Handler output, stderr by default
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    numeric = resolve_level(level)
    logger = logging.getLogger(_PKG_LOGGER_NAME)

    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    handler = logging.StreamHandler(stream)
    handler.setLevel(numeric)
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))

    logger.setLevel(numeric)
    logger.addHandler(handler)
    logger.propagate = False

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger, keeping the package silent until configured."""
    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
