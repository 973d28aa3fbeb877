"""Logging for the ``sms_ingest`` package.

The parser and loaders only ask for named loggers under ``"sms_ingest"`` and
stay silent until a host application configures output. The CLI calls
:func:`configure_logging` from its root callback so the ``parse-file``
summary and ``--log-level DEBUG`` stage traces render through rich on
stderr, leaving stdout to the transaction rows.
"""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "sms_ingest"
LEVEL_ENV = "SMS_INGEST_LOG_LEVEL"

# Silent by default for library use.
logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def resolve_level(level: str | None = None) -> int:
    """Map a level name or number to a ``logging`` level.

    Falls back to ``SMS_INGEST_LOG_LEVEL`` and then ``INFO``. Unknown names
    raise ``ValueError``.
    """

    name = (level or os.getenv(LEVEL_ENV) or "INFO").strip().upper()
    if name.isdigit():
        return int(name)
    value = logging.getLevelName(name)
    if not isinstance(value, int):
        raise ValueError(f"unknown log level: {name!r}")
    return value


def configure_logging(level: str | None = None, *, console: Console | None = None) -> None:
    """Route the package logger to a single rich handler.

    Safe to call repeatedly: earlier handlers are replaced, so each CLI
    invocation logs to the stderr that is current when it runs.
    """

    resolved = resolve_level(level)
    logger = logging.getLogger(PACKAGE_LOGGER)
    for h in list(logger.handlers):
        logger.removeHandler(h)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    logger.addHandler(handler)
    logger.setLevel(resolved)
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


__all__ = ["LEVEL_ENV", "configure_logging", "get_logger", "resolve_level"]
