# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""structlog setup driven by spelltimer Settings.

Level, renderer and output stream all come from ``Settings``
(``SPELLTIMER_LOG_LEVEL``, ``SPELLTIMER_LOG_FORMAT``, ``SPELLTIMER_LOG_STREAM``).
The CLI writes its report to stdout, so logs default to stderr.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from spelltimer.settings import Settings

__all__ = ["LOG_LEVELS", "configure_logging", "get_logger"]

LOG_LEVELS: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


def _renderer(log_format: str) -> structlog.typing.Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(colors=False)


def configure_logging(settings: Settings | None = None, file: IO[str] | None = None) -> None:
    """Install the structlog configuration described by *settings*.

    Args:
        settings: Settings instance (read from the environment if None)
        file: Explicit output stream; overrides ``settings.log_stream``
    """
    if settings is None:
        from spelltimer.settings import Settings

        settings = Settings()

    if file is None:
        file = sys.stdout if settings.log_stream == "stdout" else sys.stderr

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            _renderer(settings.log_format),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(LOG_LEVELS[settings.log_level]),
        logger_factory=structlog.PrintLoggerFactory(file=file),
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    return structlog.get_logger(name)
