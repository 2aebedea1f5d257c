"""Logging setup (loguru).

The package disables its own log records on import; call `configure_logging`
from an application or script to see them.
"""

from __future__ import annotations

from contextlib import suppress
import sys
from pathlib import Path
from typing import Any

from loguru import logger

_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | {name}:{function} | {message}"

# Sink ids installed by the last configure_logging call
_installed: list[int] = []


def configure_logging(
    level: str = "INFO",
    *,
    sink: Any = None,
    log_path: str | Path | None = None,
    reset: bool = False,
) -> list[int]:
    """Enable splicey logging and install sinks.

    `sink` defaults to stderr. When `log_path` is given, a rotating file sink
    at DEBUG level is added as well. Sinks from a previous call are replaced;
    sinks added by the host application are left alone unless `reset` is
    set, which clears every sink on the global logger (including loguru's
    default stderr sink). Returns the loguru sink ids.
    """
    logger.enable("splicey")
    if reset:
        logger.remove()
    else:
        for sink_id in _installed:
            # already removed by the host
            with suppress(ValueError):
                logger.remove(sink_id)
    _installed.clear()

    _installed.append(logger.add(sink if sink is not None else sys.stderr, level=level, format=_FORMAT))
    if log_path is not None:
        _installed.append(
            logger.add(
                str(log_path),
                level="DEBUG",
                format=_FORMAT,
                rotation="5 MB",
                retention=10,
                backtrace=False,
                diagnose=False,
            )
        )
    return list(_installed)


__all__ = ["configure_logging"]
