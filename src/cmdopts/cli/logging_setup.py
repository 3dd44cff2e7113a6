"""Logging configuration for the CLI entry point.

The core modules only create loggers; handlers are attached here, once,
by :func:`configure_logging`.  Rich's ``RichHandler`` is used when Rich
is importable, a plain stderr handler otherwise.
"""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV: str = "CMDOPTS_LOG_LEVEL"
DEFAULT_LEVEL: int = logging.WARNING

_FORMAT = "%(name)s: %(message)s"


def resolve_level(name: str | None) -> int:
    """Map a level name such as ``"debug"`` to its numeric value.

    Unknown or empty names resolve to :data:`DEFAULT_LEVEL`.
    """
    if not name:
        return DEFAULT_LEVEL
    level = logging.getLevelName(name.strip().upper())
    if isinstance(level, int):
        return level
    return DEFAULT_LEVEL


def _build_handler() -> logging.Handler:
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(f"%(levelname)s {_FORMAT}"))
        return handler

    from cmdopts.cli.console import get_rich_console

    rich_handler = RichHandler(
        console=get_rich_console(stderr=True),
        show_time=False,
        show_path=False,
    )
    rich_handler.setFormatter(logging.Formatter(_FORMAT))
    return rich_handler


def configure_logging(level: str | None = None) -> logging.Logger:
    """Attach a single handler to the ``cmdopts`` package logger.

    Parameters
    ----------
    level:
        Level name.  When ``None``, the ``CMDOPTS_LOG_LEVEL``
        environment variable is consulted.

    Returns
    -------
    logging.Logger
        The configured package logger.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV)

    logger = logging.getLogger("cmdopts")
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(_build_handler())
    logger.setLevel(resolve_level(level))
    logger.propagate = False
    return logger
