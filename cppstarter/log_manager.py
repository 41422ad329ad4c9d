# cppstarter/log_manager.py
"""
Centralized logger factory for cppstarter.

:func:`get_logger` returns a configured :class:`logging.Logger`. It supports:
- Colored console logs via `colorlog` when stderr is a TTY
- Plain console logs otherwise
- Optional file logging (UTF-8)
- Idempotent handler attachment (prevents duplicate handlers)

Environment variables
---------------------
CPPSTARTER_FORCE_COLOR=true|false
    Force colored logging on or off regardless of whether stderr is a TTY.
CPPSTARTER_LOG_LEVEL=DEBUG|INFO|WARNING|ERROR
    Default level for loggers created without an explicit level.

Console logs go to stderr so they never mix with generated text piped from
stdout.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Dict, Optional

import colorlog

__all__ = ["get_logger", "set_level"]

ROOT_LOGGER_NAME = "cppstarter"

_LEVEL_COLORS: Dict[str, str] = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}

_PLAIN_FMT = "[%(levelname)s] %(asctime)s - [%(name)s] %(message)s"
_PLAIN_DATEFMT = "%Y-%m-%d %H:%M:%S"
_COLOR_FMT = (
    "%(log_color)s[%(levelname)s]%(reset)s %(asctime)s - "
    "[%(name)s] %(message)s"
)


def _should_use_color() -> bool:
    """Return True if colorized logs should be used."""
    env = os.getenv("CPPSTARTER_FORCE_COLOR")
    if env is not None:
        return env.strip().lower() in {"1", "true", "yes", "on"}
    try:
        return sys.stderr.isatty()
    except (AttributeError, ValueError):
        return False


def _default_level() -> int:
    """Resolve the level named by ``CPPSTARTER_LOG_LEVEL`` (WARNING if unset/unknown)."""
    name = os.getenv("CPPSTARTER_LOG_LEVEL", "WARNING").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


class _StderrHandler(logging.StreamHandler):
    """StreamHandler bound to whatever ``sys.stderr`` is at emit time."""

    def __init__(self) -> None:
        super().__init__(stream=sys.stderr)

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value) -> None:
        pass


def _build_colored_stream_handler() -> logging.Handler:
    handler = _StderrHandler()
    handler.setFormatter(
        colorlog.ColoredFormatter(
            fmt=_COLOR_FMT,
            datefmt=_PLAIN_DATEFMT,
            log_colors=_LEVEL_COLORS,
        )
    )
    return handler


def _build_plain_stream_handler() -> logging.Handler:
    handler = _StderrHandler()
    handler.setFormatter(logging.Formatter(fmt=_PLAIN_FMT, datefmt=_PLAIN_DATEFMT))
    return handler


def _attach_stream_handler(logger: logging.Logger) -> None:
    """Attach a single stream handler to `logger` if not already attached."""
    if getattr(logger, "_cppstarter_stream_handler_attached", False):
        return

    handler = _build_colored_stream_handler() if _should_use_color() else _build_plain_stream_handler()
    logger.addHandler(handler)
    logger._cppstarter_stream_handler_attached = True  # type: ignore[attr-defined]


def _attach_file_handler(logger: logging.Logger, log_to_file: str) -> None:
    """Attach one FileHandler per absolute path per logger."""
    log_file_path = os.path.abspath(log_to_file)
    for h in logger.handlers:
        if isinstance(h, logging.FileHandler) and getattr(h, "baseFilename", None) == log_file_path:
            return

    try:
        fhandler = logging.FileHandler(log_file_path, encoding="utf-8")
    except OSError as exc:
        logger.error("Failed to open log file '%s': %s", log_file_path, exc)
        return

    fhandler.setFormatter(logging.Formatter(fmt=_PLAIN_FMT, datefmt=_PLAIN_DATEFMT))
    logger.addHandler(fhandler)


def get_logger(
    name: str = ROOT_LOGGER_NAME,
    level: Optional[int] = None,
    log_to_file: Optional[str] = None,
) -> logging.Logger:
    """
    Return a configured, reusable :class:`logging.Logger`.

    Parameters
    ----------
    name : str, default "cppstarter"
        Logger name. Module loggers should pass ``__name__`` so they become
        children of the package logger and share its handler.
    level : Optional[int]
        Explicit level. Defaults to ``CPPSTARTER_LOG_LEVEL`` for the package
        logger; child loggers inherit from it.
    log_to_file : Optional[str]
        Optional filesystem path for file logging.

    Returns
    -------
    logging.Logger
        A configured logger instance.

    Notes
    -----
    Only the package logger (``cppstarter``) owns a stream handler and has
    ``propagate = False``; child loggers propagate to it.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not getattr(root, "_cppstarter_stream_handler_attached", False):
        root.setLevel(_default_level())
        root.propagate = False
        _attach_stream_handler(root)

    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    if log_to_file:
        _attach_file_handler(logger, log_to_file)
    return logger


def set_level(level: int) -> None:
    """Change the level of the package logger (used by ``--verbose``)."""
    get_logger().setLevel(level)
