# SGA: Signature-configurable Geometric Algebra
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
#
# This project is fully open-source, including for commercial use.
# We believe Geometric Algebra is the future of AI, and we want 
# the industry to build upon this "unbending" paradigm.

"""Logging for the ``sga`` package.

Library modules obtain loggers through :func:`get_logger`; handlers are
attached to the ``sga`` logger the first time one is requested.

Environment variables (read when no explicit value is passed):
    SGA_LOG_LEVEL: DEBUG / INFO (default) / WARNING / ERROR
    SGA_LOG_FILE: optional path; appends plain-text log lines
"""

import logging
import os
import sys

ROOT = "sga"

_CONFIGURED = False

_LEVEL_COLORS = {
    logging.DEBUG: "\033[36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[35m",
}
_RESET = "\033[0m"


class _LevelColorFormatter(logging.Formatter):
    """Colours the level name; used only for TTY handlers."""

    def format(self, record: logging.LogRecord) -> str:
        # Colour a copy so other handlers keep the plain level name
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = (
            f"{_LEVEL_COLORS.get(record.levelno, '')}{record.levelname}{_RESET}"
        )
        return super().format(record)


def _console_handler(stream) -> logging.Handler:
    fmt = "%(levelname)s %(name)s: %(message)s"
    handler = logging.StreamHandler(stream)
    if getattr(stream, "isatty", None) and stream.isatty():
        handler.setFormatter(_LevelColorFormatter(fmt))
    else:
        handler.setFormatter(logging.Formatter(fmt))
    return handler


def configure_logging(level=None, log_file=None, stream=None) -> logging.Logger:
    """(Re)configure the ``sga`` logger.

    Replaces any handlers installed by an earlier call.

    Args:
        level: Level name or number. Defaults to ``$SGA_LOG_LEVEL`` or INFO.
        log_file: Optional path for an extra plain-text handler. Defaults
            to ``$SGA_LOG_FILE``.
        stream: Console stream. Defaults to stderr.

    Returns:
        The ``sga`` root logger.
    """
    global _CONFIGURED
    _CONFIGURED = True

    root = logging.getLogger(ROOT)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    if level is None:
        level = os.environ.get("SGA_LOG_LEVEL", "INFO")
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(level)

    root.addHandler(_console_handler(stream if stream is not None else sys.stderr))

    log_file = log_file if log_file is not None else os.environ.get("SGA_LOG_FILE")
    if log_file:
        fh = logging.FileHandler(log_file, mode="a")
        fh.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s"
        ))
        root.addHandler(fh)
    return root


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``sga`` hierarchy.

    Args:
        name: Typically ``__name__`` of the calling module.
    """
    if not _CONFIGURED:
        configure_logging()
    if name == ROOT or name.startswith(ROOT + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT}.{name}")
