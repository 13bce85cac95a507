"""Structured logging setup for transcript-pdf.

Provides a consistent log format across the application with ISO 8601
timestamps and pipe-separated fields.  The PDF engine (pdfminer) logs
heavily at DEBUG level, so its loggers are held at WARNING unless the
application itself runs at DEBUG.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

# Marks the handler installed by setup_logging so repeated calls can find it.
_HANDLER_ATTR = "_transcript_pdf_log_handler"

_ENGINE_LOGGERS = ("pdfminer", "pdfplumber")


def setup_logging(level: str = "INFO", stream: TextIO | None = None) -> None:
    """Configure the root logger with the project formatter.

    Attaches a single :class:`logging.StreamHandler` to the root logger.
    Calling this function again only updates the level (and the stream,
    when one is given); it never adds a second handler.

    Args:
        level: A standard logging level name (e.g. ``"DEBUG"``,
            ``"INFO"``, ``"WARNING"``).
        stream: Destination stream.  Defaults to *stderr*.

    Raises:
        ValueError: If *level* is not a recognised logging level string.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level!r}")

    root = logging.getLogger()
    root.setLevel(numeric_level)

    engine_level = logging.DEBUG if numeric_level <= logging.DEBUG else logging.WARNING
    for name in _ENGINE_LOGGERS:
        logging.getLogger(name).setLevel(engine_level)

    for handler in root.handlers:
        if getattr(handler, _HANDLER_ATTR, False):
            handler.setLevel(numeric_level)
            if stream is not None and isinstance(handler, logging.StreamHandler):
                handler.setStream(stream)
            return

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))

    setattr(handler, _HANDLER_ATTR, True)
    root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return a named logger.

    Args:
        name: Dotted logger name, typically ``__name__`` of the caller.

    Returns:
        A :class:`logging.Logger` instance.
    """
    return logging.getLogger(name)
