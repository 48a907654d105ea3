#!/usr/bin/env python3
# devconsole/ui/static/logging.py
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from devconsole.ui.utils import ANSI, PRINT_MUTEX, enable_windows_vt, strip_ansi


class ColorizingStreamHandler(logging.StreamHandler):
    """
    StreamHandler with ANSI level colours, falling back to plain text.

    Without an explicit stream it writes to whatever `sys.stderr` is at emit
    time, so output follows a prompt that patches the standard streams.
    """

    _LEVEL_COLORS = {
        logging.DEBUG: ANSI["bright_black"],
        logging.INFO: "",
        logging.WARNING: ANSI["yellow"],
        logging.ERROR: ANSI["red"],
        logging.CRITICAL: ANSI["magenta"],
    }

    def __init__(self, stream=None) -> None:
        self._follow_stderr = stream is None
        super().__init__(stream)
        self._use_ansi = enable_windows_vt()

    @property
    def stream(self):
        return sys.stderr if self._follow_stderr else self._stream

    @stream.setter
    def stream(self, value) -> None:
        self._stream = value

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)

            if self._use_ansi:
                ansi = self._LEVEL_COLORS.get(record.levelno, "")
                if ansi:
                    message = f"{ansi}{message}{ANSI['reset']}"
            else:
                message = strip_ansi(message)

            with PRINT_MUTEX:
                self.stream.write(message + self.terminator)
                self.flush()
        except Exception:
            self.handleError(record)


class PlainFormatter(logging.Formatter):
    """Formatter that strips ANSI (good for log files)."""

    def format(self, record: logging.LogRecord) -> str:
        return strip_ansi(super().format(record))


def init_logger(
    name: str = "devconsole",
    level: int | str = logging.INFO,
    logfile: Optional[str] = None,
) -> logging.Logger:
    """
    Initialize a color-safe logger.

    Console: ANSI if available, else plain.
    File (optional): rotating, plain text, UTF-8.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False

    if not any(isinstance(h, ColorizingStreamHandler) for h in logger.handlers):
        console_handler = ColorizingStreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(
            logging.Formatter("[%(levelname)s] %(message)s"))
        logger.addHandler(console_handler)

    if logfile and not any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
        file_handler = RotatingFileHandler(
            logfile, maxBytes=2_000_000, backupCount=3, encoding="utf-8"
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            PlainFormatter(
                "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(file_handler)

    return logger
