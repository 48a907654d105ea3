#!/usr/bin/env python3
# devconsole/interface/history.py
from __future__ import annotations

"""
Submitted-line history with Up/Down style recall.

The buffer keeps distinct lines (re-submitting a line moves it to the end),
is capped, and tracks a cursor:
    -1          empty buffer
    len(buf)    "one past newest", set after every add
"""

import logging
from typing import Iterator

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_SIZE = 100


class HistoryBuffer:
    """Ordered, deduplicated, size-bounded log of raw input lines."""

    def __init__(self, max_size: int = DEFAULT_HISTORY_SIZE) -> None:
        if max_size < 1:
            raise ValueError("History size must be >= 1")
        self._lines: list[str] = []
        self._cursor = -1
        self._max_size = max_size

    @property
    def max_size(self) -> int:
        return self._max_size

    @property
    def cursor(self) -> int:
        return self._cursor

    def add(self, line: str) -> None:
        if not line or not line.strip():
            return

        # Move an existing identical line to the end
        if line in self._lines:
            self._lines.remove(line)
        self._lines.append(line)

        while len(self._lines) > self._max_size:
            self._lines.pop(0)

        self._cursor = len(self._lines)
        logger.debug("Command added to history: %s", line)

    def previous(self) -> str:
        """Step back one entry; returns "" at the oldest entry."""
        if self._cursor > 0:
            self._cursor -= 1
            return self._lines[self._cursor]
        return ""

    def next(self) -> str:
        """Step forward one entry; returns "" at the newest entry."""
        if self._cursor < len(self._lines) - 1:
            self._cursor += 1
            return self._lines[self._cursor]
        return ""

    def clear(self) -> None:
        self._lines.clear()
        self._cursor = -1
        logger.info("Command history cleared")

    def entries(self) -> tuple[str, ...]:
        return tuple(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries())
