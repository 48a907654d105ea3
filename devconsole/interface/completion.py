#!/usr/bin/env python3
# devconsole/interface/completion.py
from __future__ import annotations

"""
Command name completion.

The Completer keeps its own snapshot of command names. It does not watch the
registry; whoever registers commands must push the new name set through
`update_names` after every change.
"""

import logging
from typing import Iterable

logger = logging.getLogger(__name__)


class Completer:
    """Case-insensitive prefix matcher over a snapshot of command names."""

    def __init__(self, names: Iterable[str] = ()) -> None:
        self._names: dict[str, None] = dict.fromkeys(names)

    def update_names(self, names: Iterable[str]) -> None:
        """Replace the known names wholesale."""
        if names is None:
            raise TypeError("names must be an iterable of strings, not None")
        self._names = dict.fromkeys(names)
        logger.debug("Auto-complete command list updated (%d names)", len(self._names))

    def names(self) -> list[str]:
        return list(self._names)

    def suggest(self, partial: str) -> list[str]:
        """Return known names starting with `partial` (case-insensitive)."""
        if not partial or not partial.strip():
            return []
        prefix = partial.lower()
        return [name for name in self._names if name.lower().startswith(prefix)]


def split_current_token(raw_input: str) -> tuple[list[str], str]:
    """
    Return (parts, current_prefix) for the text before the cursor.

    Trailing whitespace appends an empty token to signal that a new token
    has started.
    """
    if not raw_input:
        return [], ""
    parts = raw_input.split()
    if raw_input[-1].isspace():
        parts.append("")
    current_prefix = parts[-1] if parts else ""
    return parts, current_prefix
