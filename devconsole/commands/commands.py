#!/usr/bin/env python3
# devconsole/commands/commands.py
from __future__ import annotations

"""
Command registry.

This module provides:
- CommandRegistry: in-memory store of command variants keyed by (name, flag),
  with a separate name index used for help listings and completion.
"""

import logging
import threading
from typing import Dict, Iterator, Optional

from devconsole.commands import CommandDefinition, ParsedCommand

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Holds all command definitions and provides lookup utilities."""

    def __init__(self) -> None:
        # (name, flag) -> definition, in registration order
        self._definitions: Dict[tuple[str, str], CommandDefinition] = {}
        # Distinct names in first-registration order (flags not tracked)
        self._names: Dict[str, None] = {}
        self._lock = threading.RLock()

    # ---------------- Registration ----------------

    def register(self, definition: CommandDefinition) -> None:
        """Register a command variant, replacing any prior (name, flag) entry."""
        with self._lock:
            if self._definitions.pop(definition.key, None) is not None:
                logger.debug("Replacing command %s %s",
                              definition.name, definition.flag or "(no flag)")
            self._definitions[definition.key] = definition
            self._names.setdefault(definition.name, None)

    def clear(self) -> None:
        """Drop every definition and name."""
        with self._lock:
            self._definitions.clear()
            self._names.clear()

    # ---------------- Lookup ----------------

    def get(self, name: str, flag: str = "") -> Optional[CommandDefinition]:
        """Return the exact (name, flag) variant, or None."""
        with self._lock:
            return self._definitions.get((name, flag))

    def find_match(self, parsed: ParsedCommand) -> Optional[CommandDefinition]:
        """
        Resolve a parsed line to a definition.

        Only the first flag on the line takes part in matching; the rest are
        used for argument routing once a match is found.
        """
        flag = parsed.first_flag
        return self.get(parsed.name, flag if flag is not None else "")

    def names(self) -> list[str]:
        """Return the distinct command names (no flag suffixes)."""
        with self._lock:
            return list(self._names)

    def describe(self, name: str) -> Optional[str]:
        """Return the unflagged variant's description, or None if not found."""
        definition = self.get(name)
        return definition.description if definition else None

    def variants(self, name: str) -> list[CommandDefinition]:
        """Return every registered variant of `name`, unflagged first."""
        with self._lock:
            found = [d for d in self._definitions.values() if d.name == name]
        return sorted(found, key=lambda d: d.flag != "")

    def all(self) -> list[CommandDefinition]:
        with self._lock:
            return list(self._definitions.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._definitions)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._names

    def __iter__(self) -> Iterator[CommandDefinition]:
        return iter(self.all())
