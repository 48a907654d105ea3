#!/usr/bin/env python3
# devconsole/commands/__init__.py
from __future__ import annotations

"""
Package for command definitions and registration.

Provides:
- Data structures and protocols (`CommandDefinition`, `ParsedCommand`,
  `FlagArgument`, `CommandHandler`, `OutputSink`, `Severity`).
- In-memory registry keyed by (name, flag) (`CommandRegistry`).

This package re-exports public APIs from:
- command_types.py
- commands.py
"""


# Re-export from submodules
from .command_types import (
    CommandDefinition,
    CommandHandler,
    FlagArgument,
    OutputSink,
    ParsedCommand,
    Severity,
)
from .commands import CommandRegistry

__all__ = [
    "CommandDefinition",
    "CommandHandler",
    "FlagArgument",
    "OutputSink",
    "ParsedCommand",
    "Severity",
    "CommandRegistry",
]
