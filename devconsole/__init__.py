#!/usr/bin/env python3
# devconsole/__init__.py
from __future__ import annotations
"""
Developer console package bootstrap.

Keep imports shallow: subpackages expose their own APIs through their
__init__.py files.
"""

__version__ = "1.0.0"

# Optional convenience re-exports (keep minimal; no frontend wiring here)
from devconsole.commands import (  # noqa: E402,F401
    CommandDefinition,
    CommandRegistry,
    ParsedCommand,
    Severity,
)
from devconsole.interface.console import Console  # noqa: E402,F401
