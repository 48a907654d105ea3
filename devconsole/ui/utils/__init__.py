#!/usr/bin/env python3
# devconsole/ui/utils/__init__.py
from __future__ import annotations
from .ansi import (
    ANSI,
    strip_ansi,
    enable_windows_vt,
    clear_screen,
    colorize,
)
from .console import PRINT_MUTEX, print_line, set_terminal_title

__all__ = [
    "ANSI",
    "strip_ansi",
    "enable_windows_vt",
    "clear_screen",
    "colorize",
    "PRINT_MUTEX",
    "print_line",
    "set_terminal_title",
]
