#!/usr/bin/env python3
# devconsole/ui/__init__.py
from __future__ import annotations
# Re-export convenient top-level API
from .utils import (
    ANSI,
    strip_ansi,
    enable_windows_vt,
    clear_screen,
    colorize,
    PRINT_MUTEX,
    print_line,
    set_terminal_title,
)
from .static import (
    init_logger,
    ColorizingStreamHandler,
    PlainFormatter,
    SEVERITY_STYLES,
    TerminalSink,
)

__all__ = [
    "ANSI",
    "strip_ansi",
    "enable_windows_vt",
    "clear_screen",
    "colorize",
    "PRINT_MUTEX",
    "print_line",
    "set_terminal_title",
    "init_logger",
    "ColorizingStreamHandler",
    "PlainFormatter",
    "SEVERITY_STYLES",
    "TerminalSink",
]
