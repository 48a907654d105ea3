#!/usr/bin/env python3
# devconsole/ui/utils/console.py
from __future__ import annotations

import os
import sys
import threading

from .ansi import enable_windows_vt

# Single shared print mutex for all UI output (sink lines and logging).
PRINT_MUTEX = threading.Lock()


def print_line(text: str = "", *, file=None, flush: bool = False) -> None:
    """Thread-safe single-line print."""
    # Resolve lazily so redirected/patched stdout is honoured.
    stream = file if file is not None else sys.stdout
    with PRINT_MUTEX:
        stream.write(f"{text}\n")
        if flush:
            stream.flush()


def set_terminal_title(title_text: str) -> None:
    """Set the terminal window title when the terminal understands it."""
    if os.name == "nt" or not enable_windows_vt() or not sys.stdout.isatty():
        return
    sys.stdout.write(f"\x1b]2;{title_text}\x07")
    sys.stdout.flush()
