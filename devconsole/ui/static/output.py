#!/usr/bin/env python3
# devconsole/ui/static/output.py
from __future__ import annotations

from devconsole.commands import Severity
from devconsole.ui.utils import colorize, enable_windows_vt, print_line

SEVERITY_STYLES: dict[Severity, tuple[str, ...]] = {
    Severity.NORMAL: (),
    Severity.ERROR: ("bright_red",),
    Severity.SUCCESS: ("bright_green",),
    Severity.WARNING: ("bright_yellow",),
    Severity.INFORMATION: ("bright_cyan",),
}


class TerminalSink:
    """Output sink that prints each message on its own line, coloured by severity."""

    def __init__(self, *, file=None, color: bool | None = None) -> None:
        self._file = file
        self._color = enable_windows_vt() if color is None else color

    def __call__(self, message: str, severity: Severity = Severity.NORMAL) -> None:
        text = colorize(message, *SEVERITY_STYLES.get(severity, ())) if self._color else message
        print_line(text, file=self._file)
