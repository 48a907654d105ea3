#!/usr/bin/env python3
# devconsole/ui/static/__init__.py
from __future__ import annotations
from .logging import (
    init_logger,
    ColorizingStreamHandler,
    PlainFormatter,
)
from .output import SEVERITY_STYLES, TerminalSink

__all__ = [
    "init_logger",
    "ColorizingStreamHandler",
    "PlainFormatter",
    "SEVERITY_STYLES",
    "TerminalSink",
]
