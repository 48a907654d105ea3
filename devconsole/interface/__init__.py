#!/usr/bin/env python3
# devconsole/interface/__init__.py
from __future__ import annotations

"""
Package for command parsing, dispatch and the interactive console.

Provides:
- Tokenizer and flag/argument splitter.
- Dispatcher with per-flag argument routing.
- History buffer and command-name completion.
- Script runner (sequential lines with pause directives).
- Console facade tying these together, the command loader, and CLI frontends.
"""


# Leaves first (console depends on them)
from .parser import tokenize, split_flags, parse_line, args_for_position
from .completion import Completer
from .history import HistoryBuffer
from .handler import Dispatcher, DispatchStatus, HELP_TEXT
from .script import ScriptRunner, ScriptState, parse_pause

# Facade
from .console import Console

# Loader
from .loader import load_commands

# CLI frontends
from .cli import BaseCLI, PromptToolkitCLI, ReadlineCLI, make_cli, repl

__all__ = [
    # parser
    "tokenize",
    "split_flags",
    "parse_line",
    "args_for_position",
    # completion / history
    "Completer",
    "HistoryBuffer",
    # handler
    "Dispatcher",
    "DispatchStatus",
    "HELP_TEXT",
    # script
    "ScriptRunner",
    "ScriptState",
    "parse_pause",
    # console
    "Console",
    # loader
    "load_commands",
    # cli
    "BaseCLI",
    "PromptToolkitCLI",
    "ReadlineCLI",
    "make_cli",
    "repl",
]
