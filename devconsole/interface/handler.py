#!/usr/bin/env python3
# devconsole/interface/handler.py
from __future__ import annotations

"""
Command dispatch.

Resolves a ParsedCommand against the registry and invokes the matched handler:
  - with flags: once per flag position, each call receiving only the arguments
    that followed that flag;
  - without flags: once, with every argument.

Unknown commands and unsupported flags are reported through the output sink.
Handler exceptions are logged and reported, never propagated.
"""

import difflib
import logging
from enum import Enum

from devconsole.commands import (
    CommandDefinition,
    CommandRegistry,
    OutputSink,
    ParsedCommand,
    Severity,
)
from devconsole.interface.parser import args_for_position

logger = logging.getLogger(__name__)

# Short hint appended to "not found" errors
HELP_TEXT = "Type 'help' for a list of commands."


class DispatchStatus(str, Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    FLAG_NOT_SUPPORTED = "flag_not_supported"
    HANDLER_FAILED = "handler_failed"


# ---------------------------------------------------------------------------
# Utilities
# ---------------------------------------------------------------------------

def _suggest_similar_names(name: str, universe: list[str]) -> str:
    """Return a short suggestion string for misspelled commands."""
    matches = difflib.get_close_matches(name, universe, n=3, cutoff=0.6)
    return f" Did you mean: {', '.join(matches)}?" if matches else ""


# ---------------------------------------------------------------------------
# Dispatcher
# ---------------------------------------------------------------------------

class Dispatcher:
    """Matches parsed input against a registry it owns and runs handlers."""

    def __init__(self, sink: OutputSink, registry: CommandRegistry | None = None) -> None:
        self.registry = registry if registry is not None else CommandRegistry()
        self._sink = sink

    def execute(self, parsed: ParsedCommand) -> DispatchStatus:
        """Run the command described by `parsed`; always returns normally."""
        definition = self.registry.find_match(parsed)

        if definition is None:
            return self._handle_not_found(parsed)

        try:
            self._invoke(definition, parsed)
        except Exception as exc:
            logger.debug("Error executing command '%s'", parsed.name, exc_info=True)
            self._sink(
                f"Error executing command '{parsed.name}': {type(exc).__name__}: {exc}",
                Severity.ERROR,
            )
            return DispatchStatus.HANDLER_FAILED
        return DispatchStatus.OK

    def _invoke(self, definition: CommandDefinition, parsed: ParsedCommand) -> None:
        if parsed.flags:
            # One call per flag position, in the order the flags were typed.
            for position in parsed.flags:
                definition.invoke(args_for_position(position, parsed.arguments))
        else:
            definition.invoke(args_for_position(0, parsed.arguments))

    def _handle_not_found(self, parsed: ParsedCommand) -> DispatchStatus:
        if parsed.flags:
            self._sink(
                f"Command '{parsed.name}' does not support the provided flag.",
                Severity.WARNING,
            )
            return DispatchStatus.FLAG_NOT_SUPPORTED

        hint = _suggest_similar_names(parsed.name, self.registry.names())
        self._sink(f"Command '{parsed.name}' not found.{hint} {HELP_TEXT}", Severity.ERROR)
        return DispatchStatus.NOT_FOUND
