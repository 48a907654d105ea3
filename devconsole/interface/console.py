#!/usr/bin/env python3
# devconsole/interface/console.py
from __future__ import annotations

"""
Console facade.

Wires the parser, dispatcher (and its registry), history, completer and
script runner together behind one object a host can drive:

    console = Console(sink=TerminalSink())
    console.register_command("echo", "Print text", "", lambda args: ...)
    console.execute_line('echo "hello world"')
"""

import asyncio
import logging
from pathlib import Path
from typing import Callable, Iterable, Optional

from devconsole import __version__
from devconsole.commands import (
    CommandDefinition,
    CommandHandler,
    CommandRegistry,
    OutputSink,
    Severity,
)
from devconsole.interface.completion import Completer
from devconsole.interface.handler import Dispatcher, DispatchStatus
from devconsole.interface.history import DEFAULT_HISTORY_SIZE, HistoryBuffer
from devconsole.interface.parser import parse_line
from devconsole.interface.script import DEFAULT_LINE_DELAY, DEFAULT_PAUSE, ScriptRunner

logger = logging.getLogger(__name__)


class Console:
    """One interactive command stream: registry, history, completion, scripts."""

    def __init__(
        self,
        sink: Optional[OutputSink] = None,
        *,
        history_size: int = DEFAULT_HISTORY_SIZE,
        line_delay: float = DEFAULT_LINE_DELAY,
        default_pause: float = DEFAULT_PAUSE,
        on_clear: Optional[Callable[[], None]] = None,
    ) -> None:
        if sink is None:
            from devconsole.ui import TerminalSink
            sink = TerminalSink()
        self._sink = sink
        self._on_clear = on_clear
        self.version = __version__

        self.dispatcher = Dispatcher(sink, CommandRegistry())
        self.history = HistoryBuffer(history_size)
        self.completer = Completer(self.dispatcher.registry.names())
        self.scripts = ScriptRunner(
            self.execute_line, sink, line_delay=line_delay, default_pause=default_pause
        )

    @property
    def registry(self) -> CommandRegistry:
        return self.dispatcher.registry

    # ---------------- Output ----------------

    def write(self, message: str, severity: Severity = Severity.NORMAL) -> None:
        self._sink(message, severity)

    def clear(self) -> None:
        """Ask the host to clear its output surface."""
        if self._on_clear is not None:
            self._on_clear()

    def display_info(self) -> None:
        self.write(f"Dev Console v{self.version}", Severity.SUCCESS)
        self.write("Type 'help' for a list of commands.", Severity.NORMAL)

    # ---------------- Registration ----------------

    def register(self, definition: CommandDefinition) -> None:
        self.registry.register(definition)
        self.completer.update_names(self.registry.names())

    def register_command(
        self, name: str, description: str, flag: str, handler: CommandHandler
    ) -> CommandDefinition:
        definition = CommandDefinition(name=name, description=description, flag=flag, handler=handler)
        self.register(definition)
        return definition

    def command(
        self,
        *,
        name: str | None = None,
        description: str | None = None,
        flag: str = "",
    ) -> Callable[[CommandHandler], CommandHandler]:
        """
        Decorator to register a function as a console command.

        - Function name is used for `name` if not provided.
        - The docstring is used for `description` if not provided.
        """

        def wrapper(func: CommandHandler) -> CommandHandler:
            self.register_command(
                (name or func.__name__).lower(),  # type: ignore[attr-defined]
                (description or (func.__doc__ or "")).strip(),
                flag,
                func,
            )
            return func

        return wrapper

    # ---------------- Execution ----------------

    def execute_line(self, line: str) -> DispatchStatus | None:
        """
        Parse, dispatch and record one raw input line.

        Returns the dispatch status, or None when the line produced no command.
        """
        try:
            parsed = parse_line(line)
            if parsed is None:
                if line is None or not line.strip():
                    self.write("Empty command input", Severity.WARNING)
                else:
                    self.write("Could not parse command input", Severity.WARNING)
                return None
            status = self.dispatcher.execute(parsed)
            self.history.add(line)
            return status
        except Exception as exc:
            logger.debug("Error executing command %r", line, exc_info=True)
            self.write(f"Error executing command: {exc}", Severity.ERROR)
            return None

    # ---------------- Scripts ----------------

    async def run_script(self, lines: Iterable[str], source: str = "<script>") -> bool:
        return await self.scripts.run(lines, source=source)

    async def run_script_file(self, path: str | Path) -> bool:
        return await self.scripts.run_file(path)

    def start_script(self, path: str | Path) -> Optional[asyncio.Task]:
        """
        Launch a script file without waiting for it.

        Returns the task (await it for completion). Scripts suspend between
        lines, so they need a running event loop; without one the request is
        reported as an error and nothing runs.
        """
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            logger.debug("No running event loop for script %s", path)
            self.write("Scripts require a running event loop", Severity.ERROR)
            return None
        return self.scripts.start(path)

    # ---------------- Recall / completion / help ----------------

    def previous_command(self) -> str:
        return self.history.previous()

    def next_command(self) -> str:
        return self.history.next()

    def suggest(self, partial: str) -> list[str]:
        return self.completer.suggest(partial)

    def command_names(self) -> list[str]:
        return self.registry.names()

    def describe(self, name: str) -> str:
        description = self.registry.describe(name)
        return description if description is not None else "Command not found"

    def variants(self, name: str) -> list[CommandDefinition]:
        return self.registry.variants(name)
