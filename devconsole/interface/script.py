#!/usr/bin/env python3
# devconsole/interface/script.py
from __future__ import annotations

"""
Script replay.

Feeds lines from a script through the same path as typed input, one at a
time, on the asyncio event loop:

    // comment          ignored
    (blank)             ignored
    pause(2.5)          suspend for 2.5 seconds
    anything else       echoed, executed, then a short fixed delay

At most one script runs at a time; a second request while one is active is
rejected, not queued.
"""

import asyncio
import logging
import math
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Iterable, Optional

from devconsole.commands import OutputSink, Severity

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "//"
PAUSE_PREFIX = "pause("
DEFAULT_LINE_DELAY = 0.05
DEFAULT_PAUSE = 1.0


class ScriptState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"


def parse_pause(line: str) -> float:
    """
    Extract the seconds from a 'pause(<seconds>)' directive.

    Raises ValueError when the number is missing, malformed, negative or not finite.
    """
    text = line.strip()
    start = text.index("(") + 1
    end = text.index(")")
    seconds = float(text[start:end])
    if not math.isfinite(seconds) or seconds < 0:
        raise ValueError(f"invalid pause duration: {text[start:end]!r}")
    return seconds


class ScriptRunner:
    """Single-flight, cooperatively scheduled script executor."""

    def __init__(
        self,
        execute_line: Callable[[str], Any],
        sink: OutputSink,
        *,
        line_delay: float = DEFAULT_LINE_DELAY,
        default_pause: float = DEFAULT_PAUSE,
    ) -> None:
        self._execute_line = execute_line
        self._sink = sink
        self.line_delay = line_delay
        self.default_pause = default_pause
        self._state = ScriptState.IDLE
        self._task: Optional[asyncio.Task] = None

    @property
    def state(self) -> ScriptState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state is ScriptState.RUNNING

    @property
    def task(self) -> Optional[asyncio.Task]:
        """The task created by `start()` for the in-flight run, if any."""
        return self._task

    # ---------------- Entry points ----------------

    async def run(self, lines: Iterable[str], source: str = "<script>") -> bool:
        """Execute `lines` to completion. Returns True on success."""
        if not self._claim():
            return False
        return await self._execute(lines, source)

    async def run_file(self, path: str | Path) -> bool:
        """Read a script file and run it; reports a missing file as an error."""
        if not self._claim():
            return False
        return await self._execute_file(path)

    def start(self, script: Iterable[str] | str | Path) -> Optional[asyncio.Task]:
        """
        Schedule a run on the current event loop and return its task.

        A str/Path argument is treated as a file path. Returns None (and
        reports a warning) when a script is already running or scheduled.
        The run is claimed here, before the task is created.
        """
        loop = asyncio.get_running_loop()
        if not self._claim():
            return None

        if isinstance(script, (str, Path)):
            coro = self._execute_file(script)
        else:
            coro = self._execute(list(script), "<script>")
        task = loop.create_task(coro)
        self._task = task
        task.add_done_callback(self._release_task)
        return task

    def cancel(self) -> bool:
        """
        Cancel the run scheduled by `start()`, if any.

        Runs awaited directly through `run()`/`run_file()` belong to the
        caller's own task and are left alone. Returns True if a cancel was requested.
        """
        if self._task is None or self._task.done():
            return False
        self._task.cancel()
        return True

    # ---------------- Run bookkeeping ----------------

    def _claim(self) -> bool:
        if self.is_running:
            self._sink("Another script is currently executing", Severity.WARNING)
            return False
        self._state = ScriptState.RUNNING
        return True

    def _release(self) -> None:
        self._state = ScriptState.IDLE
        if self._task is not None and self._task is asyncio.current_task():
            self._task = None

    def _release_task(self, task: asyncio.Task) -> None:
        # A task cancelled before its first step never reaches _execute's finally.
        if self._task is task:
            self._task = None
            self._state = ScriptState.IDLE

    async def _execute(self, lines: Iterable[str], source: str) -> bool:
        try:
            await self._run_lines(lines)
        except asyncio.CancelledError:
            self._sink(f"Script execution cancelled: {source}", Severity.WARNING)
            raise
        except Exception as exc:
            logger.debug("Error executing script %s", source, exc_info=True)
            self._sink(f"Error executing script: {exc}", Severity.ERROR)
            return False
        finally:
            self._release()

        self._sink(f"Script execution completed: {source}", Severity.SUCCESS)
        return True

    async def _execute_file(self, path: str | Path) -> bool:
        script_path = Path(path)
        if not script_path.is_file():
            self._release()
            self._sink(f"Script file not found: {path}", Severity.ERROR)
            return False

        try:
            lines = script_path.read_text(encoding="utf-8").splitlines()
        except (OSError, UnicodeDecodeError) as exc:
            self._release()
            logger.debug("Error reading script %s", path, exc_info=True)
            self._sink(f"Error executing script: {exc}", Severity.ERROR)
            return False
        return await self._execute(lines, str(path))

    # ---------------- Line processing ----------------

    async def _run_lines(self, lines: Iterable[str]) -> None:
        for line in lines:
            stripped = line.strip()
            if not stripped or stripped.startswith(COMMENT_PREFIX):
                continue

            if stripped.startswith(PAUSE_PREFIX):
                await self._pause(stripped)
                continue

            self._sink(f"> {line}", Severity.INFORMATION)
            self._execute_line(line)
            await asyncio.sleep(self.line_delay)

    async def _pause(self, line: str) -> None:
        try:
            seconds = parse_pause(line)
        except ValueError as exc:
            logger.debug("Bad pause directive %r: %s", line, exc)
            self._sink(
                f"Error parsing pause time: {exc}. Using default {self.default_pause:g} second delay.",
                Severity.WARNING,
            )
            seconds = self.default_pause
        else:
            self._sink(f"Pausing for {seconds:g} seconds...", Severity.INFORMATION)
        await asyncio.sleep(seconds)
