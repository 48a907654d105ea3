#!/usr/bin/env python3
# devconsole/interface/cli.py
from __future__ import annotations

"""
Interactive input frontends.

Selection order:
    1) prompt_toolkit (completion menu + Up/Down bound to console history)
    2) readline / pyreadline3 (basic completion)
    3) plain input (last resort)

Every frontend reads lines without blocking the event loop, so a running
script keeps making progress while the prompt waits for input.
"""

import asyncio
import contextlib
from typing import TYPE_CHECKING, Optional

from devconsole.interface.completion import split_current_token

if TYPE_CHECKING:
    from devconsole.interface.console import Console

DEFAULT_PROMPT = "> "


def _first_token_suggestions(console: "Console", text_before_cursor: str) -> tuple[list[str], str]:
    """Suggestions apply to the command name only; arguments are not completed."""
    parts, current_prefix = split_current_token(text_before_cursor.lstrip())
    if len(parts) > 1:
        return [], current_prefix
    return console.suggest(current_prefix), current_prefix


class BaseCLI:
    """
    Plain frontend and base interface for richer ones.

    Subclasses may override:
        - setup()
        - get_line()
        - teardown()

    This base also provides context manager support to guarantee teardown.
    """

    def __init__(self, console: "Console", prompt: str = DEFAULT_PROMPT) -> None:
        self.console = console
        self.prompt = prompt

    def setup(self) -> None:
        ...

    async def get_line(self) -> str:
        return await asyncio.to_thread(input, self.prompt)

    def teardown(self) -> None:
        ...

    # Context manager helpers
    def __enter__(self) -> "BaseCLI":
        self.setup()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.teardown()


# ===== Preferred: prompt_toolkit =====
class PromptToolkitCLI(BaseCLI):
    """Rich line editor with live completion and console-managed history."""

    def __init__(
        self,
        console: "Console",
        prompt: str = DEFAULT_PROMPT,
        *,
        complete_while_typing: bool = True,
    ) -> None:
        super().__init__(console, prompt)
        from prompt_toolkit import PromptSession
        from prompt_toolkit.completion import Completer, Completion
        from prompt_toolkit.key_binding import KeyBindings

        owner = self

        class _Completer(Completer):
            def get_completions(self, document, complete_event):
                words, current_prefix = _first_token_suggestions(
                    owner.console, document.text_before_cursor)
                for word in words:
                    # replace exactly the current token
                    yield Completion(word, start_position=-len(current_prefix))

        # Up/Down walk the console history rather than prompt_toolkit's own.
        kb = KeyBindings()

        @kb.add("up")
        def _(event):
            _set_buffer_text(event.current_buffer, owner.console.previous_command())

        @kb.add("down")
        def _(event):
            _set_buffer_text(event.current_buffer, owner.console.next_command())

        self._session = PromptSession()
        self._completer = _Completer()
        self._key_bindings = kb
        self._complete_while_typing = complete_while_typing
        self._stack = contextlib.ExitStack()

    def setup(self) -> None:
        from prompt_toolkit.patch_stdout import patch_stdout

        # Sink/log output printed while the prompt is active lands above it.
        self._stack.enter_context(patch_stdout(raw=True))

    async def get_line(self) -> str:
        return await self._session.prompt_async(
            self.prompt,
            completer=self._completer,
            complete_while_typing=self._complete_while_typing,
            key_bindings=self._key_bindings,
        )

    def teardown(self) -> None:
        self._stack.close()


def _set_buffer_text(buffer, text: str) -> None:
    buffer.text = text
    buffer.cursor_position = len(text)


# ===== Fallback: readline / pyreadline3 =====
class ReadlineCLI(BaseCLI):
    """Fallback editor with basic command-name completion."""

    def __init__(self, console: "Console", prompt: str = DEFAULT_PROMPT) -> None:
        super().__init__(console, prompt)
        import readline  # type: ignore[attr-defined]

        self.readline = readline

    def setup(self) -> None:
        try:
            self.readline.set_completer_delims(" \t\n")  # type: ignore
        except Exception:
            pass

        def _complete(text_fragment: str, state_index: int) -> Optional[str]:
            # Build the entire line buffer and return the Nth suggestion
            buffer_text = self.readline.get_line_buffer()  # type: ignore
            candidates, _ = _first_token_suggestions(self.console, buffer_text)
            matches = [
                word for word in candidates if word.lower().startswith(text_fragment.lower())]
            return matches[state_index] if state_index < len(matches) else None

        self.readline.set_completer(_complete)  # type: ignore
        try:
            self.readline.parse_and_bind("tab: complete")  # type: ignore
        except Exception:
            pass

    def teardown(self) -> None:
        self.readline.set_completer(None)  # type: ignore


def make_cli(
    console: "Console",
    prompt: str = DEFAULT_PROMPT,
    *,
    enable_completion: bool = True,
) -> BaseCLI:
    """
    Factory to select the best available CLI frontend at runtime.
    """
    # Try prompt_toolkit first
    try:
        import prompt_toolkit  # noqa: F401
        return PromptToolkitCLI(console, prompt, complete_while_typing=enable_completion)
    except Exception:
        # Try readline/pyreadline3
        try:
            import readline  # noqa: F401
            return ReadlineCLI(console, prompt)
        except Exception:
            # Last resort: plain input with no completion
            return BaseCLI(console, prompt)


async def repl(console: "Console", cli: Optional[BaseCLI] = None) -> None:
    """
    Read-eval loop: each submitted line goes through `console.execute_line`.

    Ends on EOF (Ctrl-D) or Ctrl-C; `exit` ends it by raising SystemExit.
    """
    cli = cli or make_cli(console)
    with cli:
        try:
            while True:
                try:
                    line = await cli.get_line()
                except (EOFError, KeyboardInterrupt):
                    break
                if not line or not line.strip():
                    continue
                console.execute_line(line)
        finally:
            console.scripts.cancel()
