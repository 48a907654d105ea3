# devconsole/plugins/builtin/entrypoint.py
from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from devconsole.commands import Severity

if TYPE_CHECKING:
    from devconsole.interface.console import Console

HELP_FLAG = "-h"


def _describe(console: "Console", name: str) -> None:
    console.write(f"{name}: {console.describe(name)}", Severity.INFORMATION)


def _add_help_variant(console: "Console", name: str) -> None:
    console.register_command(
        name,
        f"Shows help for {name} command",
        HELP_FLAG,
        lambda args: _describe(console, name),
    )


def register(console: "Console") -> None:
    # ---------- help ----------
    @console.command(name="help", description="Displays all available commands\nUsage: help")
    def help_(args: Sequence[str]) -> None:
        console.write("Available commands:", Severity.SUCCESS)
        for name in console.command_names():
            console.write(f"  {name}")
        console.write(
            "Use '[command] -h' for more information on a specific command.", Severity.INFORMATION)

    @console.command(name="help", description="Shows help for a specific command", flag="-c")
    def help_command(args: Sequence[str]) -> None:
        if args:
            _describe(console, args[0])
        else:
            console.write("Usage: help -c [command]", Severity.INFORMATION)

    # ---------- clear ----------
    @console.command(name="clear", description="Clears the console\nUsage: clear")
    def clear(args: Sequence[str]) -> None:
        console.clear()

    # ---------- exit ----------
    @console.command(name="exit", description="Exits the application\nUsage: exit")
    def exit_(args: Sequence[str]) -> None:
        console.write("Exiting application...", Severity.SUCCESS)
        raise SystemExit(0)

    # ---------- echo ----------
    @console.command(name="echo", description="Prints the given text to the console\nUsage: echo <text>")
    def echo(args: Sequence[str]) -> None:
        console.write(" ".join(args))

    # ---------- version ----------
    @console.command(name="version", description="Displays the current version of the application\nUsage: version")
    def version(args: Sequence[str]) -> None:
        console.display_info()

    # ---------- execute_script ----------
    @console.command(name="execute_script", description="Executes a script file\nUsage: execute_script <file_path>")
    def execute_script(args: Sequence[str]) -> None:
        if not args:
            console.write("Usage: execute_script <file_path>")
            return
        console.start_script(args[0])

    # ---------- history ----------
    @console.command(name="history", description="Lists previously submitted commands\nUsage: history [-c]")
    def history(args: Sequence[str]) -> None:
        entries = console.history.entries()
        if not entries:
            console.write("History is empty.", Severity.INFORMATION)
            return
        for index, line in enumerate(entries, start=1):
            console.write(f"{index:>4}  {line}")

    @console.command(name="history", description="Clears the command history", flag="-c")
    def history_clear(args: Sequence[str]) -> None:
        console.history.clear()
        console.write("History cleared.", Severity.SUCCESS)

    for name in ("clear", "exit", "echo", "version", "execute_script"):
        _add_help_variant(console, name)
