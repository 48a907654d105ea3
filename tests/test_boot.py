import logging

import pytest

from devconsole.boot import boot_sequence
from devconsole.commands import Severity
from devconsole.config import load_config
from devconsole.interface import BaseCLI, repl


class ScriptedCLI(BaseCLI):
    """Frontend feeding canned lines, then EOF."""

    def __init__(self, console, lines):
        super().__init__(console)
        self._lines = list(lines)
        self.opened = False
        self.closed = False

    def setup(self):
        self.opened = True

    async def get_line(self):
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)

    def teardown(self):
        self.closed = True


@pytest.fixture
def booted(tmp_path, sink):
    config = load_config(tmp_path, environ={"DEVCONSOLE_SCRIPT_LINE_DELAY": "0"})
    state = boot_sequence(config, sink=sink, verbose=False)
    yield state
    logging.getLogger("devconsole").handlers.clear()


def test_boot_loads_builtins(booted) -> None:
    assert booted.loaded_count == len(booted.console.registry)
    assert "help" in booted.console.command_names()
    assert booted.console.suggest("ec") == ["echo"]
    assert booted.logger.name == "devconsole"
    assert booted.console.scripts.line_delay == 0


@pytest.mark.asyncio
async def test_repl_executes_lines_until_eof(booted, sink) -> None:
    cli = ScriptedCLI(booted.console, ["echo one", "   ", "echo two"])

    await repl(booted.console, cli)

    assert sink.texts(Severity.NORMAL) == ["one", "two"]
    assert booted.console.history.entries() == ("echo one", "echo two")
    assert cli.opened and cli.closed


@pytest.mark.asyncio
async def test_repl_exit_command_raises_system_exit(booted) -> None:
    cli = ScriptedCLI(booted.console, ["exit", "echo unreachable"])

    with pytest.raises(SystemExit):
        await repl(booted.console, cli)
    assert cli.closed
