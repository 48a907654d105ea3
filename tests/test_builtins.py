import pytest

from devconsole.commands import Severity
from devconsole.interface import Console, load_commands


@pytest.fixture
def loaded(sink):
    console = Console(sink, line_delay=0, default_pause=0)
    load_commands(console)
    sink.clear()
    return console


def test_loader_registers_builtins(loaded) -> None:
    names = set(loaded.command_names())
    assert {"help", "clear", "exit", "echo", "version", "execute_script", "history"} <= names
    assert loaded.registry.get("help", "-c") is not None
    assert loaded.registry.get("echo", "-h") is not None
    assert set(loaded.suggest("ex")) == {"exit", "execute_script"}


def test_loader_rejects_plain_module(sink) -> None:
    with pytest.raises(RuntimeError):
        load_commands(Console(sink), "devconsole.interface.parser")


def test_echo_joins_arguments(loaded, sink) -> None:
    loaded.execute_line('echo hello "big world"')
    assert sink.messages == [("hello big world", Severity.NORMAL)]


def test_help_lists_names(loaded, sink) -> None:
    loaded.execute_line("help")

    assert sink.messages[0] == ("Available commands:", Severity.SUCCESS)
    assert ("  echo", Severity.NORMAL) in sink.messages
    assert sink.messages[-1][1] is Severity.INFORMATION


def test_help_for_specific_command(loaded, sink) -> None:
    loaded.execute_line("help -c echo")
    [(message, severity)] = sink.messages
    assert severity is Severity.INFORMATION
    assert message.startswith("echo: Prints the given text")


def test_help_flag_variant(loaded, sink) -> None:
    loaded.execute_line("version -h")
    assert sink.texts()[0].startswith("version: Displays the current version")


def test_version_displays_info(loaded, sink) -> None:
    loaded.execute_line("version")
    assert sink.messages[0] == (f"Dev Console v{loaded.version}", Severity.SUCCESS)


def test_exit_raises_system_exit(loaded, sink) -> None:
    with pytest.raises(SystemExit):
        loaded.execute_line("exit")
    assert sink.messages == [("Exiting application...", Severity.SUCCESS)]


def test_history_commands(loaded, sink) -> None:
    loaded.execute_line("echo a")
    sink.clear()

    loaded.execute_line("history")
    assert sink.texts() == ["   1  echo a"]

    loaded.execute_line("history -c")
    assert len(loaded.history) == 1
    assert loaded.history.entries() == ("history -c",)


@pytest.mark.asyncio
async def test_execute_script_command_runs_file(tmp_path, loaded, sink) -> None:
    script = tmp_path / "boot.txt"
    script.write_text("// greet\necho from script\npause(0)\n", encoding="utf-8")

    loaded.execute_line(f'execute_script "{script}"')
    task = loaded.scripts.task
    assert task is not None
    await task

    assert ("from script", Severity.NORMAL) in sink.messages
    assert sink.messages[-1] == (f"Script execution completed: {script}", Severity.SUCCESS)


def test_execute_script_without_path_prints_usage(loaded, sink) -> None:
    loaded.execute_line("execute_script")
    assert sink.messages == [("Usage: execute_script <file_path>", Severity.NORMAL)]


def test_execute_script_from_sync_host_does_not_block(tmp_path, loaded, sink) -> None:
    script = tmp_path / "slow.txt"
    script.write_text("pause(30)\necho late\n", encoding="utf-8")

    loaded.execute_line(f'execute_script "{script}"')

    assert sink.messages == [("Scripts require a running event loop", Severity.ERROR)]
    assert loaded.scripts.task is None
