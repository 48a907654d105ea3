import asyncio

import pytest

from devconsole.commands import CommandDefinition, Severity
from devconsole.interface import DispatchStatus


def test_execute_line_dispatches_and_records_history(console, recorder) -> None:
    console.register_command("echo", "Print text", "", recorder)

    assert console.execute_line('echo "hi there"') is DispatchStatus.OK
    assert recorder.calls == [["hi there"]]
    assert console.history.entries() == ('echo "hi there"',)


def test_blank_line_reports_warning_without_dispatch(console, sink, recorder) -> None:
    console.register_command("echo", "", "", recorder)

    assert console.execute_line("   ") is None
    assert recorder.calls == []
    assert sink.messages == [("Empty command input", Severity.WARNING)]
    assert len(console.history) == 0


def test_unknown_commands_still_enter_history(console) -> None:
    assert console.execute_line("nothing here") is DispatchStatus.NOT_FOUND
    assert console.history.entries() == ("nothing here",)


def test_registration_pushes_names_to_completer(console, recorder) -> None:
    assert console.suggest("he") == []

    console.register_command("help", "", "", recorder)
    console.register_command("hello", "", "", recorder)
    console.register(CommandDefinition("help", "", "-c", recorder))

    assert console.suggest("HE") == ["help", "hello"]
    assert console.command_names() == ["help", "hello"]


def test_command_decorator_uses_docstring(console) -> None:
    seen = []

    @console.command(flag="-v")
    def Greet(args):
        """Say hello."""
        seen.extend(args)

    console.execute_line("greet -v world")

    assert seen == ["world"]
    assert console.registry.get("greet", "-v").description == "Say hello."
    assert console.describe("greet") == "Command not found"


def test_history_recall_through_console(console) -> None:
    console.execute_line("first")
    console.execute_line("second")

    assert console.previous_command() == "second"
    assert console.previous_command() == "first"
    assert console.next_command() == "second"


def test_failing_handler_does_not_block_next_command(console, sink, recorder) -> None:
    def broken(args):
        raise ValueError("nope")

    console.register_command("broken", "", "", broken)
    console.register_command("fine", "", "", recorder)

    assert console.execute_line("broken") is DispatchStatus.HANDLER_FAILED
    assert console.execute_line("fine") is DispatchStatus.OK
    assert recorder.calls == [[]]


def test_clear_calls_host_callback(sink) -> None:
    from devconsole.interface import Console

    cleared = []
    console = Console(sink, on_clear=lambda: cleared.append(True))
    console.clear()

    assert cleared == [True]


@pytest.mark.asyncio
async def test_script_continues_after_handler_failure(console, sink, recorder) -> None:
    def broken(args):
        raise RuntimeError("oops")

    console.register_command("broken", "", "", broken)
    console.register_command("fine", "", "", recorder)

    assert await console.run_script(["broken", "fine 1"]) is True
    assert recorder.calls == [["1"]]
    assert sink.messages[-1] == ("Script execution completed: <script>", Severity.SUCCESS)
    assert console.history.entries() == ("broken", "fine 1")


@pytest.mark.asyncio
async def test_start_script_schedules_task(tmp_path, console, recorder) -> None:
    console.register_command("mark", "", "", recorder)
    script = tmp_path / "s.txt"
    script.write_text("mark a\nmark b\n", encoding="utf-8")

    task = console.start_script(script)
    assert isinstance(task, asyncio.Task)
    assert await task is True
    assert recorder.calls == [["a"], ["b"]]


def test_start_script_without_loop_reports_error(tmp_path, console, sink, recorder) -> None:
    console.register_command("mark", "", "", recorder)
    script = tmp_path / "s.txt"
    script.write_text("mark x\npause(10)\n", encoding="utf-8")

    assert console.start_script(script) is None
    assert recorder.calls == []
    assert sink.messages == [("Scripts require a running event loop", Severity.ERROR)]
    assert not console.scripts.is_running
