import logging

from devconsole.commands import CommandDefinition, Severity
from devconsole.interface import DispatchStatus
from devconsole.interface.parser import parse_line


def test_unflagged_command_gets_all_arguments(dispatcher, recorder) -> None:
    dispatcher.registry.register(CommandDefinition("echo", "", "", recorder))

    status = dispatcher.execute(parse_line('echo "hello world" foo'))

    assert status is DispatchStatus.OK
    assert recorder.calls == [["hello world", "foo"]]


def test_multi_flag_line_invokes_handler_once_per_flag(dispatcher, recorder) -> None:
    dispatcher.registry.register(CommandDefinition("set", "", "-x", recorder))

    status = dispatcher.execute(parse_line("set -x 1 -y 2 3"))

    assert status is DispatchStatus.OK
    assert recorder.calls == [["1"], ["2", "3"]]


def test_flag_without_arguments_gets_empty_list(dispatcher, recorder) -> None:
    dispatcher.registry.register(CommandDefinition("echo", "", "-h", recorder))

    dispatcher.execute(parse_line("echo -h"))

    assert recorder.calls == [[]]


def test_unknown_command_reports_error(dispatcher, sink, recorder) -> None:
    dispatcher.registry.register(CommandDefinition("help", "", "", recorder))

    status = dispatcher.execute(parse_line("hlep"))

    assert status is DispatchStatus.NOT_FOUND
    assert recorder.calls == []
    [(message, severity)] = sink.messages
    assert severity is Severity.ERROR
    assert "Command 'hlep' not found." in message
    assert "Did you mean: help?" in message


def test_unsupported_flag_reports_warning(dispatcher, sink, recorder) -> None:
    dispatcher.registry.register(CommandDefinition("echo", "", "", recorder))

    status = dispatcher.execute(parse_line("echo -z hi"))

    assert status is DispatchStatus.FLAG_NOT_SUPPORTED
    assert recorder.calls == []
    assert sink.messages == [
        ("Command 'echo' does not support the provided flag.", Severity.WARNING)]


def test_handler_failure_is_absorbed(dispatcher, sink, recorder) -> None:
    def boom(args):
        raise RuntimeError("kaput")

    dispatcher.registry.register(CommandDefinition("boom", "", "", boom))
    dispatcher.registry.register(CommandDefinition("ok", "", "", recorder))

    assert dispatcher.execute(parse_line("boom")) is DispatchStatus.HANDLER_FAILED
    assert dispatcher.execute(parse_line("ok now")) is DispatchStatus.OK

    assert recorder.calls == [["now"]]
    errors = sink.texts(Severity.ERROR)
    assert len(errors) == 1
    assert "boom" in errors[0] and "kaput" in errors[0]


def test_second_registration_handler_is_invoked(dispatcher, recorder) -> None:
    first = []
    dispatcher.registry.register(CommandDefinition("ping", "", "", first.append))
    dispatcher.registry.register(CommandDefinition("ping", "", "", recorder))

    dispatcher.execute(parse_line("ping a"))

    assert first == []
    assert recorder.calls == [["a"]]


def test_handler_failure_reaches_user_once(dispatcher, sink, caplog, monkeypatch) -> None:
    def boom(args):
        raise RuntimeError("kaput")

    monkeypatch.setattr(logging.getLogger("devconsole"), "propagate", True)
    dispatcher.registry.register(CommandDefinition("boom", "", "", boom))

    with caplog.at_level(logging.DEBUG, logger="devconsole"):
        dispatcher.execute(parse_line("boom"))

    assert len(sink.texts(Severity.ERROR)) == 1
    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]
    [record] = [r for r in caplog.records if r.name == "devconsole.interface.handler"]
    assert record.levelno == logging.DEBUG
    assert record.exc_info is not None
