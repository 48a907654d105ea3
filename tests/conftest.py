import pytest

from devconsole.commands import CommandRegistry, Severity
from devconsole.interface import Console, Dispatcher


class RecordingSink:
    """Collects (message, severity) pairs sent to the host output channel."""

    def __init__(self):
        self.messages = []

    def __call__(self, message, severity=Severity.NORMAL):
        self.messages.append((message, severity))

    def texts(self, severity=None):
        return [m for m, s in self.messages if severity is None or s is severity]

    def clear(self):
        self.messages.clear()


class CallRecorder:
    """Handler stub remembering every argument list it was called with."""

    def __init__(self):
        self.calls = []

    def __call__(self, args):
        self.calls.append(list(args))


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def recorder():
    return CallRecorder()


@pytest.fixture
def registry():
    return CommandRegistry()


@pytest.fixture
def dispatcher(sink, registry):
    return Dispatcher(sink, registry)


@pytest.fixture
def console(sink):
    return Console(sink, line_delay=0, default_pause=0)
