#!/usr/bin/env python3
# devconsole/commands/command_types.py
from __future__ import annotations

"""
Command data structures and protocols.

This module defines:
- Severity: output levels understood by every host sink.
- CommandHandler: the callable protocol for any command implementation.
- OutputSink: the callable protocol the host supplies to receive messages.
- CommandDefinition: a registered (name, flag) variant with its handler.
- FlagArgument / ParsedCommand: the structured result of parsing one line.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple, Protocol, Sequence


class Severity(str, Enum):
    """Message levels a host renders differently (colour, icon, ...)."""

    NORMAL = "normal"
    ERROR = "error"
    SUCCESS = "success"
    WARNING = "warning"
    INFORMATION = "information"


class CommandHandler(Protocol):
    """Protocol for any command function."""

    def __call__(self, args: Sequence[str]) -> None:  # pragma: no cover - signature only
        ...


class OutputSink(Protocol):
    """Protocol for the host output channel."""

    def __call__(self, message: str, severity: Severity = Severity.NORMAL) -> None:  # pragma: no cover - signature only
        ...


@dataclass(frozen=True, slots=True)
class CommandDefinition:
    """
    A registered command variant.

    Important fields:
        name: Lowercase command name typed by the user.
        description: Short, user-facing description (shown by help).
        flag: Literal flag token ("-c", "-h", ...); "" is the unflagged variant.
        handler: Function receiving the routed argument values.

    Identity inside a registry is the (name, flag) pair.
    """

    name: str
    description: str
    flag: str
    handler: CommandHandler = field(repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Command name must be a non-empty string.")

    @property
    def key(self) -> tuple[str, str]:
        return self.name, self.flag

    def invoke(self, args: Sequence[str]) -> None:
        """Execute the underlying handler with the routed arguments."""
        self.handler(list(args))


class FlagArgument(NamedTuple):
    """An argument value and the 1-based flag position it belongs to (0 = unflagged)."""

    position: int
    value: str

    def encode(self) -> str:
        return f"{self.position} {self.value}" if self.position > 0 else self.value


@dataclass(slots=True)
class ParsedCommand:
    """
    Transient result of parsing one input line.

    Attributes:
        name: Lowercased command name (first token).
        flags: 1-based flag position -> literal flag token, in input order.
        arguments: Every non-flag token tagged with its flag position.
    """
    name: str
    flags: dict[int, str] = field(default_factory=dict)
    arguments: list[FlagArgument] = field(default_factory=list)

    @property
    def first_flag(self) -> str | None:
        """The flag used for registry matching; later flags only route arguments."""
        return next(iter(self.flags.values()), None)

    @property
    def encoded_arguments(self) -> list[str]:
        """Arguments in the compact "<position> <value>" display form."""
        return [argument.encode() for argument in self.arguments]
