#!/usr/bin/env python3
# devconsole/interface/parser.py
from __future__ import annotations

"""
Command line parsing.

Responsibilities:
- Tokenize a raw line, keeping double-quoted spans together.
- Separate flags from arguments, tagging each argument with the position of
  the flag it follows.
- Extract the arguments routed to a given flag position.
"""

import logging
import re
from typing import Iterable, Optional, Sequence

from devconsole.commands import FlagArgument, ParsedCommand

logger = logging.getLogger(__name__)

# A bare word, or a "quoted span" (group 1 holds the inner text).
# Unmatched quote characters fall through both branches and are dropped.
_TOKEN_RE = re.compile(r'[^\s"]+|"([^"]*)"')

FLAG_PREFIX = "-"


def tokenize(command_line: str) -> list[str]:
    """Split a raw command line into tokens; quotes group words, never raise."""
    tokens: list[str] = []
    for match in _TOKEN_RE.finditer(command_line):
        quoted = match.group(1)
        tokens.append(quoted if quoted is not None else match.group(0))
    return tokens


def split_flags(tokens: Iterable[str]) -> tuple[dict[int, str], list[FlagArgument]]:
    """
    Walk post-command tokens and classify them as flags or arguments.

    Flags get positions 1, 2, 3, ... in the order they appear. Each argument
    belongs to the most recent flag, or to position 0 when no flag has been
    seen yet.

    Example:
        ['-x', '1', '-y', '2'] -> ({1: '-x', 2: '-y'},
                                    [FlagArgument(1, '1'), FlagArgument(2, '2')])
    """
    flags: dict[int, str] = {}
    arguments: list[FlagArgument] = []
    flag_index = 0
    using_flags = False

    for token in tokens:
        if token.startswith(FLAG_PREFIX):
            flag_index += 1
            using_flags = True
            flags[flag_index] = token
        elif using_flags:
            arguments.append(FlagArgument(flag_index, token))
        else:
            arguments.append(FlagArgument(0, token))

    return flags, arguments


def parse_line(command_line: str | None) -> Optional[ParsedCommand]:
    """
    Parse one raw line into a ParsedCommand.

    Returns None for empty/whitespace input or if parsing fails; the failure
    is logged rather than raised.
    """
    try:
        if command_line is None or not command_line.strip():
            logger.debug("Empty command input")
            return None

        tokens = tokenize(command_line)
        if not tokens:
            return None

        command_name, *rest = tokens
        flags, arguments = split_flags(rest)
        return ParsedCommand(name=command_name.lower(), flags=flags, arguments=arguments)
    except Exception:
        logger.debug("Error parsing command %r", command_line, exc_info=True)
        return None


def args_for_position(position: int, arguments: Sequence[FlagArgument] | None) -> list[str]:
    """
    Return the argument values routed to a flag position.

    A position <= 0 means "everything": all values are returned unchanged
    and in order.
    """
    if not arguments:
        return []
    if position <= 0:
        return [argument.value for argument in arguments]
    return [argument.value for argument in arguments if argument.position == position]
