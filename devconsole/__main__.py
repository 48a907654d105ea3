#!/usr/bin/env python3
# devconsole/__main__.py
from __future__ import annotations

import asyncio
import sys

from devconsole.boot import boot_sequence
from devconsole.interface import make_cli, repl


def main() -> int:
    state = boot_sequence()
    console, config = state.console, state.config

    if config.show_banner:
        console.display_info()

    cli = make_cli(console, config.prompt, enable_completion=config.enable_completion)
    try:
        asyncio.run(repl(console, cli))
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 0
    return 0


if __name__ == "__main__":
    sys.exit(main())
