#!/usr/bin/env python3
# devconsole/boot/boot.py
from __future__ import annotations
"""
Boot sequence for the developer console.

Goals:
- Bring up config, logging, the Console and its commands in a fixed order.
- Maintain clear status output for each boot step.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional
import logging
import platform

from devconsole.commands import OutputSink
from devconsole.config import AppConfig, load_config
from devconsole.interface import Console, load_commands
from devconsole.ui import (
    clear_screen,
    colorize,
    enable_windows_vt,
    init_logger,
    print_line,
    set_terminal_title,
)


@dataclass(slots=True)
class BootState:
    console: Console
    logger: logging.Logger
    config: AppConfig
    loaded_count: int


def _step(label: str, fn: Callable[[], Any], *, verbose: bool = True) -> Any:
    """Run a boot step with status output."""
    try:
        out = fn()
    except Exception as exc:
        print_line(
            colorize(f"[FAILED] {label} ({type(exc).__name__}: {exc})", "red")
        )
        raise
    if verbose:
        print_line(colorize(f"[  OK  ] {label}", "green"))
    return out


def boot_sequence(
    config: Optional[AppConfig] = None,
    *,
    sink: Optional[OutputSink] = None,
    verbose: bool = True,
) -> BootState:
    # ---------- console + env ----------
    _step("Enable ANSI sequences", enable_windows_vt, verbose=verbose)
    _step(
        f"Detect environment: {platform.system()} {platform.release()} / Python {platform.python_version()}",
        lambda: None,
        verbose=verbose,
    )

    # ---------- config ----------
    if config is None:
        config = _step("Load configuration", load_config, verbose=verbose)

    # ---------- logging ----------
    logger = _step(
        "Initialize logger",
        lambda: init_logger(
            "devconsole",
            level=config.log_level or logging.INFO,
            logfile=str(config.log_file_path) if config.log_file_path else None,
        ),
        verbose=verbose,
    )

    # ---------- console ----------
    console = _step(
        "Create console",
        lambda: Console(
            sink,
            history_size=config.history_size,
            line_delay=config.script_line_delay,
            default_pause=config.pause_default,
            on_clear=clear_screen,
        ),
        verbose=verbose,
    )

    # ---------- commands ----------
    _step(f"Locate commands package '{config.commands_package}'",
          lambda: __import__(config.commands_package), verbose=verbose)
    _step("Load command modules",
          lambda: load_commands(console, config.commands_package), verbose=verbose)
    loaded_count = _step("Count command definitions",
                         lambda: len(console.registry), verbose=verbose)
    _step("Warm command names for completion",
          lambda: console.completer.update_names(console.command_names()), verbose=verbose)

    _step(
        "Finalize terminal title",
        lambda: set_terminal_title(f"Dev Console • {loaded_count} cmds"),
        verbose=verbose,
    )
    _step("Boot complete", lambda: None, verbose=verbose)

    return BootState(
        console=console,
        logger=logger,
        config=config,
        loaded_count=loaded_count,
    )
