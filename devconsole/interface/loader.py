#!/usr/bin/env python3
# devconsole/interface/loader.py
from __future__ import annotations

"""
Dynamic command loader.

Features:
- Imports all modules under a given package (default: 'devconsole.plugins').
- Supports 'entrypoint.py' inside a subpackage.
- Entry modules contribute commands through a `register(console)` function
  and/or COMMAND / COMMANDS holding CommandDefinition objects.
"""

import importlib
import logging
import pkgutil
from pathlib import Path
from types import ModuleType
from typing import TYPE_CHECKING, Iterable

from devconsole.commands import CommandDefinition

if TYPE_CHECKING:
    from devconsole.interface.console import Console

logger = logging.getLogger(__name__)

DEFAULT_COMMANDS_PACKAGE = "devconsole.plugins"


def _register_from_entry_module(console: "Console", module: ModuleType) -> int:
    """Register the commands an entry module exposes; returns how many definitions were added."""
    before = len(console.registry)

    register = getattr(module, "register", None)
    if callable(register):
        register(console)

    if hasattr(module, "COMMAND"):
        obj = getattr(module, "COMMAND")
        if isinstance(obj, CommandDefinition):
            console.register(obj)
    if hasattr(module, "COMMANDS"):
        objs = getattr(module, "COMMANDS")
        if isinstance(objs, Iterable):
            for item in objs:
                if isinstance(item, CommandDefinition):
                    console.register(item)

    return len(console.registry) - before


def load_commands(console: "Console", commands_package: str = DEFAULT_COMMANDS_PACKAGE) -> int:
    """
    Import all modules under the given package and register their commands.

    Supported layouts:
      1) Plain modules: plugins/foo.py  -> import plugins.foo
      2) Packages with an entrypoint: plugins/bar/entrypoint.py
         -> import plugins.bar.entrypoint

    Returns the number of modules imported.
    """

    package = importlib.import_module(commands_package)
    package_paths = [str(p) for p in getattr(package, "__path__", [])]

    if not package_paths:
        raise RuntimeError(
            f"'{commands_package}' must be a package (folder) with modules."
        )

    loaded_count = 0

    for base_path in package_paths:
        for modinfo in pkgutil.iter_modules([base_path]):
            module_name = modinfo.name
            if module_name.startswith("_"):
                # Ignore private modules
                continue

            if modinfo.ispkg and (Path(base_path) / module_name / "entrypoint.py").exists():
                qualified = f"{commands_package}.{module_name}.entrypoint"
            else:
                qualified = f"{commands_package}.{module_name}"

            module = importlib.import_module(qualified)
            added = _register_from_entry_module(console, module)
            loaded_count += 1
            logger.debug("Loaded %s (%d definitions)", qualified, added)

    return loaded_count
