#!/usr/bin/env python3
# devconsole/config/__init__.py
from __future__ import annotations

"""
Package for configuration.

Provides:
- Configuration loader with file sources and DEVCONSOLE_* environment overrides.
"""


from .config import AppConfig, DEFAULTS, ENV_PREFIX, load_config

__all__ = [
    "AppConfig",
    "DEFAULTS",
    "ENV_PREFIX",
    "load_config",
]
