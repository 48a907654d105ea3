#!/usr/bin/env python3
# devconsole/config/config.py
from __future__ import annotations

"""
Configuration loader (stdlib-only).

Precedence (low → high):
  1) Built-in defaults
  2) Files in the base directory: .env, config.ini, config.json, config.toml
  3) Environment variables prefixed with DEVCONSOLE_

Validation:
  - COMMANDS_PACKAGE: non-empty dotted module path
  - LOG_FILE_PATH: None or normalized path
  - SHOW_BANNER / ENABLE_COMPLETION: bool
  - PROMPT: str
  - LOG_LEVEL: None or one of {'DEBUG','INFO','WARNING','ERROR','CRITICAL'}
  - HISTORY_SIZE: int >= 1
  - SCRIPT_LINE_DELAY / PAUSE_DEFAULT: float >= 0
"""

from dataclasses import dataclass, field
from typing import Any, Mapping
from pathlib import Path
import configparser
import json
import math
import os
import re
import tomllib  # stdlib in 3.11+

ENV_PREFIX = "DEVCONSOLE_"

# ---------- defaults ----------

DEFAULTS: dict[str, Any] = {
    "COMMANDS_PACKAGE": "devconsole.plugins",
    "LOG_FILE_PATH": None,
    "LOG_LEVEL": None,              # 'DEBUG'/'INFO'/'WARNING'/'ERROR'/'CRITICAL'
    "PROMPT": "> ",
    "SHOW_BANNER": True,
    "ENABLE_COMPLETION": True,
    "HISTORY_SIZE": 100,
    "SCRIPT_LINE_DELAY": 0.05,      # seconds between script lines
    "PAUSE_DEFAULT": 1.0,           # seconds used when pause(...) is malformed
}


# ---------- data model ----------

@dataclass(frozen=True)
class AppConfig:
    commands_package: str
    log_file_path: Path | None
    log_level: str | None

    prompt: str
    show_banner: bool
    enable_completion: bool

    history_size: int
    script_line_delay: float
    pause_default: float

    # Unrecognized keys preserved for debugging/forward-compat
    extra: dict[str, Any] = field(default_factory=dict)


# ---------- file loaders (stdlib) ----------

def _load_env_file(path: Path) -> dict[str, str]:
    """Very small .env parser: KEY=VALUE, supports quotes; ignores comments/blank lines."""
    out: dict[str, str] = {}
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return out

    line_re = re.compile(r"""^\s*([A-Za-z_][A-Za-z0-9_]*)\s*=\s*(.*?)\s*$""")
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        m = line_re.match(line)
        if not m:
            continue
        k, v = m.group(1), m.group(2)
        if (v.startswith("'") and v.endswith("'")) or (v.startswith('"') and v.endswith('"')):
            v = v[1:-1]
        out[k] = v
    return out


def _load_ini_file(path: Path) -> dict[str, str]:
    cfg = configparser.ConfigParser()
    try:
        cfg.read(path, encoding="utf-8")
    except FileNotFoundError:
        return {}
    flat: dict[str, str] = {}
    for sec in cfg.sections():
        for k, v in cfg.items(sec):
            flat[k.upper()] = v
    return flat


def _load_json_file(path: Path) -> dict[str, Any]:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (FileNotFoundError, json.JSONDecodeError):
        return {}


def _load_toml_file(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except (FileNotFoundError, tomllib.TOMLDecodeError):
        return {}


def _flatten_mapping(obj: Any, prefix: str = "") -> dict[str, Any]:
    """
    Flatten nested dicts to UPPER_SNAKE keys.
    Example: {'script': {'line_delay': 0.1}} -> {'SCRIPT_LINE_DELAY': 0.1}
    """
    flat: dict[str, Any] = {}
    if isinstance(obj, Mapping):
        for k, v in obj.items():
            key = f"{prefix}_{k}" if prefix else str(k)
            if isinstance(v, Mapping):
                flat.update(_flatten_mapping(v, key))
            else:
                flat[str(key).upper()] = v
    return flat


def _find_config_files(base_dir: Path) -> list[Path]:
    return [
        base_dir / ".env",
        base_dir / "config.ini",
        base_dir / "config.json",
        base_dir / "config.toml",
    ]


# ---------- normalization & coercion ----------

_BOOL_TRUE = {"1", "true", "yes", "y", "on"}
_BOOL_FALSE = {"0", "false", "no", "n", "off"}


def _as_bool(val: Any) -> bool:
    if isinstance(val, bool):
        return val
    s = str(val).strip().lower()
    if s in _BOOL_TRUE:
        return True
    if s in _BOOL_FALSE:
        return False
    raise ValueError(f"Expected boolean, got: {val!r}")


def _as_int(val: Any) -> int:
    if isinstance(val, int) and not isinstance(val, bool):
        return val
    try:
        return int(str(val).strip())
    except Exception as exc:  # noqa: BLE001
        raise ValueError(f"Expected integer, got: {val!r}") from exc


def _as_float(val: Any) -> float:
    if isinstance(val, (int, float)) and not isinstance(val, bool):
        result = float(val)
    else:
        try:
            result = float(str(val).strip())
        except Exception as exc:  # noqa: BLE001
            raise ValueError(f"Expected number, got: {val!r}") from exc
    if not math.isfinite(result):
        raise ValueError(f"Expected a finite number, got: {val!r}")
    return result


def _as_opt_str(val: Any) -> str | None:
    return None if val is None or str(val).strip().lower() in {"", "none"} else str(val)


def _as_log_level(val: Any) -> str | None:
    lv = _as_opt_str(val)
    if lv is None:
        return None
    up = lv.upper()
    allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
    if up not in allowed:
        raise ValueError(
            f"LOG_LEVEL must be one of {sorted(allowed)}, got {lv!r}")
    return up


def _as_opt_path(val: Any, base_dir: Path) -> Path | None:
    v = _as_opt_str(val)
    if v is None:
        return None
    p = Path(os.path.expandvars(os.path.expanduser(v)))
    return p.resolve() if p.is_absolute() else (base_dir / p).resolve()


# ---------- merge & load ----------

def _normalize_keys(d: Mapping[str, Any]) -> dict[str, Any]:
    return {str(k).upper(): v for k, v in d.items()}


def _merge_sources(base_dir: Path, environ: Mapping[str, str]) -> dict[str, Any]:
    merged: dict[str, Any] = dict(DEFAULTS)

    for file in _find_config_files(base_dir):
        if file.name == ".env":
            merged.update(_normalize_keys(_load_env_file(file)))
        elif file.suffix == ".ini":
            merged.update(_normalize_keys(_load_ini_file(file)))
        elif file.suffix == ".json":
            merged.update(_normalize_keys(
                _flatten_mapping(_load_json_file(file))))
        elif file.suffix == ".toml":
            merged.update(_normalize_keys(
                _flatten_mapping(_load_toml_file(file))))

    # Environment variables override all; only take DEVCONSOLE_* keys
    env_overrides = {k[len(ENV_PREFIX):]: v for k, v in environ.items()
                     if k.startswith(ENV_PREFIX) and re.fullmatch(r"[A-Z0-9_]+", k)}
    merged.update(env_overrides)
    return merged


# ---------- validation ----------

def _validate_and_build(config: dict[str, Any], base_dir: Path) -> AppConfig:
    commands_package = _as_opt_str(config.get("COMMANDS_PACKAGE"))
    if commands_package is None or not re.fullmatch(r"[A-Za-z_][\w]*(\.[A-Za-z_][\w]*)*", commands_package):
        raise ValueError(
            f"COMMANDS_PACKAGE must be a dotted module path, got {config.get('COMMANDS_PACKAGE')!r}")

    log_file_path = _as_opt_path(config.get("LOG_FILE_PATH"), base_dir)
    log_level = _as_log_level(config.get("LOG_LEVEL", DEFAULTS["LOG_LEVEL"]))

    prompt_raw = config.get("PROMPT", DEFAULTS["PROMPT"])
    prompt = DEFAULTS["PROMPT"] if prompt_raw is None else str(prompt_raw)
    show_banner = _as_bool(config.get("SHOW_BANNER", DEFAULTS["SHOW_BANNER"]))
    enable_completion = _as_bool(config.get(
        "ENABLE_COMPLETION", DEFAULTS["ENABLE_COMPLETION"]))

    history_size = _as_int(config.get("HISTORY_SIZE", DEFAULTS["HISTORY_SIZE"]))
    script_line_delay = _as_float(config.get(
        "SCRIPT_LINE_DELAY", DEFAULTS["SCRIPT_LINE_DELAY"]))
    pause_default = _as_float(config.get("PAUSE_DEFAULT", DEFAULTS["PAUSE_DEFAULT"]))

    # --- constraints ---
    if history_size < 1:
        raise ValueError("HISTORY_SIZE must be >= 1")
    if script_line_delay < 0:
        raise ValueError("SCRIPT_LINE_DELAY must be >= 0")
    if pause_default < 0:
        raise ValueError("PAUSE_DEFAULT must be >= 0")

    # Carry through extra keys
    recognized = set(DEFAULTS.keys())
    extra = {k: v for k, v in config.items() if k not in recognized}

    return AppConfig(
        commands_package=commands_package,
        log_file_path=log_file_path,
        log_level=log_level,
        prompt=prompt,
        show_banner=show_banner,
        enable_completion=enable_completion,
        history_size=history_size,
        script_line_delay=script_line_delay,
        pause_default=pause_default,
        extra=extra,
    )


# ---------- public API ----------

def load_config(
    base_dir: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    """
    Load, merge, normalize, and validate configuration.
    No filesystem side-effects. Raises ValueError on invalid values.
    """
    base = Path(base_dir) if base_dir is not None else Path.cwd()
    raw = _merge_sources(base, os.environ if environ is None else environ)
    return _validate_and_build(raw, base)
