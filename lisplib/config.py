from __future__ import annotations
import logging
import os
import sys

_DEFAULT_LOG_LEVEL = "WARNING"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def flag_from_env(var: str, default: bool) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{var} must be one of {sorted(_TRUE_VALUES | _FALSE_VALUES)}, got {raw!r}")


def get_log_level() -> int:
    raw = os.environ.get("LISPLIB_LOG_LEVEL", _DEFAULT_LOG_LEVEL).strip()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    if not isinstance(level, int):
        raise ValueError(f"LISPLIB_LOG_LEVEL: unknown level {raw!r}")
    return level


def color_enabled() -> bool:
    # default: colour only when stdout is a terminal
    return flag_from_env("LISPLIB_COLOR", sys.stdout.isatty())
