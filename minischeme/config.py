from __future__ import annotations
import os
from typing import Optional


_LOG_LEVEL_VAR = 'MINISCHEME_LOG_LEVEL'
_LOG_FILE_VAR = 'MINISCHEME_LOG_FILE'
_RECURSION_LIMIT_VAR = 'MINISCHEME_RECURSION_LIMIT'

# Defaults
_DEFAULT_LOG_LEVEL = 'WARNING'


def str_from_env(var: str, default: Optional[str] = None) -> Optional[str]:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def get_log_level() -> str:
    return str_from_env(_LOG_LEVEL_VAR, _DEFAULT_LOG_LEVEL).upper()


def get_log_file() -> Optional[str]:
    return str_from_env(_LOG_FILE_VAR)


def get_recursion_limit() -> Optional[int]:
    raw = str_from_env(_RECURSION_LIMIT_VAR)
    if raw is None:
        return None
    try:
        limit = int(raw)
    except ValueError:
        raise ValueError(f"{_RECURSION_LIMIT_VAR} must be an integer, got {raw!r}")
    if limit <= 0:
        raise ValueError(f"{_RECURSION_LIMIT_VAR} must be positive, got {limit}")
    return limit
