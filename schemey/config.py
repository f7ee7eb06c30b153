from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List

DEFAULT_RECURSION_LIMIT = 10000
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_REPL_HOST = "127.0.0.1"
DEFAULT_REPL_PORT = 8765


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}")


def get_load_roots() -> List[Path]:
    """Directories searched, in order, for relative `load` paths."""
    return paths_from_env('SCHEMEY_LOAD_PATH', [Path.cwd()])


def get_recursion_limit() -> int:
    return int_from_env('SCHEMEY_RECURSION_LIMIT', DEFAULT_RECURSION_LIMIT)


def get_log_level() -> str:
    return os.environ.get('SCHEMEY_LOG_LEVEL', DEFAULT_LOG_LEVEL).upper()


def get_repl_address() -> tuple[str, int]:
    host = os.environ.get('SCHEMEY_REPL_HOST') or DEFAULT_REPL_HOST
    return host, int_from_env('SCHEMEY_REPL_PORT', DEFAULT_REPL_PORT)
