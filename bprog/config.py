from __future__ import annotations
import logging
import os

# Defaults
_DEFAULT_MAX_DEPTH = 100
_DEFAULT_LOG_LEVEL = 'WARNING'
_DEFAULT_REPL_HOST = '127.0.0.1'
_DEFAULT_REPL_PORT = 8765


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def get_max_depth() -> int:
    """Maximum number of nested evaluations before a line is abandoned."""
    # never below 1: the top-level call itself counts
    return max(1, int_from_env('BPROG_MAX_DEPTH', _DEFAULT_MAX_DEPTH))


def get_log_level() -> int:
    name = os.environ.get('BPROG_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def get_repl_address() -> tuple[str, int]:
    host = os.environ.get('BPROG_REPL_HOST') or _DEFAULT_REPL_HOST
    return host, int_from_env('BPROG_REPL_PORT', _DEFAULT_REPL_PORT)
