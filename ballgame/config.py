from __future__ import annotations
import logging
import os


_TRUTHY = {"1", "true", "yes", "on"}

# Defaults
DEFAULT_PROMPT = ":) "
DEFAULT_QUIT_COMMAND = "quit"
DEFAULT_REPL_HOST = "127.0.0.1"
DEFAULT_REPL_PORT = 8765


def flag_from_env(var: str, default: bool = False) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


def get_prompt() -> str:
    return os.environ.get("BALLGAME_PROMPT", DEFAULT_PROMPT)


def get_quit_command() -> str:
    return os.environ.get("BALLGAME_QUIT", DEFAULT_QUIT_COMMAND)


def strict_brackets_enabled() -> bool:
    return flag_from_env("BALLGAME_STRICT_BRACKETS")


def get_repl_address() -> tuple[str, int]:
    host = os.environ.get("BALLGAME_REPL_HOST", DEFAULT_REPL_HOST)
    port = os.environ.get("BALLGAME_REPL_PORT", "")
    return host, int(port) if port.strip() else DEFAULT_REPL_PORT


def get_log_level(override: str | None = None) -> int:
    """
    Determine the log level from an explicit name or the LOGLEVEL environment
    variable. Defaults to WARNING if neither names a known level.
    """
    name = (override or os.getenv("LOGLEVEL", "")).upper()
    if name:
        level = getattr(logging, name, None)
        if isinstance(level, int):
            return level
    return logging.WARNING
