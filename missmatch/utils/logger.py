"""
Logging for MissMatch.

The library logs through loguru. DEBUG records for compilation, cache
misses, decoding and dispatch decisions are only emitted while
``MISSMATCH_DEBUG`` is on. A WARNING is always emitted right before a
non-exhaustive match is raised. Nothing is logged per element while a
predicate runs.

Applications that embed the library and do not want its records can call
``logger.disable("missmatch")``.
"""

import os

from loguru import logger as loguru_logger

from missmatch.constants import ENV_DEBUG


def env_flag(name: str, default: bool = False) -> bool | None:
    """Read a boolean flag from the environment.

    Accepts true/false, 1/0, yes/no and on/off (case-insensitive). Unset
    or empty variables yield ``default``. Anything else yields None so
    callers can report it.
    """
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    if raw in ("1", "true", "yes", "on"):
        return True
    if raw in ("0", "false", "no", "off"):
        return False
    return None


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled."""
    return env_flag(ENV_DEBUG) is True


def summarize(value: object, limit: int = 80) -> str:
    """Short repr of a value for log lines."""
    text = repr(value)
    if len(text) <= limit:
        return text
    return text[: limit - 3] + "..."


# Export loguru logger for direct use
logger = loguru_logger
