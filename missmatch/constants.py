"""Shared constants and helpers for MissMatch.

Centralizes the pattern grammar's symbol table, the environment variable
names read by the configuration layer, and timezone-aware datetime helpers.
"""

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Return the current UTC time as a timezone-aware datetime.

    Usable directly as a ``default_factory`` in dataclass fields.
    """
    return datetime.now(timezone.utc)

# Leading characters of each pattern expression
LIST_TAG = "a"
MAP_TAG = "o"
NUMERIC_TAG = "n"
TEXTUAL_TAG = "s"
BOOLEAN_TAG = "b"
CALLABLE_TAG = "f"
ANY_TAG = "_"
QUOTES: frozenset[str] = frozenset({"'", '"'})

# Structural punctuation
BINDING_SIGIL = "@"
GROUP_OPEN = "("
GROUP_CLOSE = ")"
SEPARATOR = ","
REST_MARKER = "|"
MEMBER_PREFIX = "."
MEMBER_TYPE_SEPARATOR = ":"

# Only plain spaces count as whitespace inside a pattern.
WHITESPACE = " "

BOOLEAN_LITERALS: dict[str, bool] = {"true": True, "false": False}

# Environment variables read by MissMatchConfig.from_env()
ENV_DEBUG = "MISSMATCH_DEBUG"
ENV_CACHE = "MISSMATCH_CACHE"
ENV_FORMAT = "MISSMATCH_FORMAT"

SUPPORTED_FORMATS: tuple[str, ...] = ("json", "toon")
DEFAULT_FORMAT = "json"
