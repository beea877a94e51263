"""Runtime configuration for MissMatch.

Configuration comes from environment variables:

- ``MISSMATCH_CACHE``: compile each pattern once and reuse it (default on).
- ``MISSMATCH_FORMAT``: default format for match_serialized(), ``json``
  or ``toon`` (default ``json``).
- ``MISSMATCH_DEBUG``: emit DEBUG-level log records (default off).

Each setting is read on its own by the code path that needs it, so a bad
``MISSMATCH_FORMAT`` only affects serialized matching.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from missmatch.constants import (
    DEFAULT_FORMAT,
    ENV_CACHE,
    ENV_DEBUG,
    ENV_FORMAT,
    SUPPORTED_FORMATS,
)
from missmatch.types.errors import ConfigurationError, ErrorContext
from missmatch.utils.logger import env_flag


def _flag(name: str, default: bool) -> bool:
    value = env_flag(name, default)
    if value is None:
        raise ConfigurationError(
            f"{name}={os.environ.get(name)!r} is not a boolean flag",
            context=ErrorContext(operation="load_config", component="config"),
        )
    return value


def cache_enabled() -> bool:
    """Whether compiled patterns are cached (``MISSMATCH_CACHE``).

    Raises:
        ConfigurationError: If the variable is not a boolean flag.
    """
    return _flag(ENV_CACHE, default=True)


def default_format() -> str:
    """Format used by match_serialized() when none is given (``MISSMATCH_FORMAT``).

    Raises:
        ConfigurationError: If the variable names an unsupported format.
    """
    fmt = os.environ.get(ENV_FORMAT, "").strip().lower() or DEFAULT_FORMAT
    if fmt not in SUPPORTED_FORMATS:
        raise ConfigurationError(
            f"{ENV_FORMAT}={fmt!r} is not one of {', '.join(SUPPORTED_FORMATS)}",
            context=ErrorContext(operation="load_config", component="config"),
        )
    return fmt


@dataclass(frozen=True)
class MissMatchConfig:
    """Resolved configuration values."""

    cache_enabled: bool = True
    default_format: str = DEFAULT_FORMAT
    debug: bool = False

    @classmethod
    def from_env(cls) -> MissMatchConfig:
        """Build a configuration from the process environment.

        Raises:
            ConfigurationError: If a variable holds an unrecognized value.
        """
        return cls(
            cache_enabled=cache_enabled(),
            default_format=default_format(),
            debug=_flag(ENV_DEBUG, default=False),
        )


def get_config() -> MissMatchConfig:
    """Read configuration from the environment.

    Not cached: tests and long-running hosts can change the environment
    between calls.
    """
    return MissMatchConfig.from_env()
