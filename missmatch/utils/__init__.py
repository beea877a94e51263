"""
MissMatch utility modules.

Shared helpers used across the package:
- Logging (loguru) and environment flags
- Serialization of captured values to primitives
- Decoding of serialized candidates (JSON, TOON)
"""

# Logger
from .logger import (
    env_flag,
    is_debug_enabled,
    logger,
    summarize,
)

# Serialization
from .serialization import serialize_to_primitives

# Decoding
from .decoding import (
    decode_candidate,
    decode_json,
    decode_toon,
)

__all__ = [
    # Logger
    "env_flag",
    "is_debug_enabled",
    "logger",
    "summarize",
    # Serialization
    "serialize_to_primitives",
    # Decoding
    "decode_candidate",
    "decode_json",
    "decode_toon",
]
