"""Decoding of serialized candidates.

match_serialized() accepts text instead of a Python value and decodes it
first. Two formats are understood:

- ``json``: standard JSON via the ``json`` module.
- ``toon``: Token-Oriented Object Notation via the toon-format library.

Decoding happens before any pattern is tried, so a decode failure is
reported as DecodeError and never as a non-exhaustive match.
"""

import json
from typing import Any

from toon_format import decode as toon_decode

from missmatch.constants import SUPPORTED_FORMATS
from missmatch.types.errors import DecodeError
from missmatch.utils.logger import is_debug_enabled, logger


def decode_json(text: str) -> Any:
    """Decode JSON text into a candidate value."""
    try:
        return json.loads(text)
    except (TypeError, ValueError) as e:
        raise DecodeError(f"Failed to decode JSON: {e}", "json", e) from e


def decode_toon(text: str) -> Any:
    """Decode TOON text into a candidate value."""
    try:
        return toon_decode(text)
    except Exception as e:
        raise DecodeError(f"Failed to decode TOON: {e}", "toon", e) from e


_DECODERS = {
    "json": decode_json,
    "toon": decode_toon,
}


def decode_candidate(text: str, fmt: str) -> Any:
    """Decode ``text`` using the named format.

    Raises:
        DecodeError: If the format is unknown or the text is malformed.
    """
    key = fmt.lower()
    decoder = _DECODERS.get(key)
    if decoder is None:
        raise DecodeError(
            f"Unsupported format {fmt!r}; expected one of {', '.join(SUPPORTED_FORMATS)}",
            fmt,
        )
    if is_debug_enabled():
        logger.debug(f"Decoding {len(text)} chars of {key} input")
    return decoder(text)
