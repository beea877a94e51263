"""Serialization of match data for display and logging.

Bindings can capture anything a candidate contains: tuples, objects,
functions, enums. serialize_to_primitives() flattens such values into
JSON-compatible primitives so MatchResult.to_dict() and
PatternAST.to_dict() output can be dumped directly.
"""

import math
from collections.abc import Mapping
from dataclasses import asdict, is_dataclass
from enum import Enum
from typing import Any


def serialize_to_primitives(data: Any) -> Any:
    """Convert captured Python values to JSON-serializable primitives.

    Handles:
    - Primitives (str, int, float, bool, None): returned as-is
    - Special floats (inf, nan): converted to None
    - Enum: converted to value
    - dataclass: converted to dict via asdict()
    - Mapping: recursively serialize keys and values
    - list/tuple: recursively serialize items
    - Callables: their qualified name
    - Objects with to_dict(): use that method
    - Objects with __dict__: serialize that

    Examples:
        >>> serialize_to_primitives({"rest": (2, 3)})
        {'rest': [2, 3]}
        >>> serialize_to_primitives(len)
        'len'
    """
    if data is None:
        return None

    if isinstance(data, (str, int, bool)):
        return data

    if isinstance(data, float):
        if math.isnan(data) or math.isinf(data):
            return None
        return data

    if isinstance(data, Enum):
        return data.value

    if is_dataclass(data) and not isinstance(data, type):
        return serialize_to_primitives(asdict(data))

    if isinstance(data, Mapping):
        return {
            serialize_to_primitives(k): serialize_to_primitives(v)
            for k, v in data.items()
        }

    if isinstance(data, (list, tuple)):
        return [serialize_to_primitives(item) for item in data]

    if callable(data):
        return getattr(data, "__qualname__", None) or repr(data)

    if hasattr(data, "to_dict"):
        return serialize_to_primitives(data.to_dict())

    if hasattr(data, "__dict__"):
        return serialize_to_primitives(vars(data))

    return str(data)
