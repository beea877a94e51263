"""
Runtime type tags for candidate values.

Patterns test Python values against a small set of kinds: numeric,
textual, boolean, callable, list and map. These helpers define what each
kind means for Python objects and how "own" members of a map are looked
up.
"""

from collections.abc import Mapping
from numbers import Real
from typing import Any


def is_numeric(value: Any) -> bool:
    """Real numbers, excluding bools."""
    return isinstance(value, Real) and not isinstance(value, bool)


def is_textual(value: Any) -> bool:
    return isinstance(value, str)


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_callable(value: Any) -> bool:
    return callable(value)


def is_list(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_map(value: Any) -> bool:
    """Mappings, plus non-callable objects carrying an instance ``__dict__``.

    Lists, scalars, strings and None never qualify.
    """
    if isinstance(value, Mapping):
        return True
    if value is None or is_list(value) or callable(value):
        return False
    return isinstance(getattr(value, "__dict__", None), dict)


def has_own_member(value: Any, name: str) -> bool:
    """Check ``name`` against the value's own members only.

    Mappings are checked by key. Objects are checked against their
    instance ``__dict__``, so class attributes and inherited members
    never count.
    """
    if isinstance(value, Mapping):
        return name in value
    own = getattr(value, "__dict__", None)
    return isinstance(own, dict) and name in own


def read_member(value: Any, name: str) -> Any:
    """Read an own member previously confirmed by has_own_member()."""
    if isinstance(value, Mapping):
        return value[name]
    return vars(value)[name]


def value_kind(value: Any) -> str | None:
    """Literal kind of a value: 'numeric', 'textual', 'boolean' or None."""
    if is_boolean(value):
        return "boolean"
    if is_numeric(value):
        return "numeric"
    if is_textual(value):
        return "textual"
    return None


def strict_equals(literal: Any, value: Any) -> bool:
    """Literal equality without cross-kind coercion.

    ``True == 1`` holds in Python but a boolean literal must never match
    a number (and vice versa), so both sides must share a literal kind.
    """
    kind = value_kind(literal)
    return kind is not None and kind == value_kind(value) and literal == value
