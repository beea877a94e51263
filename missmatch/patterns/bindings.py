"""Binding context handed to case handlers.

A BindingContext is created fresh for every match attempt and threaded
through every predicate call, so no captured value can outlive the
attempt that produced it or leak into another one.
"""

from __future__ import annotations

from typing import Any


class BindingContext(dict):
    """Mapping of binding names to captured values.

    Values can be read by key or by attribute:

        def handler(b):
            return b.x * b["y"]

    Attribute access always resolves bindings first, so a binding named
    ``items`` or ``get`` shadows the dict method of the same name. Use the
    module-level ``dict`` functions (``dict(b)``, ``dict.items(b)``) when a
    handler needs the mapping API regardless of binding names. Library code
    writes through ``b[name] = value`` for the same reason.
    """

    __slots__ = ()

    def __getattribute__(self, name: str) -> Any:
        if not name.startswith("__"):
            try:
                return dict.__getitem__(self, name)
            except KeyError:
                pass
        return super().__getattribute__(name)

    def __getattr__(self, name: str) -> Any:
        raise AttributeError(f"no binding named {name!r}")

    def __repr__(self) -> str:
        return f"BindingContext({dict.__repr__(self)})"
