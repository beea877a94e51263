"""
MissMatch - structural pattern matching for Python values.

Describe the shape of a value with a compact pattern language, pull named
pieces out of it and dispatch to the first case that fits:

    from missmatch import match

    match([1, 2, 3, 4], [
        ("a(n@x|@rest)", lambda b: (b.x, b.rest)),   # -> (1, [2, 3, 4])
        ("_",            lambda b: None),
    ])

Pattern language at a glance:
- ``n`` ``s`` ``b`` ``f`` ``_``: number, string, bool, callable, anything
- ``n(42)`` ``s(foo)`` ``b(true)`` ``'foo'``: exact literals
- ``a(p1, p2|@rest)``: list whose first elements match p1, p2
- ``o(.key:p, .other)``: map/object with at least those own members
- ``p@name``: bind whatever p matched to ``name``
"""

__version__ = "0.2.0"

from .dispatch import Dispatcher, compile_pattern, match, match_json, match_serialized
from .patterns import (
    BindingContext,
    CompiledMatcher,
    MatchResult,
    PatternCache,
    compile_ast,
    parse,
)
from .types import (
    CompileError,
    DecodeError,
    MissMatchError,
    NonExhaustiveMatchError,
    ParseError,
)

__all__ = [
    "BindingContext",
    "CompileError",
    "CompiledMatcher",
    "DecodeError",
    "Dispatcher",
    "MatchResult",
    "MissMatchError",
    "NonExhaustiveMatchError",
    "ParseError",
    "PatternCache",
    "compile_ast",
    "compile_pattern",
    "match",
    "match_json",
    "match_serialized",
    "parse",
]
