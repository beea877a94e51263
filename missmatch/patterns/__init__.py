"""Pattern parsing, compilation and structural matching.

The pipeline for one pattern string:

- PatternParser / parse(): text -> PatternAST
- PatternCompiler / compile_ast(): PatternAST -> CompiledMatcher
- CompiledMatcher: candidate -> MatchResult (matched, bindings)
- PatternCache: pattern text -> CompiledMatcher, compiled once

Usage:
    from missmatch.patterns import parse, compile_ast

    matcher = compile_ast(parse("o(.x@x, .y@y)"))
    result = matcher({"x": 3, "y": 4, "z": 5})
    result.bindings  # {'x': 3, 'y': 4}
"""

from .bindings import BindingContext
from .cache import PatternCache, get_default_cache
from .compiler import PatternCompiler, compile_ast
from .matcher import CompiledMatcher, MatchResult
from .parser import PatternParser, parse

__all__ = [
    "BindingContext",
    "CompiledMatcher",
    "MatchResult",
    "PatternCache",
    "PatternCompiler",
    "PatternParser",
    "compile_ast",
    "get_default_cache",
    "parse",
]
