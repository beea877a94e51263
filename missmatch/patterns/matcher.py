"""Compiled matchers and match results.

A CompiledMatcher wraps the root predicate of a compiled pattern. Calling
it runs one match attempt against one candidate, with a fresh
BindingContext, and returns a MatchResult.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

from missmatch.patterns.bindings import BindingContext
from missmatch.patterns.predicates import Predicate
from missmatch.types.ast import PatternAST
from missmatch.utils.serialization import serialize_to_primitives


@dataclass
class MatchResult:
    """Outcome of one top-level match attempt.

    ``bindings`` is empty when the pattern did not match, even if some
    sub-patterns captured values before the attempt failed.
    """

    matched: bool
    pattern: str
    bindings: BindingContext = field(default_factory=BindingContext)

    def __bool__(self) -> bool:
        return self.matched

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "matched": self.matched,
            "pattern": self.pattern,
            "bindings": serialize_to_primitives(dict(self.bindings)),
        }


class CompiledMatcher:
    """Executable form of a parsed pattern.

    Instances hold no per-call state and can be shared between threads.
    """

    def __init__(self, ast: PatternAST, root: Predicate):
        self._ast = ast
        self._root = root

    @property
    def ast(self) -> PatternAST:
        return self._ast

    @property
    def pattern(self) -> str:
        return self._ast.source

    def __call__(self, candidate: Any) -> MatchResult:
        return self.match(candidate)

    def match(self, candidate: Any) -> MatchResult:
        """Run a match attempt against ``candidate``."""
        context = BindingContext()
        outcome = self._root(candidate, context)
        if not outcome.success:
            return MatchResult(matched=False, pattern=self.pattern)
        return MatchResult(matched=True, pattern=self.pattern, bindings=context)

    def matches(self, candidate: Any) -> bool:
        """Check whether ``candidate`` matches, discarding bindings."""
        return self._root(candidate, BindingContext()).success

    def filter(self, candidates: Iterable[Any], limit: int | None = None) -> Iterator[MatchResult]:
        """Yield results for the candidates that match, in order.

        Args:
            candidates: Values to try.
            limit: Stop after this many matches.
        """
        found = 0
        for candidate in candidates:
            result = self.match(candidate)
            if result.matched:
                yield result
                found += 1
                if limit is not None and found >= limit:
                    return

    def __repr__(self) -> str:
        return f"CompiledMatcher({self.pattern!r})"
