"""Case dispatch.

match() tries an ordered sequence of (pattern, handler) cases against a
candidate. The first pattern that matches wins: its handler is called
with the BindingContext of that attempt and its return value is returned.
Later cases are not tried. When no case matches, NonExhaustiveMatchError
is raised and no handler runs.

Usage:
    from missmatch import match

    area = match(shape, [
        ("o(.w@w, .h@h)", lambda b: b.w * b.h),
        ("o(.r@r)",       lambda b: 3.14159 * b.r ** 2),
        ("_",             lambda b: 0),
    ])
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any, TypeVar

from missmatch.config import cache_enabled, default_format
from missmatch.patterns.bindings import BindingContext
from missmatch.patterns.cache import PatternCache, get_default_cache
from missmatch.patterns.compiler import compile_ast
from missmatch.patterns.matcher import CompiledMatcher
from missmatch.patterns.parser import parse
from missmatch.types.errors import NonExhaustiveMatchError
from missmatch.utils.decoding import decode_candidate
from missmatch.utils.logger import is_debug_enabled, logger, summarize

T = TypeVar("T")

Handler = Callable[[BindingContext], T]
Case = tuple[str, Handler]


def compile_pattern(pattern: str, cache: PatternCache | None = None) -> CompiledMatcher:
    """Parse and compile ``pattern``, reusing a cached matcher when possible.

    Args:
        pattern: Pattern text.
        cache: Cache to use. Defaults to the process-wide cache. Ignored
            when caching is disabled through ``MISSMATCH_CACHE``.

    Raises:
        ParseError: If the pattern is malformed.
    """
    if not cache_enabled():
        return compile_ast(parse(pattern))
    if cache is None:
        cache = get_default_cache()
    return cache.get_or_compile(pattern)


def _check_cases(cases: Iterable[Case]) -> Iterable[Case]:
    if isinstance(cases, Mapping):
        raise TypeError(
            "cases must be an ordered sequence of (pattern, handler) pairs; "
            "pass mapping.items() to use a mapping's order"
        )
    return cases


def _check_handler(pattern: str, handler: Any) -> None:
    if not callable(handler):
        raise TypeError(
            f"handler for pattern {pattern!r} must be callable, got {type(handler).__name__}"
        )


def match(
    candidate: Any,
    cases: Iterable[Case],
    cache: PatternCache | None = None,
) -> Any:
    """Dispatch ``candidate`` to the handler of the first matching case.

    Patterns are compiled lazily, in order, so a malformed pattern only
    raises once dispatch reaches it.

    Args:
        candidate: Value to match.
        cases: Ordered (pattern, handler) pairs. Each handler is called
            with the BindingContext of its successful attempt.
        cache: Pattern cache to use instead of the process-wide one.

    Returns:
        Whatever the matching handler returns.

    Raises:
        NonExhaustiveMatchError: If no pattern matches.
        ParseError: If a pattern reached during dispatch is malformed.
        TypeError: If ``cases`` is a mapping or a handler is not callable.
    """
    tried: list[str] = []
    for pattern, handler in _check_cases(cases):
        _check_handler(pattern, handler)
        tried.append(pattern)

        result = compile_pattern(pattern, cache).match(candidate)
        if result.matched:
            if is_debug_enabled():
                logger.debug(f"Case {len(tried)} {pattern!r} matched {summarize(candidate)}")
            return handler(result.bindings)

    logger.warning(f"Non-exhaustive match: {len(tried)} case(s) tried for {summarize(candidate)}")
    raise NonExhaustiveMatchError(candidate, tried)


def match_serialized(
    text: str,
    cases: Iterable[Case],
    fmt: str | None = None,
    cache: PatternCache | None = None,
) -> Any:
    """Decode ``text`` and dispatch the decoded value like match().

    Args:
        text: Serialized candidate.
        cases: Ordered (pattern, handler) pairs.
        fmt: ``json`` or ``toon``. Defaults to ``MISSMATCH_FORMAT``.
        cache: Pattern cache to use instead of the process-wide one.

    Raises:
        DecodeError: If ``text`` cannot be decoded.
        NonExhaustiveMatchError: If no pattern matches.
    """
    candidate = decode_candidate(text, fmt or default_format())
    return match(candidate, cases, cache)


def match_json(text: str, cases: Iterable[Case], cache: PatternCache | None = None) -> Any:
    """Decode JSON ``text`` and dispatch it like match()."""
    return match_serialized(text, cases, "json", cache)


class Dispatcher:
    """A fixed, precompiled sequence of cases.

    All patterns are compiled when the dispatcher is built, so malformed
    patterns and non-callable handlers are reported up front.

    Usage:
        describe = Dispatcher([
            ("a(_@head|@tail)", lambda b: f"{b.head} then {len(b.tail)} more"),
            ("a(_@only)",       lambda b: f"just {b.only}"),
            ("a",               lambda b: "empty list"),
            ("_",               lambda b: "not a list"),
        ])
        describe([1, 2, 3])  # '1 then 2 more'
    """

    def __init__(self, cases: Iterable[Case], cache: PatternCache | None = None):
        self._cases: list[tuple[CompiledMatcher, Handler]] = []
        for pattern, handler in _check_cases(cases):
            _check_handler(pattern, handler)
            self._cases.append((compile_pattern(pattern, cache), handler))

    @property
    def patterns(self) -> Sequence[str]:
        return [matcher.pattern for matcher, _ in self._cases]

    def __len__(self) -> int:
        return len(self._cases)

    def __call__(self, candidate: Any) -> Any:
        return self.dispatch(candidate)

    def dispatch(self, candidate: Any) -> Any:
        """Run the first matching handler on ``candidate``.

        Raises:
            NonExhaustiveMatchError: If no pattern matches.
        """
        for position, (matcher, handler) in enumerate(self._cases, 1):
            result = matcher.match(candidate)
            if result.matched:
                if is_debug_enabled():
                    logger.debug(f"Case {position} {matcher.pattern!r} matched {summarize(candidate)}")
                return handler(result.bindings)

        logger.warning(
            f"Non-exhaustive match: {len(self._cases)} case(s) tried for {summarize(candidate)}"
        )
        raise NonExhaustiveMatchError(candidate, list(self.patterns))

    def dispatch_serialized(self, text: str, fmt: str | None = None) -> Any:
        """Decode ``text`` and dispatch the decoded value."""
        return self.dispatch(decode_candidate(text, fmt or default_format()))
