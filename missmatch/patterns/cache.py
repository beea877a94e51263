"""Compiled pattern cache.

Parsing and compiling are pure functions of the pattern text, so every
distinct pattern string only ever needs to be compiled once. The cache
is append-only: entries are never evicted, only dropped wholesale by
clear().
"""

from __future__ import annotations

import threading

from missmatch.patterns.compiler import compile_ast
from missmatch.patterns.matcher import CompiledMatcher
from missmatch.patterns.parser import parse
from missmatch.utils.logger import is_debug_enabled, logger


class PatternCache:
    """Maps exact pattern text to its CompiledMatcher.

    Thread safety: uses threading.Lock around the table. Compilation
    itself runs outside the lock; if two threads race on the same
    pattern, the first stored matcher wins and both get it.
    """

    def __init__(self):
        self._cache: dict[str, CompiledMatcher] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def get(self, pattern: str) -> CompiledMatcher | None:
        """Get the cached matcher for ``pattern`` if present."""
        with self._lock:
            matcher = self._cache.get(pattern)
            if matcher is not None:
                self._hits += 1
            else:
                self._misses += 1
            return matcher

    def put(self, pattern: str, matcher: CompiledMatcher) -> CompiledMatcher:
        """Store a matcher unless one is already cached; return the cached one."""
        with self._lock:
            return self._cache.setdefault(pattern, matcher)

    def get_or_compile(self, pattern: str) -> CompiledMatcher:
        """Get the cached matcher or parse, compile and cache a new one.

        Raises:
            ParseError: If the pattern is malformed. Nothing is cached.
        """
        cached = self.get(pattern)
        if cached is not None:
            return cached

        if is_debug_enabled():
            logger.debug(f"Pattern cache miss for {pattern!r}")
        return self.put(pattern, compile_ast(parse(pattern)))

    def __contains__(self, pattern: str) -> bool:
        with self._lock:
            return pattern in self._cache

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

    def clear(self) -> None:
        """Clear all cached entries and statistics."""
        with self._lock:
            self._cache.clear()
            self._hits = 0
            self._misses = 0

    @property
    def stats(self) -> dict[str, float]:
        """Cache statistics."""
        with self._lock:
            return {
                "entries": len(self._cache),
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate": round(
                    self._hits / max(self._hits + self._misses, 1) * 100, 1
                ),
            }


_default_cache = PatternCache()


def get_default_cache() -> PatternCache:
    """The process-wide cache used by match() and compile_pattern()."""
    return _default_cache
