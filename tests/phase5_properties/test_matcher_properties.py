"""Hypothesis property-based tests for parsing and matching.

Uses Hypothesis to generate random well-formed patterns and candidate
values and verifies invariants that must hold for all of them.

Properties tested:
- Determinism: parsing the same text twice yields equal trees
- Totality: every parsed pattern compiles without CompileError
- Lower bound: k-element list patterns match any long-enough list
- Cache equivalence: cached and freshly compiled matchers agree
- Isolation: one attempt's bindings never appear in another's
"""

import string

from hypothesis import given, settings
from hypothesis import strategies as st

from missmatch import PatternCache, compile_ast, match, parse


# =============================================================================
# Strategy Definitions
# =============================================================================

names = st.text(alphabet=string.ascii_letters, min_size=1, max_size=6)
member_names = st.text(alphabet=string.ascii_letters + string.digits + "_", min_size=1, max_size=6)
bindings = st.one_of(st.just(""), names.map(lambda n: "@" + n))

safe_text = st.text(
    alphabet=string.ascii_letters + string.digits + " ",
    max_size=10,
)

literals = st.one_of(
    st.integers(min_value=-1000, max_value=1000).map(lambda i: f"n({i})"),
    st.sampled_from(["b(true)", "b(false)"]),
    safe_text.map(lambda t: f"s({t})"),
    safe_text.map(lambda t: f"'{t}'"),
)

leaves = st.builds(
    lambda head, binding: head + binding,
    st.one_of(st.sampled_from(list("nsbf_ao")), literals),
    bindings,
)

separators = st.sampled_from([",", ", ", " , "])


def list_patterns(children):
    return st.builds(
        lambda items, sep, rest, binding: "a(" + sep.join(items) + rest + ")" + binding,
        st.lists(children, min_size=1, max_size=4),
        separators,
        st.one_of(st.just(""), st.just("|"), names.map(lambda n: "|@" + n)),
        bindings,
    )


def map_patterns(children):
    entry = st.builds(
        lambda name, sub, binding: "." + name + sub + binding,
        member_names,
        st.one_of(st.just(""), children.map(lambda c: ":" + c)),
        bindings,
    )
    return st.builds(
        lambda entries, sep, binding: "o(" + sep.join(entries) + ")" + binding,
        st.lists(entry, min_size=1, max_size=4),
        separators,
        bindings,
    )


patterns = st.recursive(
    leaves,
    lambda children: st.one_of(list_patterns(children), map_patterns(children)),
    max_leaves=12,
)

primitives = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(min_value=-1000, max_value=1000),
    st.floats(allow_nan=False, allow_infinity=False),
    st.text(max_size=8),
)

values = st.recursive(
    primitives,
    lambda children: st.one_of(
        st.lists(children, max_size=5),
        st.dictionaries(member_names, children, max_size=5),
    ),
    max_leaves=20,
)


# =============================================================================
# Parser Properties
# =============================================================================

class TestParserProperties:
    """Properties of parse()."""

    @given(pattern=patterns)
    @settings(max_examples=200)
    def test_parse_is_deterministic(self, pattern):
        """Identical text always yields structurally identical trees."""
        assert parse(pattern) == parse(pattern)

    @given(pattern=patterns)
    @settings(max_examples=200)
    def test_every_parsed_pattern_compiles(self, pattern):
        """The compiler handles every tree the parser produces."""
        matcher = compile_ast(parse(pattern))
        assert matcher.pattern == pattern

    @given(pattern=patterns, spaces=st.integers(min_value=0, max_value=3))
    def test_trailing_spaces_ignored(self, pattern, spaces):
        assert parse(pattern + " " * spaces).root == parse(pattern).root


# =============================================================================
# Matcher Properties
# =============================================================================

class TestMatcherProperties:
    """Properties of compiled matchers."""

    @given(
        k=st.integers(min_value=1, max_value=5),
        head=st.lists(st.integers(), min_size=5, max_size=5),
        tail=st.lists(values, max_size=5),
    )
    def test_list_lower_bound(self, k, head, tail):
        """k numeric slots match any list of >= k elements starting with k numbers."""
        matcher = compile_ast(parse("a(" + ", ".join(["n"] * k) + ")"))
        assert matcher.matches(head[:k] + tail)
        assert not matcher.matches(head[: k - 1])

    @given(
        items=st.lists(values, min_size=1, max_size=8),
        name=names,
    )
    def test_rest_captures_tail(self, items, name):
        if name == "x":
            name = "rest"
        result = compile_ast(parse(f"a(_@x|@{name})"))(items)
        if len(items) >= 2:
            assert result.bindings["x"] == items[0]
            assert result.bindings[name] == items[1:]
        else:
            assert not result.matched

    @given(pattern=patterns, candidates=st.lists(values, max_size=5))
    @settings(max_examples=100)
    def test_cached_and_fresh_matchers_agree(self, pattern, candidates):
        cached = PatternCache().get_or_compile(pattern)
        fresh = compile_ast(parse(pattern))
        for candidate in candidates:
            a, b = cached(candidate), fresh(candidate)
            assert a.matched == b.matched
            assert a.bindings == b.bindings

    @given(pattern=patterns, candidate=values)
    @settings(max_examples=100)
    def test_failed_attempts_expose_no_bindings(self, pattern, candidate):
        result = compile_ast(parse(pattern))(candidate)
        if not result.matched:
            assert result.bindings == {}

    @given(first=values, second=values)
    def test_bindings_isolated_between_calls(self, first, second):
        cases = [("o(.key@k)", lambda b: dict(b)), ("_@whole", lambda b: dict(b))]
        match(first, cases)
        out = match(second, cases)
        assert set(out) <= {"k", "whole"}
        assert len(out) == 1
