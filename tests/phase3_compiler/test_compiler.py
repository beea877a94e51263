"""Compiler tests.

Each test compiles real pattern text and runs it against real values.
"""

import types

import pytest

from missmatch.patterns import BindingContext, CompiledMatcher, PatternCompiler, compile_ast, parse
from missmatch.types import CompileError, NodeKind, PatternAST, PatternNode


def compiled(pattern: str) -> CompiledMatcher:
    return compile_ast(parse(pattern))


class TestTypePredicates:
    """Leaf type descriptors."""

    @pytest.mark.parametrize(
        "pattern, good, bad",
        [
            ("n", 3.5, "3.5"),
            ("n", 0, True),
            ("s", "text", 1),
            ("b", False, 0),
            ("f", len, "len"),
            ("a", (), "abc"),
            ("o", {}, []),
        ],
    )
    def test_type_descriptor(self, pattern, good, bad):
        matcher = compiled(pattern)
        assert matcher.matches(good)
        assert not matcher.matches(bad)

    @pytest.mark.parametrize("value", [None, 0, "", [], {}, len, object()])
    def test_wildcard_matches_anything(self, value):
        assert compiled("_").matches(value)

    def test_map_descriptor_rejects_none(self):
        assert not compiled("o").matches(None)


class TestLiteralPredicates:
    """Equals nodes."""

    def test_numeric_literal(self):
        matcher = compiled("n(42)")
        assert matcher.matches(42)
        assert matcher.matches(42.0)
        assert not matcher.matches(43)
        assert not matcher.matches("42")

    def test_boolean_literal_is_not_one(self):
        matcher = compiled("b(true)")
        assert matcher.matches(True)
        assert not matcher.matches(1)

    def test_number_literal_is_not_bool(self):
        assert not compiled("n(1)").matches(True)

    def test_quoted_literal_matches_exact_text(self):
        matcher = compiled('"foo"')
        assert matcher.matches("foo")
        assert not matcher.matches("foobar")
        assert not matcher.matches("Foo")
        assert not matcher.matches(["foo"])

    def test_textual_literal(self):
        assert compiled("s(foo)").matches("foo")
        assert not compiled("s(foo)").matches("bar")


class TestBindings:
    """Binding wrappers record captured values."""

    def test_leaf_binding(self):
        result = compiled("n@x")(5)
        assert result.matched
        assert result.bindings == {"x": 5}

    def test_literal_binding(self):
        assert compiled("'hi'@greeting")("hi").bindings.greeting == "hi"

    def test_member_binding_captures_member_value(self):
        result = compiled("o(.x@x, .y@y)")({"x": 3, "y": 4, "z": 5})
        assert result.bindings == {"x": 3, "y": 4}

    def test_member_binding_on_object(self):
        point = types.SimpleNamespace(x=1, y=2)
        result = compiled("o(.x@px)")(point)
        assert result.bindings == {"px": 1}

    def test_nested_bindings(self):
        result = compiled("o(.coord:o(.x@x, .y@y)@coord)")({"coord": {"x": 5, "y": 7}})
        assert result.bindings == {"x": 5, "y": 7, "coord": {"x": 5, "y": 7}}

    def test_whole_list_binding(self):
        value = [1, "a"]
        result = compiled("a(n, s)@pair")(value)
        assert result.bindings.pair is value

    def test_failed_match_exposes_no_bindings(self):
        # x is captured before the second element fails
        result = compiled("a(n@x, s@y)")([1, 2])
        assert not result.matched
        assert result.bindings == {}

    def test_binding_does_not_change_outcome(self):
        assert compiled("n@x").matches(1) == compiled("n").matches(1)
        assert compiled("n@x").matches("1") == compiled("n").matches("1")


class TestRestCapture:
    """Rest markers at the tail of a list."""

    def test_rest_binds_remaining_slice(self):
        result = compiled("a(n@x|@rest)")([1, 2, 3, 4])
        assert result.matched
        assert result.bindings == {"x": 1, "rest": [2, 3, 4]}

    def test_rest_skips_checking_tail(self):
        result = compiled("a(n|@rest)")([1, "two", None])
        assert result.bindings.rest == ["two", None]

    def test_rest_counts_toward_minimum_length(self):
        assert not compiled("a(n|@rest)").matches([1])

    def test_rest_on_tuple_keeps_type(self):
        assert compiled("a(_|@rest)")((1, 2, 3)).bindings.rest == (2, 3)

    def test_unbound_rest(self):
        result = compiled("a(n|)")([1, 2])
        assert result.matched
        assert result.bindings == {}

    def test_nested_rest(self):
        result = compiled("a(a(_@h|@t), _)")([[1, 2, 3], 4])
        assert result.bindings == {"h": 1, "t": [2, 3]}


class TestCompilerInvariants:
    """The compiler's node-kind handling."""

    def test_every_node_kind_compiles(self):
        compiler = PatternCompiler()
        for kind in NodeKind:
            if kind is NodeKind.MAP_ENTRY:
                node = PatternNode(kind, member="x")
            else:
                node = PatternNode(kind)
            assert callable(compiler.compile_node(node))

    def test_unknown_kind_raises_compile_error(self):
        bogus = PatternNode.__new__(PatternNode)
        object.__setattr__(bogus, "kind", "bogus")
        object.__setattr__(bogus, "children", ())
        object.__setattr__(bogus, "binding", None)
        object.__setattr__(bogus, "member", None)
        object.__setattr__(bogus, "literal", None)
        with pytest.raises(CompileError) as exc:
            PatternCompiler().compile(PatternAST("?", bogus))
        assert exc.value.node_kind == "bogus"

    def test_compiled_predicate_threads_context(self):
        predicate = PatternCompiler().compile_node(parse("n@x").root)
        context = BindingContext()
        outcome = predicate(9, context)
        assert outcome.success
        assert context == {"x": 9}

    def test_matcher_exposes_ast(self):
        matcher = compiled("a(n)")
        assert matcher.pattern == "a(n)"
        assert matcher.ast.root.kind is NodeKind.LIST
        assert repr(matcher) == "CompiledMatcher('a(n)')"


class TestCompiledMatcher:
    """CompiledMatcher helpers."""

    def test_filter_yields_matches_in_order(self):
        matcher = compiled("o(.id@id)")
        rows = [{"id": 1}, {"name": "x"}, {"id": 2}, {"id": 3}]
        assert [r.bindings.id for r in matcher.filter(rows)] == [1, 2, 3]

    def test_filter_limit(self):
        matcher = compiled("n")
        assert len(list(matcher.filter(range(10), limit=3))) == 3

    def test_result_to_dict(self):
        result = compiled("a(n@x|@rest)")((1, 2, 3))
        assert result.to_dict() == {
            "matched": True,
            "pattern": "a(n@x|@rest)",
            "bindings": {"x": 1, "rest": [2, 3]},
        }

    def test_result_truthiness(self):
        assert compiled("n")(1)
        assert not compiled("n")("1")
