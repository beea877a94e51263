"""Pattern compiler.

Lowers a PatternAST into a tree of predicates. Each AST node becomes one
predicate built by partially applying a function from
``missmatch.patterns.predicates`` to the node's compiled children. No
source code is generated.

Nodes carrying a binding are wrapped in ``bind``. Rest nodes are the
exception: the span a rest binding covers is only known to the enclosing
list predicate, so the binding name travels inside the rest outcome
instead.
"""

from __future__ import annotations

from functools import partial

from missmatch.patterns import predicates
from missmatch.patterns.matcher import CompiledMatcher
from missmatch.patterns.predicates import Predicate
from missmatch.types.ast import NodeKind, PatternAST, PatternNode
from missmatch.types.errors import CompileError
from missmatch.types.values import (
    is_boolean,
    is_callable,
    is_numeric,
    is_textual,
)
from missmatch.utils.logger import is_debug_enabled, logger


def _drop_context(fn):
    """Adapt a one-argument predicate to the (value, context) signature."""

    def predicate(candidate, context):
        return fn(candidate)

    return predicate


class PatternCompiler:
    """Compiles parsed patterns into CompiledMatcher instances.

    Usage:
        matcher = PatternCompiler().compile(parse("a(n@x|@rest)"))
        result = matcher([1, 2, 3])
        result.bindings  # {'x': 1, 'rest': [2, 3]}
    """

    def compile(self, ast: PatternAST) -> CompiledMatcher:
        """Compile a parsed pattern.

        Raises:
            CompileError: If the tree contains a node kind the compiler
                does not know.
        """
        root = self.compile_node(ast.root)
        if is_debug_enabled():
            logger.debug(f"Compiled pattern {ast.source!r}")
        return CompiledMatcher(ast, root)

    def compile_node(self, node: PatternNode) -> Predicate:
        """Compile a single node and its subtree into a predicate."""
        predicate = self._lower(node)
        if node.binding is not None and node.kind is not NodeKind.REST:
            predicate = partial(predicates.bind, node.binding, predicate)
        return predicate

    def _lower(self, node: PatternNode) -> Predicate:
        match node.kind:
            case NodeKind.LIST:
                children = [self.compile_node(child) for child in node.children]
                return partial(predicates.match_list, children)
            case NodeKind.MAP:
                entries = [self.compile_node(child) for child in node.children]
                return partial(predicates.match_map, entries)
            case NodeKind.MAP_ENTRY:
                value_predicate = (
                    self.compile_node(node.children[0]) if node.children else None
                )
                return partial(predicates.has_member, value_predicate, node.member)
            case NodeKind.NUMERIC:
                return _drop_context(partial(predicates.type_test, is_numeric))
            case NodeKind.TEXTUAL:
                return _drop_context(partial(predicates.type_test, is_textual))
            case NodeKind.BOOLEAN:
                return _drop_context(partial(predicates.type_test, is_boolean))
            case NodeKind.CALLABLE:
                return _drop_context(partial(predicates.type_test, is_callable))
            case NodeKind.ANY:
                return _drop_context(predicates.any_value)
            case NodeKind.EQUALS:
                return _drop_context(partial(predicates.equals, node.literal))
            case NodeKind.REST:
                return _drop_context(partial(predicates.rest, node.binding))
            case _:
                raise CompileError(node.kind)


_default_compiler = PatternCompiler()


def compile_ast(ast: PatternAST) -> CompiledMatcher:
    """Compile a parsed pattern with the shared compiler instance."""
    return _default_compiler.compile(ast)
