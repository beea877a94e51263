"""Pattern parser.

Turns pattern text into a PatternAST by recursive descent over the
characters of the source. The grammar:

    expr      := list | map | leaf | quoted
    list      := 'a' ( '@' name | '(' expr (',' expr)* rest? ')' binding? )?
    rest      := '|' binding?
    map       := 'o' ( '@' name | '(' prop (',' prop)* ')' binding? )?
    prop      := '.' member (':' expr)? binding?
    leaf      := ('n' | 's' | 'b' | 'f' | '_') ( '(' literal ')' )? binding?
    quoted    := ( "'" text "'" | '"' text '"' ) binding?
    binding   := '@' name

Binding names are ASCII letters; member names also allow digits and
underscores. Spaces are allowed around separators, inside group
parentheses, around the rest marker and at the very end, nowhere else.

Examples:
    parse("a(n@x|@rest)")      # list starting with a number, tail bound to rest
    parse("o(.x, .y:s@name)")  # map with members x and y, y textual
    parse("n(42)@answer")      # exactly the number 42
"""

from __future__ import annotations

import re

from missmatch.constants import (
    ANY_TAG,
    BINDING_SIGIL,
    BOOLEAN_LITERALS,
    BOOLEAN_TAG,
    CALLABLE_TAG,
    GROUP_CLOSE,
    GROUP_OPEN,
    LIST_TAG,
    MAP_TAG,
    MEMBER_PREFIX,
    MEMBER_TYPE_SEPARATOR,
    NUMERIC_TAG,
    QUOTES,
    REST_MARKER,
    SEPARATOR,
    TEXTUAL_TAG,
    WHITESPACE,
)
from missmatch.types.ast import NodeKind, PatternAST, PatternNode
from missmatch.types.errors import ParseError

_NUMERIC_LITERAL = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

_LEAF_KINDS: dict[str, NodeKind] = {
    NUMERIC_TAG: NodeKind.NUMERIC,
    TEXTUAL_TAG: NodeKind.TEXTUAL,
    BOOLEAN_TAG: NodeKind.BOOLEAN,
    CALLABLE_TAG: NodeKind.CALLABLE,
    ANY_TAG: NodeKind.ANY,
}


def _is_name_char(c: str) -> bool:
    return c.isascii() and c.isalpha()


def _is_member_char(c: str) -> bool:
    return c.isascii() and (c.isalnum() or c == "_")


class PatternParser:
    """Single-use recursive-descent parser over one pattern string.

    Usage:
        ast = PatternParser("o(.x@x, .y@y)").parse()
    """

    def __init__(self, source: str):
        self._src = source
        self._index = 0
        self._bindings: list[str] = []

    # ------------------------------------------------------------------
    # Cursor helpers
    # ------------------------------------------------------------------

    def _has_next(self) -> bool:
        return self._index < len(self._src)

    def _peek(self) -> str | None:
        if self._has_next():
            return self._src[self._index]
        return None

    def _advance(self) -> str:
        c = self._src[self._index]
        self._index += 1
        return c

    def _skip_spaces(self) -> None:
        while self._peek() == WHITESPACE:
            self._index += 1

    def _expect(self, token: str) -> None:
        found = self._peek()
        if found != token:
            raise self._error(f"expected {token!r}, found {self._describe(found)}")
        self._index += 1

    def _take_while(self, predicate) -> str:
        start = self._index
        while self._has_next() and predicate(self._src[self._index]):
            self._index += 1
        return self._src[start:self._index]

    def _describe(self, token: str | None) -> str:
        return "end of pattern" if token is None else repr(token)

    def _error(self, reason: str, position: int | None = None) -> ParseError:
        return ParseError(
            position=self._index if position is None else position,
            reason=reason,
            pattern=self._src,
        )

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------

    def parse(self) -> PatternAST:
        """Parse exactly one expression followed by optional trailing spaces.

        Raises:
            ParseError: If the pattern is empty or malformed, or if input
                remains after the expression.
        """
        if not self._src:
            raise self._error("empty pattern")

        root = self._expression()
        self._skip_spaces()

        if self._has_next():
            raise self._error(
                f"expected end of pattern, found {self._describe(self._peek())}"
            )
        return PatternAST(source=self._src, root=root, bindings=tuple(self._bindings))

    # ------------------------------------------------------------------
    # Productions
    # ------------------------------------------------------------------

    def _expression(self) -> PatternNode:
        c = self._peek()
        if c == LIST_TAG:
            return self._list()
        if c == MAP_TAG:
            return self._map()
        if c in _LEAF_KINDS:
            return self._leaf(_LEAF_KINDS[c])
        if c in QUOTES:
            return self._quoted()
        if c is None:
            raise self._error("expected an expression, found end of pattern")
        raise self._error(f"unexpected token {c!r}")

    def _binding(self) -> str:
        """Parse ``@name`` and return the name."""
        at = self._index
        self._expect(BINDING_SIGIL)
        name = self._take_while(_is_name_char)
        if not name:
            raise self._error("missing binding name after '@'", position=at)
        self._bindings.append(name)
        return name

    def _optional_binding(self) -> str | None:
        if self._peek() == BINDING_SIGIL:
            return self._binding()
        return None

    def _list(self) -> PatternNode:
        self._advance()  # 'a'

        if self._peek() == BINDING_SIGIL:
            return PatternNode(NodeKind.LIST, binding=self._binding())
        if self._peek() != GROUP_OPEN:
            return PatternNode(NodeKind.LIST)

        open_at = self._index
        self._advance()  # '('
        children: list[PatternNode] = []

        while True:
            self._skip_spaces()
            children.append(self._expression())
            self._skip_spaces()
            if self._peek() != SEPARATOR:
                break
            self._advance()

        if self._peek() == REST_MARKER:
            self._advance()
            self._skip_spaces()
            children.append(PatternNode(NodeKind.REST, binding=self._optional_binding()))
            self._skip_spaces()

        self._close_group(open_at)
        return PatternNode(
            NodeKind.LIST,
            children=tuple(children),
            binding=self._optional_binding(),
        )

    def _map(self) -> PatternNode:
        self._advance()  # 'o'

        if self._peek() == BINDING_SIGIL:
            return PatternNode(NodeKind.MAP, binding=self._binding())
        if self._peek() != GROUP_OPEN:
            return PatternNode(NodeKind.MAP)

        open_at = self._index
        self._advance()  # '('
        entries: list[PatternNode] = []

        while True:
            self._skip_spaces()
            entries.append(self._member())
            self._skip_spaces()
            if self._peek() != SEPARATOR:
                break
            self._advance()

        self._close_group(open_at)
        return PatternNode(
            NodeKind.MAP,
            children=tuple(entries),
            binding=self._optional_binding(),
        )

    def _member(self) -> PatternNode:
        found = self._peek()
        if found != MEMBER_PREFIX:
            raise self._error(
                f"expected member starting with {MEMBER_PREFIX!r}, found {self._describe(found)}"
            )
        self._advance()

        name = self._take_while(_is_member_char)
        if not name:
            raise self._error("missing member name after '.'")

        children: tuple[PatternNode, ...] = ()
        if self._peek() == MEMBER_TYPE_SEPARATOR:
            self._advance()
            children = (self._expression(),)

        return PatternNode(
            NodeKind.MAP_ENTRY,
            children=children,
            binding=self._optional_binding(),
            member=name,
        )

    def _close_group(self, open_at: int) -> None:
        found = self._peek()
        if found is None:
            raise self._error(f"unterminated group opened at position {open_at}, expected ')'")
        self._expect(GROUP_CLOSE)

    def _leaf(self, kind: NodeKind) -> PatternNode:
        tag = self._advance()

        if self._peek() == GROUP_OPEN:
            if kind in (NodeKind.CALLABLE, NodeKind.ANY):
                raise self._error(f"'{tag}' does not take a literal")
            literal = self._literal(kind)
            return PatternNode(
                NodeKind.EQUALS,
                literal=literal,
                binding=self._optional_binding(),
            )

        return PatternNode(kind, binding=self._optional_binding())

    def _literal(self, kind: NodeKind) -> object:
        """Parse ``(body)`` for a typed leaf and convert the body."""
        open_at = self._index
        self._advance()  # '('
        close = self._src.find(GROUP_CLOSE, self._index)
        if close < 0:
            raise self._error(
                f"unterminated literal opened at position {open_at}, expected ')'",
                position=len(self._src),
            )

        body = self._src[self._index:close]
        body_at = self._index
        self._index = close + 1

        if kind is NodeKind.NUMERIC:
            if not _NUMERIC_LITERAL.fullmatch(body):
                raise self._error(f"invalid numeric literal {body!r}", position=body_at)
            return float(body)
        if kind is NodeKind.BOOLEAN:
            if body not in BOOLEAN_LITERALS:
                raise self._error(
                    f"invalid boolean literal {body!r}, expected 'true' or 'false'",
                    position=body_at,
                )
            return BOOLEAN_LITERALS[body]
        return body

    def _quoted(self) -> PatternNode:
        open_at = self._index
        quote = self._advance()
        close = self._src.find(quote, self._index)
        if close < 0:
            raise self._error(
                f"unterminated string literal opened at position {open_at}",
                position=len(self._src),
            )

        text = self._src[self._index:close]
        self._index = close + 1
        return PatternNode(
            NodeKind.EQUALS,
            literal=text,
            binding=self._optional_binding(),
        )


def parse(source: str) -> PatternAST:
    """Parse pattern text into a PatternAST.

    Args:
        source: Pattern text.

    Returns:
        The parsed pattern.

    Raises:
        ParseError: If the pattern is malformed.
    """
    return PatternParser(source).parse()
