"""
Pattern abstract syntax tree.

A parsed pattern is a tree of immutable PatternNode values. The set of
node kinds is closed: the compiler handles every NodeKind member and
nothing else.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class NodeKind(str, Enum):
    """Kinds of pattern AST nodes."""

    LIST = "list"
    MAP = "map"
    MAP_ENTRY = "map_entry"
    NUMERIC = "numeric"
    TEXTUAL = "textual"
    BOOLEAN = "boolean"
    CALLABLE = "callable"
    ANY = "any"
    EQUALS = "equals"
    REST = "rest"


@dataclass(frozen=True)
class PatternNode:
    """A single node of a pattern AST.

    Attributes:
        kind: What this node tests.
        children: Sub-patterns, in source order. Empty for leaves. For
            MAP_ENTRY at most one child: the member's value pattern.
        binding: Name the matched value is bound to, if any.
        member: Member name tested by a MAP_ENTRY node.
        literal: Value compared by an EQUALS node.
    """

    kind: NodeKind
    children: tuple["PatternNode", ...] = ()
    binding: str | None = None
    member: str | None = None
    literal: Any = None

    def __post_init__(self) -> None:
        if self.kind is NodeKind.MAP_ENTRY and not self.member:
            raise ValueError("map_entry node requires a member name")
        if self.kind is NodeKind.MAP_ENTRY and len(self.children) > 1:
            raise ValueError("map_entry node takes at most one child")

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def with_binding(self, binding: str) -> "PatternNode":
        """Return a copy of this node bound to ``binding``."""
        return PatternNode(
            kind=self.kind,
            children=self.children,
            binding=binding,
            member=self.member,
            literal=self.literal,
        )

    def to_dict(self) -> dict[str, Any]:
        """Render the subtree as plain dicts, omitting empty fields."""
        data: dict[str, Any] = {"kind": self.kind.value}
        if self.member is not None:
            data["member"] = self.member
        if self.kind is NodeKind.EQUALS:
            data["literal"] = self.literal
        if self.binding is not None:
            data["binding"] = self.binding
        if not self.is_leaf:
            data["children"] = [child.to_dict() for child in self.children]
        return data


@dataclass(frozen=True)
class PatternAST:
    """A parsed pattern: its source text and root node."""

    source: str
    root: PatternNode
    bindings: tuple[str, ...] = field(default=())

    def to_dict(self) -> dict[str, Any]:
        return {
            "source": self.source,
            "bindings": list(self.bindings),
            "root": self.root.to_dict(),
        }
