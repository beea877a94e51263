"""
Match outcomes.

Every compiled predicate returns a MatchOutcome. The outcome's kind says
how a binding on that predicate should resolve its value:

- VALUE: ``captured`` is the value itself.
- MEMBER: ``captured`` is a member name; the value is ``source[captured]``.
- REST: the predicate is a list rest marker. The enclosing list
  predicate recognizes it positionally and binds ``rest_binding`` to the
  remaining slice.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from missmatch.types.values import read_member


class OutcomeKind(str, Enum):
    """How a successful outcome's captured value is resolved."""

    VALUE = "value"
    MEMBER = "member"
    REST = "rest"


@dataclass(frozen=True)
class MatchOutcome:
    """Result of applying one compiled predicate to one value."""

    success: bool
    captured: Any = None
    kind: OutcomeKind = OutcomeKind.VALUE
    source: Any = None
    rest_binding: str | None = None

    @classmethod
    def value(cls, success: bool, captured: Any) -> "MatchOutcome":
        return cls(success=success, captured=captured)

    @classmethod
    def member(cls, success: bool, name: str, source: Any) -> "MatchOutcome":
        return cls(success=success, captured=name, kind=OutcomeKind.MEMBER, source=source)

    @classmethod
    def rest(cls, captured: Any, binding: str | None = None) -> "MatchOutcome":
        return cls(success=True, captured=captured, kind=OutcomeKind.REST, rest_binding=binding)

    @property
    def is_rest_capture(self) -> bool:
        return self.kind is OutcomeKind.REST

    def resolve(self) -> Any:
        """The value a binding on this outcome should capture."""
        if self.kind is OutcomeKind.MEMBER:
            return read_member(self.source, self.captured)
        return self.captured

    def __bool__(self) -> bool:
        return self.success
