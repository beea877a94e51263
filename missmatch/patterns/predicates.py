"""Structural predicates for lists and maps.

These are the runtime algorithms compiled matchers delegate to. Each takes
the compiled predicates of its children, the candidate value and the
BindingContext of the current attempt, and returns a MatchOutcome.

A structural mismatch is a failed outcome, never an exception.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from missmatch.patterns.bindings import BindingContext
from missmatch.types.outcome import MatchOutcome
from missmatch.types.values import (
    has_own_member,
    is_list,
    is_map,
    read_member,
    strict_equals,
)

Predicate = Callable[[Any, BindingContext], MatchOutcome]


def match_list(
    children: Sequence[Predicate],
    candidate: Any,
    context: BindingContext,
) -> MatchOutcome:
    """Match a list candidate against positional child predicates.

    The candidate needs at least as many elements as there are children.
    Elements past the last child are not inspected. A child reporting a
    rest capture stops the scan; if it carries a binding, that name is
    bound to the slice from its position to the end.
    """
    if not is_list(candidate):
        return MatchOutcome.value(False, candidate)

    if len(children) > len(candidate):
        return MatchOutcome.value(False, candidate)

    for index, child in enumerate(children):
        outcome = child(candidate[index], context)
        if not outcome.success:
            return MatchOutcome.value(False, candidate)

        if outcome.is_rest_capture:
            if outcome.rest_binding is not None:
                context[outcome.rest_binding] = candidate[index:]
            break

    return MatchOutcome.value(True, candidate)


def match_map(
    entries: Sequence[Predicate],
    candidate: Any,
    context: BindingContext,
) -> MatchOutcome:
    """Match a map candidate against member predicates.

    Every entry must hold; members the pattern does not name are ignored.
    """
    if is_list(candidate) or not is_map(candidate):
        return MatchOutcome.value(False, candidate)

    for entry in entries:
        if not entry(candidate, context).success:
            return MatchOutcome.value(False, candidate)

    return MatchOutcome.value(True, candidate)


def has_member(
    value_predicate: Predicate | None,
    name: str,
    candidate: Any,
    context: BindingContext,
) -> MatchOutcome:
    """Test that ``candidate`` has its own member ``name``.

    When ``value_predicate`` is given, the member's value must satisfy it
    too. A binding on the member resolves to the member's value.
    """
    if not has_own_member(candidate, name):
        return MatchOutcome.member(False, name, candidate)

    if value_predicate is not None:
        if not value_predicate(read_member(candidate, name), context).success:
            return MatchOutcome.member(False, name, candidate)

    return MatchOutcome.member(True, name, candidate)


def type_test(test: Callable[[Any], bool], candidate: Any) -> MatchOutcome:
    return MatchOutcome.value(test(candidate), candidate)


def equals(literal: Any, candidate: Any) -> MatchOutcome:
    return MatchOutcome.value(strict_equals(literal, candidate), candidate)


def any_value(candidate: Any) -> MatchOutcome:
    return MatchOutcome.value(True, candidate)


def rest(binding: str | None, candidate: Any) -> MatchOutcome:
    return MatchOutcome.rest(candidate, binding)


def bind(
    name: str,
    predicate: Predicate,
    candidate: Any,
    context: BindingContext,
) -> MatchOutcome:
    """Run ``predicate`` and, on success, bind its resolved capture to ``name``.

    The outcome is returned unchanged: binding never turns a match into a
    failure or the other way round.
    """
    outcome = predicate(candidate, context)
    if outcome.success:
        context[name] = outcome.resolve()
    return outcome
