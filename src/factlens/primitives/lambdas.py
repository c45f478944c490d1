# SPDX-License-Identifier: MIT
"""Facts defined by plain callables, with or without state."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from ..fact import Fact
from ..generator import Generator

S = TypeVar("S")
T = TypeVar("T")

MutateFn = Callable[[Generator, Any, Any], Any]
AdvanceFn = Callable[[Any, Any], Any]


class LambdaFact(Fact[T], Generic[S, T]):
    """A fact whose mutation is ``fn(g, state, obj)``.

    ``fn`` must route every change through ``g`` (``g.set``, ``g.choose``,
    ``g.arbitrary``) so that the derived ``check`` sees it. ``advance_fn``,
    when given, computes the next state from the current state and the item
    just produced.
    """

    def __init__(self, label: str, state: S, fn: MutateFn, advance_fn: AdvanceFn | None = None) -> None:
        self.label = label
        self.state = state
        self.fn = fn
        self.advance_fn = advance_fn

    def mutate(self, obj: T, g: Generator) -> T:
        return self.fn(g, self.state, obj)

    def advance(self, obj: T) -> None:
        if self.advance_fn is not None:
            self.state = self.advance_fn(self.state, obj)


def stateless(label: str, fn: Callable[[Generator, T], T]) -> LambdaFact[None, T]:
    return LambdaFact(label, None, lambda g, _state, obj: fn(g, obj))


def stateful(
    label: str,
    state: S,
    fn: Callable[[Generator, S, T], T],
    advance: Callable[[S, T], S] | None = None,
) -> LambdaFact[S, T]:
    return LambdaFact(label, state, fn, advance)


def consecutive_int(context: str, initial: int) -> LambdaFact[int, int]:
    """Successive items must count up by one from ``initial``.

    The counter moves on in :meth:`~factlens.fact.Fact.advance`, so use with
    :func:`~factlens.fact.build_seq` / :func:`~factlens.fact.check_seq` or
    call ``advance`` yourself after each item.
    """

    def mutate(g: Generator, counter: int, obj: int) -> int:
        return g.set(obj, counter, f"{context}: expected {counter}, got {obj}")

    return LambdaFact(f"consecutive_int({context})", initial, mutate, lambda counter, _obj: counter + 1)
