# SPDX-License-Identifier: MIT
"""Logical combinators: always, never, or_, not_, mapped."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from ..check import Check
from ..errors import MutationError
from ..fact import Fact
from ..generator import Generator
from .brute import BruteFact

T = TypeVar("T")


class AlwaysFact(Fact[T]):
    label = "always"

    def mutate(self, obj: T, g: Generator) -> T:
        return obj


class NeverFact(Fact[T]):
    """Never satisfied. Useful as a placeholder for impossible branches."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        self.label = f"never({reason})"

    def mutate(self, obj: T, g: Generator) -> T:
        if g.is_checker:
            raise MutationError(self.reason)
        return obj


class OrFact(Fact[T], Generic[T]):
    """Satisfied when either branch is. Mutation picks a branch at random."""

    def __init__(self, context: str, a: Fact[T], b: Fact[T]) -> None:
        self.context = context
        self.a = a
        self.b = b
        self.label = f"or({context})"

    def _reason(self, first: Check, second: Check) -> str:
        return (
            f"{self.context}: expected either one of the following conditions to be met:\n"
            f"  option 1: {list(first.errors)!r}\n"
            f"  option 2: {list(second.errors)!r}"
        )

    def check(self, obj: T) -> Check:
        first = self.a.check(obj)
        if first.is_ok():
            return first
        second = self.b.check(obj)
        if second.is_ok():
            return second
        return Check.fail(self._reason(first, second))

    def mutate(self, obj: T, g: Generator) -> T:
        first = self.a.check(obj)
        if first.is_ok():
            return obj
        second = self.b.check(obj)
        if second.is_ok():
            return obj
        branch = g.choose((self.a, self.b), self._reason(first, second))
        return branch.mutate(obj, g)

    def advance(self, obj: T) -> None:
        self.a.advance(obj)
        self.b.advance(obj)


class MappedFact(Fact[T], Generic[T]):
    """Choose the fact to apply based on the value itself.

    ``fn`` is called afresh for every check, mutation and advance, so any
    state held by the facts it returns does not survive between calls.
    """

    def __init__(self, label: str, fn: Callable[[T], Fact[T]]) -> None:
        self.label = f"mapped({label})"
        self.fn = fn

    def check(self, obj: T) -> Check:
        return self.fn(obj).check(obj).prefixed(f"{self.label} > ")

    def mutate(self, obj: T, g: Generator) -> T:
        return self.fn(obj).mutate(obj, g)

    def advance(self, obj: T) -> None:
        self.fn(obj).advance(obj)


def always() -> AlwaysFact[Any]:
    return AlwaysFact()


def never(reason: str) -> NeverFact[Any]:
    return NeverFact(reason)


def or_(context: str, a: Fact[T], b: Fact[T]) -> OrFact[T]:
    return OrFact(context, a, b)


def not_(context: str, inner: Fact[T], *, kind: Any = None) -> BruteFact[T]:
    """Negate ``inner``. Mutation can only brute-force, see :mod:`factlens.primitives.brute`."""

    def fn(obj: T) -> str | None:
        if inner.check(obj).is_ok():
            return f"{context}: expected NOT {inner.label}"
        return None

    return BruteFact(fn, kind=kind, label=f"not({context})")


def mapped(label: str, fn: Callable[[T], Fact[T]]) -> MappedFact[T]:
    return MappedFact(label, fn)
