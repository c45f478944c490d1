# SPDX-License-Identifier: MIT
"""Lift a fact about each of zero or more sub-parts into a fact about the whole."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, Generic, TypeVar

from ..check import Check, concat
from ..fact import Fact
from ..generator import Generator
from .access import rebuild_sequence

O = TypeVar("O")
T = TypeVar("T")

TraverseFn = Callable[[Any], Sequence[Any]]
WriteBackFn = Callable[[Any, list[Any]], Any]


class OpticalFact(Fact[O], Generic[O, T]):
    """Applies ``inner`` to every part produced by ``getter``.

    Every part is mutated from the original whole's projection, in traversal
    order, and written back at once with ``setter(whole, parts)``. No part
    sees a sibling's mutated value.
    """

    def __init__(self, label: str, getter: TraverseFn, setter: WriteBackFn, inner: Fact[T]) -> None:
        self.label = label
        self.getter = getter
        self.setter = setter
        self.inner = inner

    def _part_label(self, index: int, count: int) -> str:
        if count > 1:
            return f"{self.label}[{index}]"
        return self.label

    def check(self, obj: O) -> Check:
        parts = list(self.getter(obj))
        return concat(
            self.inner.check(part).prefixed(f"lens({self._part_label(i, len(parts))}) > ")
            for i, part in enumerate(parts)
        )

    def mutate(self, obj: O, g: Generator) -> O:
        parts = [self.inner.mutate(part, g) for part in self.getter(obj)]
        return self.setter(obj, parts)

    def advance(self, obj: O) -> None:
        for part in self.getter(obj):
            self.inner.advance(part)


def optical(label: str, getter: TraverseFn, setter: WriteBackFn, inner: Fact[Any]) -> OpticalFact[Any, Any]:
    return OpticalFact(label, getter, setter, inner)


def each(label: str, inner: Fact[Any]) -> OpticalFact[Any, Any]:
    """Optical over every element of a list or tuple whole."""
    return OpticalFact(label, list, rebuild_sequence, inner)
