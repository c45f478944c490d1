# SPDX-License-Identifier: MIT
"""Set membership facts."""

from __future__ import annotations

import copy
from collections.abc import Iterable, Sequence
from typing import Generic, TypeVar

from ..fact import Fact
from ..generator import Generator

T = TypeVar("T")


class InSliceFact(Fact[T], Generic[T]):
    """The value must be one of a fixed, non-empty list of candidates."""

    def __init__(self, candidates: Sequence[T], *, context: str) -> None:
        if len(candidates) == 0:
            raise ValueError(f"{context}: candidate set must not be empty")
        self.candidates = tuple(candidates)
        self.context = context
        self.label = f"in_slice({context})"

    def mutate(self, obj: T, g: Generator) -> T:
        if obj in self.candidates:
            return obj
        reason = f"{self.context}: expected {obj!r} to be contained in {list(self.candidates)!r}"
        return copy.deepcopy(g.choose(self.candidates, reason))


def in_slice(candidates: Sequence[T], context: str = "in_slice") -> InSliceFact[T]:
    """The value must be contained in ``candidates``."""
    return InSliceFact(candidates, context=context)


def in_iter(items: Iterable[T], context: str = "in_iter") -> InSliceFact[T]:
    """Like :func:`in_slice`, collecting the candidates from any iterable."""
    return InSliceFact(list(items), context=context)
