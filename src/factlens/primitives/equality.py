# SPDX-License-Identifier: MIT
"""Equality and inequality facts."""

from __future__ import annotations

import logging
from typing import Any, Generic, TypeVar

from ..config import get_settings
from ..errors import BruteForceExceeded
from ..fact import Fact
from ..generator import Generator

logger = logging.getLogger(__name__)

T = TypeVar("T")


class EqFact(Fact[T], Generic[T]):
    """Require a value to equal (or differ from) a constant.

    In equality mode ``mutate`` overwrites the value with the constant and
    consumes no entropy. In inequality mode it redraws arbitrary values of
    ``kind`` (default: the type of the value at hand) until one differs from
    the constant.
    """

    def __init__(self, constant: T, *, context: str, equal: bool = True, kind: Any = None) -> None:
        self.constant = constant
        self.context = context
        self.equal = equal
        self.kind = kind
        self.label = f"{'eq' if equal else 'ne'}({context})"

    def mutate(self, obj: T, g: Generator) -> T:
        if self.equal:
            return g.set(obj, self.constant, f"{self.context}: expected {obj!r} == {self.constant!r}")

        if obj != self.constant:
            return obj
        reason = f"{self.context}: expected {obj!r} != {self.constant!r}"
        kind = self.kind if self.kind is not None else type(obj)
        limit = get_settings().brute_iteration_limit
        for _ in range(limit):
            obj = g.arbitrary(kind, reason)
            if obj != self.constant:
                return obj
        logger.warning("%s: could not draw a value different from %r", self.label, self.constant)
        raise BruteForceExceeded(limit, reason)


def eq(constant: T, context: str = "eq") -> EqFact[T]:
    """The value must equal ``constant``."""
    return EqFact(constant, context=context, equal=True)


def ne(constant: T, context: str = "ne", *, kind: Any = None) -> EqFact[T]:
    """The value must not equal ``constant``."""
    return EqFact(constant, context=context, equal=False, kind=kind)
