# SPDX-License-Identifier: MIT
"""Predicate facts satisfied by brute-force resampling.

Mutation can do no better than drawing whole new arbitrary values until the
predicate holds, so these facts only make sense when the predicate is not
unlikely to hold for arbitrary data, e.g. when requiring a particular variant
of a union.

Place brute facts at the beginning of a :class:`~factlens.fact.Facts`
pipeline. Resampling throws the whole value away, which can undo constraints
met by earlier members. Combining two different brute facts on the same value
is rarely a good idea either.

There is a fixed iteration ceiling (``FactSettings.brute_iteration_limit``);
going past it raises :class:`~factlens.errors.BruteForceExceeded`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from ..config import get_settings
from ..errors import BruteForceExceeded
from ..fact import Fact
from ..generator import Generator

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Returns None when satisfied, otherwise the reason for failure.
BruteFn = Callable[[Any], "str | None"]


class BruteFact(Fact[T], Generic[T]):
    def __init__(self, fn: BruteFn, *, kind: Any = None, label: str = "brute") -> None:
        self.fn = fn
        self.kind = kind
        self.label = label

    def mutate(self, obj: T, g: Generator) -> T:
        kind = self.kind if self.kind is not None else type(obj)
        limit = get_settings().brute_iteration_limit
        last_reason = ""
        for _ in range(limit + 1):
            reason = self.fn(obj)
            if reason is None:
                return obj
            last_reason = reason
            obj = g.arbitrary(kind, reason)
        logger.warning("%s: exceeded iteration limit of %d", self.label, limit)
        raise BruteForceExceeded(limit, last_reason)


def brute(reason: str, predicate: Callable[[T], bool], *, kind: Any = None) -> BruteFact[T]:
    """A fact defined by a predicate, reporting ``reason`` when it fails.

    Args:
        reason: Violation message used when ``predicate`` is false.
        predicate: Returns True for acceptable values.
        kind: Kind to resample from. Defaults to the type of the value being
            mutated, which cannot switch between members of a union; pass the
            union itself in that case.
    """
    return BruteFact(lambda obj: None if predicate(obj) else reason, kind=kind, label=f"brute({reason})")


def brute_labeled(fn: Callable[[T], str | None], *, kind: Any = None, label: str = "brute_labeled") -> BruteFact[T]:
    """A version of :func:`brute` whose callable returns the failure reason itself (or None)."""
    return BruteFact(fn, kind=kind, label=label)
