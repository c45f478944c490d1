# SPDX-License-Identifier: MIT
"""The Fact abstraction and ordered composites.

A fact is a declarative constraint that can both verify a value (``check``)
and move an arbitrary value towards satisfying it (``mutate``). The default
``check`` is derived from ``mutate``: the mutation is replayed on a copy of
the value with a check-only :class:`~factlens.generator.Generator`, which
raises instead of changing anything, so the two can never drift apart.
"""

from __future__ import annotations

import copy
import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Generic, TypeVar

from .check import Check, concat
from .config import get_settings
from .errors import MutationError, UnsatisfiableError
from .generator import Generator

logger = logging.getLogger(__name__)

T = TypeVar("T")

EXHAUSTED_REASON = "Ran out of entropy. Try again with more bytes."


class Fact(ABC, Generic[T]):
    """Base class for all facts.

    Subclasses implement :meth:`mutate`, and override :meth:`advance` when they
    carry state across the items of a sequence. Overriding :meth:`check` is
    allowed as long as it stays equivalent to the derived form.
    """

    label: str = "fact"

    def check(self, obj: T) -> Check:
        """Verify ``obj`` without changing it."""
        g = Generator.checker()
        candidate = copy.deepcopy(obj)
        # Types without value equality only compare equal to themselves.
        by_value = candidate == obj
        try:
            replayed = self.mutate(candidate, g)
        except MutationError as exc:
            return Check.fail(exc.reason)
        changed = replayed != obj if by_value else replayed is not candidate
        if changed:
            return Check.fail(f"{self.label}: mutation would change {obj!r} into {replayed!r}")
        return Check.ok()

    @abstractmethod
    def mutate(self, obj: T, g: Generator) -> T:
        """Return a value that is no further from satisfying this fact than ``obj``.

        Raises:
            MutationError: When ``g`` is a checker and a change would be needed,
                or (as :class:`~factlens.errors.Exhausted`) when ``g`` runs dry.
        """

    def advance(self, obj: T) -> None:
        """Update internal state after ``obj`` has been produced or checked."""
        return None

    def satisfy(self, obj: T, g: Generator, *, attempts: int | None = None) -> T:
        """Mutate ``obj`` until it passes :meth:`check`.

        Args:
            obj: Starting value.
            g: Build-mode generator supplying entropy.
            attempts: Mutate/check rounds to try. Defaults to
                ``FactSettings.satisfy_attempts``.

        Returns:
            A value for which ``check`` is empty.

        Raises:
            ValueError: If ``attempts`` is less than 1.
            UnsatisfiableError: If no attempt produced a passing value.
            Exhausted: If ``g`` runs out of entropy.
        """
        if attempts is None:
            attempts = get_settings().satisfy_attempts
        if attempts < 1:
            raise ValueError(f"attempts must be at least 1, got {attempts}")
        last_failure: tuple[str, ...] = ()
        for attempt in range(1, attempts + 1):
            obj = self.mutate(obj, g)
            check = self.check(obj)
            if check.is_ok():
                return obj
            last_failure = check.errors
            logger.debug("%s: satisfy attempt %d/%d failed: %s", self.label, attempt, attempts, list(last_failure))
        logger.warning("%s: giving up after %d attempts", self.label, attempts)
        raise UnsatisfiableError(attempts, last_failure)

    def build(self, g: Generator, kind: Any) -> T:
        """Draw an arbitrary ``kind`` and :meth:`satisfy` it."""
        obj = g.arbitrary(kind, EXHAUSTED_REASON)
        return self.satisfy(obj, g)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.label!r})"


class Facts(Fact[T]):
    """An ordered collection of facts acting as one.

    ``check`` concatenates every member's check (all must pass). ``mutate``
    folds left to right, each member receiving the previous member's output,
    so order matters: a brute-force member resamples the whole value and can
    undo what earlier members did, so place brute facts first. ``advance`` is
    broadcast to every member.
    """

    label = "facts"

    def __init__(self, members: Iterable[Fact[T]] = ()) -> None:
        self.members: list[Fact[T]] = list(members)

    def check(self, obj: T) -> Check:
        return concat(f.check(obj) for f in self.members)

    def mutate(self, obj: T, g: Generator) -> T:
        for f in self.members:
            obj = f.mutate(obj, g)
        return obj

    def advance(self, obj: T) -> None:
        for f in self.members:
            f.advance(obj)

    def append(self, fact: Fact[T]) -> None:
        self.members.append(fact)

    def __iter__(self) -> Iterator[Fact[T]]:
        return iter(self.members)

    def __len__(self) -> int:
        return len(self.members)

    def __repr__(self) -> str:
        return f"Facts({self.members!r})"


def facts(*members: Fact[T] | Sequence[Fact[T]]) -> Facts[T]:
    """Compose facts in order. Nested lists/tuples become nested composites."""
    flat: list[Fact[T]] = []
    for member in members:
        if isinstance(member, Fact):
            flat.append(member)
        elif isinstance(member, (list, tuple)):
            flat.append(facts(*member))
        else:
            raise TypeError(f"Expected a Fact or a list of Facts, got {type(member).__name__}")
    return Facts(flat)


def build_seq(g: Generator, n: int, fact: Fact[T], kind: Any) -> list[T]:
    """Build ``n`` successive values, advancing ``fact`` after each one."""
    seq: list[T] = []
    for _ in range(n):
        obj = fact.build(g, kind)
        fact.advance(obj)
        seq.append(obj)
    return seq


def check_seq(seq: Iterable[T], fact: Fact[T]) -> Check:
    """Check successive values, advancing ``fact`` after each one."""
    checks: list[Check] = []
    for i, obj in enumerate(seq):
        checks.append(fact.check(obj).prefixed(f"item {i}: "))
        fact.advance(obj)
    return concat(checks)
