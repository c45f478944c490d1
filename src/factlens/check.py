# SPDX-License-Identifier: MIT
"""Aggregated verification result."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from .errors import CheckError, MutationError


@dataclass(frozen=True, slots=True)
class Check:
    """Ordered list of violation messages. Empty means the fact is satisfied.

    Checks compose with ``+`` (logical AND over sibling facts) and
    :meth:`map` (prefixing path labels when a check is lifted through a
    lens, prism or optical).

    Attributes:
        errors: Violation messages in the order they were found.
    """

    errors: tuple[str, ...] = ()

    @classmethod
    def ok(cls) -> Check:
        return cls()

    @classmethod
    def fail(cls, *messages: str) -> Check:
        return cls(tuple(messages))

    @classmethod
    def of(cls, messages: Iterable[str]) -> Check:
        return cls(tuple(messages))

    @classmethod
    def from_result(cls, fn: Callable[[], Any]) -> Check:
        """Run ``fn`` and turn a raised :class:`MutationError` into a single violation."""
        try:
            fn()
        except MutationError as exc:
            return cls.fail(exc.reason)
        return cls.ok()

    def is_ok(self) -> bool:
        return not self.errors

    def result(self) -> list[str] | None:
        """Return ``None`` when satisfied, otherwise the list of violations."""
        if self.is_ok():
            return None
        return list(self.errors)

    def unwrap(self) -> None:
        """Raise :class:`CheckError` if there are any violations."""
        if self.errors:
            raise CheckError(self.errors)

    def map(self, fn: Callable[[str], str]) -> Check:
        return Check(tuple(fn(e) for e in self.errors))

    def prefixed(self, prefix: str) -> Check:
        return self.map(lambda e: f"{prefix}{e}")

    def __add__(self, other: Check) -> Check:
        if not isinstance(other, Check):
            return NotImplemented
        return Check(self.errors + other.errors)

    def __iter__(self) -> Iterator[str]:
        return iter(self.errors)

    def __len__(self) -> int:
        return len(self.errors)


def concat(checks: Iterable[Check]) -> Check:
    """Concatenate checks in order (all must pass)."""
    errors: list[str] = []
    for check in checks:
        errors.extend(check.errors)
    return Check(tuple(errors))
