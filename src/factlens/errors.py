# SPDX-License-Identifier: MIT
"""Exception hierarchy for factlens.

Only :class:`MutationError` and its subclasses are "soft": they travel up
through ``mutate`` calls and are turned into :class:`~factlens.check.Check`
data by ``check``. Everything else signals a misconfigured or unsatisfiable
fact and is meant to stop the caller.
"""

from __future__ import annotations

from collections.abc import Sequence


class FactError(Exception):
    """Base class for all factlens errors."""


class MutationError(FactError):
    """Raised when a mutation cannot proceed.

    In check-only mode this is how a fact reports a violation: the generator
    refuses to produce a different value and raises with the fact's reason.

    Attributes:
        reason: Human-readable description of what the mutation needed.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)


class Exhausted(MutationError):
    """Raised when the generator's entropy buffer runs out."""

    def __init__(self, reason: str = "", *, needed: int = 0, remaining: int = 0) -> None:
        self.needed = needed
        self.remaining = remaining
        detail = f"Ran out of entropy (needed {needed} bytes, {remaining} left). Try again with more bytes."
        if reason:
            detail = f"{detail} While: {reason}"
        super().__init__(detail)


class EmptyCandidates(MutationError):
    """Raised when asked to choose from an empty candidate sequence."""


class CheckError(FactError, AssertionError):
    """Raised by :meth:`Check.unwrap` when a check has violations.

    Attributes:
        errors: The violation messages, in order.
    """

    def __init__(self, errors: Sequence[str]) -> None:
        self.errors = tuple(errors)
        message = "Check failed:\n" + "\n".join(f"  - {e}" for e in self.errors)
        super().__init__(message)


class UnsatisfiableError(FactError):
    """Raised when ``satisfy`` cannot reach a passing value within its attempt bound.

    Attributes:
        attempts: Number of mutate/check rounds that were tried.
        errors: Violations reported by the last check.
    """

    def __init__(self, attempts: int, errors: Sequence[str]) -> None:
        self.attempts = attempts
        self.errors = tuple(errors)
        super().__init__(
            f"Could not satisfy a constraint even after {attempts} attempts. "
            f"Last check failure: {list(self.errors)!r}"
        )


class BruteForceExceeded(FactError):
    """Raised when a brute-force fact hits its iteration ceiling.

    Attributes:
        limit: The iteration ceiling that was exceeded.
        reason: The last failure reason reported by the predicate.
    """

    def __init__(self, limit: int, reason: str) -> None:
        self.limit = limit
        self.reason = reason
        super().__init__(
            f"Exceeded iteration limit of {limit} while attempting to meet a brute fact. "
            f"Last failure reason: {reason}"
        )


class FactSettingsError(ValueError):
    """Raised when factlens configuration is invalid."""
