# SPDX-License-Identifier: MIT
"""Entropy source for building and checking values.

A :class:`Generator` wraps a finite byte buffer and a cursor. In ``"build"``
mode it consumes bytes to synthesize values. In ``"check"`` mode it holds no
usable entropy and refuses to produce anything new: every request that would
change a value raises :class:`~factlens.errors.MutationError` with the
caller's reason instead. That is what lets ``Fact.check`` be a replay of
``Fact.mutate``.
"""

from __future__ import annotations

import copy
from collections.abc import Sequence
from typing import Any, Literal, TypeVar

import numpy as np

from .config import get_settings
from .errors import EmptyCandidates, Exhausted, MutationError

T = TypeVar("T")

GeneratorMode = Literal["build", "check"]


class Generator:
    """Byte cursor with a build/check mode flag.

    Create one per top-level ``build``/``satisfy`` call; do not share a
    generator between independent call chains.
    """

    __slots__ = ("_data", "_pos", "_mode")

    def __init__(self, data: bytes | bytearray | memoryview = b"", mode: GeneratorMode = "build") -> None:
        if mode not in ("build", "check"):
            raise ValueError(f"Unknown generator mode: {mode}")
        self._data = bytes(data)
        self._pos = 0
        self._mode: GeneratorMode = mode

    @classmethod
    def checker(cls) -> Generator:
        """A check-only generator with no entropy."""
        return cls(b"", mode="check")

    @property
    def mode(self) -> GeneratorMode:
        return self._mode

    @property
    def is_checker(self) -> bool:
        return self._mode == "check"

    @property
    def remaining(self) -> int:
        return len(self._data) - self._pos

    def __len__(self) -> int:
        return self.remaining

    def __repr__(self) -> str:
        return f"Generator(mode={self._mode!r}, remaining={self.remaining})"

    def _refuse(self, reason: str) -> None:
        if self.is_checker:
            raise MutationError(reason)

    def bytes(self, n: int, reason: str = "") -> bytes:
        """Consume and return the next ``n`` bytes.

        Raises:
            MutationError: In check mode.
            Exhausted: If fewer than ``n`` bytes remain.
        """
        if n < 0:
            raise ValueError(f"Cannot take a negative number of bytes: {n}")
        if n == 0:
            return b""
        self._refuse(reason)
        if self.remaining < n:
            raise Exhausted(reason, needed=n, remaining=self.remaining)
        chunk = self._data[self._pos : self._pos + n]
        self._pos += n
        return chunk

    def int_in_range(self, low: int, high: int, reason: str = "") -> int:
        """Draw an int in the inclusive range ``[low, high]``.

        Consumes only as many bytes as the width of the range needs; a
        single-value range consumes none.
        """
        if low > high:
            raise ValueError(f"Empty range: [{low}, {high}]")
        span = high - low
        if span == 0:
            return low
        width = (span.bit_length() + 7) // 8
        raw = int.from_bytes(self.bytes(width, reason), "big")
        return low + raw % (span + 1)

    def choose(self, candidates: Sequence[T], reason: str = "") -> T:
        """Pick one element of a non-empty ordered sequence.

        Raises:
            MutationError: In check mode.
            EmptyCandidates: If ``candidates`` is empty.
            Exhausted: If the buffer runs out.
        """
        self._refuse(reason)
        if len(candidates) == 0:
            raise EmptyCandidates(f"Cannot choose from an empty sequence. {reason}".strip())
        index = self.int_in_range(0, len(candidates) - 1, reason)
        return candidates[index]

    def arbitrary(self, kind: Any, reason: str = "") -> Any:
        """Draw an arbitrary instance of ``kind``. See :mod:`factlens.arbitrary`."""
        from .arbitrary import draw

        self._refuse(reason)
        return draw(self, kind, reason)

    def set(self, obj: T, target: T, reason: str = "") -> T:
        """Return ``target`` in place of ``obj``.

        If ``obj`` already equals ``target`` it is returned unchanged, in
        either mode. Otherwise check mode raises and build mode returns a
        copy of ``target``.
        """
        if obj == target:
            return obj
        self._refuse(reason)
        return copy.deepcopy(target)


def noise(size: int | None = None, seed: int | None = None) -> bytes:
    """Return a buffer of pseudo-random bytes.

    Args:
        size: Buffer length in bytes. Defaults to ``FactSettings.noise_size``.
        seed: Seed for numpy's default generator. Defaults to
            ``FactSettings.noise_seed``; None draws fresh OS entropy.
    """
    settings = get_settings()
    if size is None:
        size = settings.noise_size
    if seed is None:
        seed = settings.noise_seed
    if size < 0:
        raise ValueError(f"Noise size must be non-negative, got {size}")
    rng = np.random.default_rng(seed)
    return rng.bytes(size)


def random_generator(size: int | None = None, seed: int | None = None) -> Generator:
    """A build-mode generator over a fresh :func:`noise` buffer."""
    return Generator(noise(size, seed))
