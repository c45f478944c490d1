# SPDX-License-Identifier: MIT
"""Tests for the Generator entropy source and noise buffers."""

from __future__ import annotations

import pytest

from factlens import EmptyCandidates, Exhausted, Generator, MutationError, noise, random_generator


class TestBuildMode:
    """Tests for consuming entropy in build mode."""

    def test_bytes_consumes_in_order(self) -> None:
        g = Generator(b"\x01\x02\x03")
        assert g.bytes(2) == b"\x01\x02"
        assert g.remaining == 1
        assert g.bytes(1) == b"\x03"
        assert len(g) == 0

    def test_bytes_exhausted(self) -> None:
        g = Generator(b"\x01")
        with pytest.raises(Exhausted) as exc_info:
            g.bytes(2, "need two")

        assert exc_info.value.needed == 2
        assert exc_info.value.remaining == 1
        assert "need two" in exc_info.value.reason

    def test_exhausted_is_mutation_error(self) -> None:
        with pytest.raises(MutationError):
            Generator(b"").bytes(1)

    def test_bytes_negative_rejected(self) -> None:
        with pytest.raises(ValueError):
            Generator(b"\x00").bytes(-1)

    def test_int_in_range_single_value_consumes_nothing(self) -> None:
        g = Generator(b"\x09")
        assert g.int_in_range(5, 5) == 5
        assert g.remaining == 1

    def test_int_in_range_uses_modulo(self) -> None:
        assert Generator(b"\x0c").int_in_range(0, 9) == 2
        assert Generator(b"\xff").int_in_range(0, 255) == 255
        assert Generator(b"\x03").int_in_range(10, 12) == 10

    def test_int_in_range_wide_span_reads_more_bytes(self) -> None:
        g = Generator(b"\x01\x00\x07")
        assert g.int_in_range(0, 1000) == 256
        assert g.remaining == 1

    def test_int_in_range_empty(self) -> None:
        with pytest.raises(ValueError):
            Generator(b"\x00").int_in_range(3, 1)

    def test_choose(self) -> None:
        assert Generator(b"\x04").choose(["a", "b", "c"]) == "b"

    def test_choose_empty(self) -> None:
        with pytest.raises(EmptyCandidates):
            Generator(b"\x00").choose([], "nothing to pick")

    def test_set_returns_copy_of_target(self) -> None:
        target = [1, 2]
        result = Generator(b"").set([0], target, "reset")
        assert result == target
        assert result is not target

    def test_set_equal_keeps_original(self) -> None:
        obj = [1, 2]
        assert Generator(b"").set(obj, [1, 2]) is obj

    def test_unknown_mode(self) -> None:
        with pytest.raises(ValueError):
            Generator(b"", mode="replay")  # type: ignore[arg-type]


class TestCheckMode:
    """Tests for the check-only generator."""

    def test_checker_has_no_entropy(self) -> None:
        g = Generator.checker()
        assert g.is_checker
        assert g.mode == "check"
        assert g.remaining == 0

    def test_bytes_refused_with_reason(self) -> None:
        with pytest.raises(MutationError) as exc_info:
            Generator.checker().bytes(1, "wanted a byte")

        assert exc_info.value.reason == "wanted a byte"
        assert not isinstance(exc_info.value, Exhausted)

    def test_zero_bytes_allowed(self) -> None:
        assert Generator.checker().bytes(0) == b""

    def test_choose_refused_even_with_one_candidate(self) -> None:
        with pytest.raises(MutationError):
            Generator.checker().choose(["only"], "pick")

    def test_arbitrary_refused(self) -> None:
        with pytest.raises(MutationError) as exc_info:
            Generator.checker().arbitrary(int, "need an int")

        assert exc_info.value.reason == "need an int"

    def test_set_refused_when_different(self) -> None:
        g = Generator.checker()
        assert g.set(3, 3, "same") == 3
        with pytest.raises(MutationError) as exc_info:
            g.set(3, 4, "expected 3 == 4")

        assert exc_info.value.reason == "expected 3 == 4"

    def test_check_mode_ignores_buffer(self) -> None:
        g = Generator(b"\x00\x01\x02", mode="check")
        with pytest.raises(MutationError):
            g.bytes(1)

        assert g.remaining == 3


class TestNoise:
    """Tests for seeded noise buffers."""

    def test_same_seed_same_bytes(self) -> None:
        assert noise(64, seed=7) == noise(64, seed=7)

    def test_different_seeds_differ(self) -> None:
        assert noise(64, seed=7) != noise(64, seed=8)

    def test_size(self) -> None:
        assert len(noise(33, seed=1)) == 33
        assert noise(0, seed=1) == b""

    def test_negative_size(self) -> None:
        with pytest.raises(ValueError):
            noise(-1, seed=1)

    def test_default_size_from_settings(self) -> None:
        assert len(noise(seed=1)) == 1_000_000

    def test_random_generator(self) -> None:
        g = random_generator(32, seed=1)
        assert g.mode == "build"
        assert g.remaining == 32
        assert g.bytes(32) == noise(32, seed=1)
