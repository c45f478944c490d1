# SPDX-License-Identifier: MIT
"""Tests for primitive facts: equality, membership, brute force, lambdas and logic."""

from __future__ import annotations

import logging

import pytest

from factlens import (
    BruteForceExceeded,
    Generator,
    MutationError,
    always,
    brute,
    brute_labeled,
    check_seq,
    eq,
    in_iter,
    in_slice,
    mapped,
    ne,
    never,
    not_,
    or_,
    stateful,
    stateless,
)


class TestEquality:
    """Tests for eq and ne."""

    def test_eq_check(self) -> None:
        assert eq(3).check(3).is_ok()
        assert eq(3, "count").check(4).errors == ("count: expected 4 == 3",)

    def test_eq_mutate_consumes_no_entropy(self) -> None:
        g = Generator(b"")
        assert eq("hello").mutate("bye", g) == "hello"

    def test_eq_label(self) -> None:
        assert eq(1, "id").label == "eq(id)"

    def test_ne_check(self) -> None:
        assert ne(0).check(1).is_ok()
        assert ne(0).check(0).errors == ("ne: expected 0 != 0",)

    def test_ne_mutate_keeps_different_value(self) -> None:
        assert ne(0).mutate(5, Generator(b"")) == 5

    def test_ne_mutate_redraws(self, generator: Generator) -> None:
        value = ne(0).mutate(0, generator)
        assert isinstance(value, int)
        assert value != 0

    def test_ne_with_explicit_kind(self) -> None:
        g = Generator(b"\x00\x01")
        assert ne(False, kind=bool).mutate(False, g) is True

    def test_ne_gives_up_on_tiny_domain(self) -> None:
        g = Generator(b"\x00" * 200)
        with pytest.raises(BruteForceExceeded) as exc_info:
            ne(False, kind=bool).mutate(False, g)

        assert exc_info.value.limit == 100


class TestMembership:
    """Tests for in_slice and in_iter."""

    def test_check(self) -> None:
        fact = in_slice([1, 2, 3])
        assert fact.check(2).is_ok()
        assert fact.check(4).errors == ("in_slice: expected 4 to be contained in [1, 2, 3]",)

    def test_mutate_picks_member(self, generator: Generator) -> None:
        fact = in_slice(["a", "b"], "letter")
        for _ in range(10):
            assert fact.mutate("z", generator) in ("a", "b")

    def test_mutate_keeps_member(self) -> None:
        assert in_slice([1, 2, 3]).mutate(3, Generator(b"")) == 3

    def test_mutate_returns_copy(self) -> None:
        candidate = [1]
        result = in_slice([candidate]).mutate([], Generator(b"\x00"))
        assert result == [1]
        assert result is not candidate

    def test_empty_candidates_rejected(self) -> None:
        with pytest.raises(ValueError):
            in_slice([])

    def test_in_iter(self) -> None:
        fact = in_iter(range(3))
        assert fact.check(2).is_ok()
        assert fact.mutate(7, Generator(b"\x04")) == 1


class TestBrute:
    """Tests for brute and brute_labeled."""

    def test_check(self) -> None:
        fact = brute("must be even", lambda x: x % 2 == 0)
        assert fact.check(4).is_ok()
        assert fact.check(5).errors == ("must be even",)
        assert fact.label == "brute(must be even)"

    def test_mutate_resamples(self, generator: Generator) -> None:
        value = brute("must be even", lambda x: x % 2 == 0).mutate(5, generator)
        assert value % 2 == 0

    def test_satisfied_value_is_kept(self) -> None:
        assert brute("positive", lambda x: x > 0).mutate(9, Generator(b"")) == 9

    def test_labeled_reports_its_own_reason(self) -> None:
        fact = brute_labeled(lambda x: None if x < 10 else f"{x} is too big")
        assert fact.check(3).is_ok()
        assert fact.check(12).errors == ("12 is too big",)

    def test_iteration_limit(self, generator: Generator, caplog: pytest.LogCaptureFixture) -> None:
        fact = brute("impossible", lambda x: False, kind=int)
        with caplog.at_level(logging.WARNING, logger="factlens.primitives.brute"):
            with pytest.raises(BruteForceExceeded) as exc_info:
                fact.build(generator, int)

        assert exc_info.value.limit == 100
        assert exc_info.value.reason == "impossible"
        assert "Exceeded iteration limit of 100" in str(exc_info.value)
        assert "exceeded iteration limit" in caplog.text

    def test_iteration_limit_is_not_a_mutation_error(self, generator: Generator) -> None:
        with pytest.raises(BruteForceExceeded) as exc_info:
            brute("impossible", lambda x: False).mutate(0, generator)

        assert not isinstance(exc_info.value, MutationError)


class TestLambdas:
    """Tests for stateless and stateful lambda facts."""

    def test_stateless(self) -> None:
        fact = stateless("non-negative", lambda g, x: g.set(x, max(x, 0), f"expected {x} >= 0"))
        assert fact.check(3).is_ok()
        assert fact.check(-3).errors == ("expected -3 >= 0",)
        assert fact.mutate(-3, Generator(b"")) == 0

    def test_stateful_tracks_running_floor(self) -> None:
        fact = stateful(
            "monotonic",
            0,
            lambda g, floor, x: g.set(x, max(x, floor), f"expected {x} >= {floor}"),
            advance=lambda floor, x: x,
        )
        check = check_seq([1, 3, 2, 5], fact)
        assert check.errors == ("item 2: expected 2 >= 3",)

    def test_state_only_changes_in_advance(self) -> None:
        fact = stateful("counter", 0, lambda g, n, x: g.set(x, n, "expected counter"), advance=lambda n, x: n + 1)
        fact.check(0)
        fact.mutate(5, Generator(b""))
        assert fact.state == 0
        fact.advance(0)
        assert fact.state == 1

    def test_without_advance_state_is_fixed(self) -> None:
        fact = stateful("fixed", 4, lambda g, n, x: g.set(x, n, "expected 4"))
        fact.advance(4)
        assert fact.state == 4


class TestLogic:
    """Tests for always, never, or_, not_ and mapped."""

    def test_always(self, generator: Generator) -> None:
        assert always().check(object()).is_ok()
        assert always().mutate(5, generator) == 5

    def test_never_check(self) -> None:
        assert never("impossible").check(1).errors == ("impossible",)

    def test_never_mutate_leaves_value(self) -> None:
        assert never("impossible").mutate(1, Generator(b"")) == 1

    def test_or_check(self) -> None:
        fact = or_("small", eq(1), eq(2))
        assert fact.check(1).is_ok()
        assert fact.check(2).is_ok()

        errors = fact.check(3).errors
        assert len(errors) == 1
        assert errors[0].startswith("small: expected either one of the following conditions to be met:")
        assert "eq: expected 3 == 1" in errors[0]
        assert "eq: expected 3 == 2" in errors[0]

    def test_or_mutate(self, generator: Generator) -> None:
        fact = or_("small", eq(1), eq(2))
        seen = {fact.mutate(3, generator) for _ in range(40)}
        assert seen == {1, 2}

    def test_or_keeps_valid_value(self) -> None:
        assert or_("small", eq(1), eq(2)).mutate(2, Generator(b"")) == 2

    def test_not(self, generator: Generator) -> None:
        fact = not_("nonzero", eq(0), kind=int)
        assert fact.check(5).is_ok()
        assert fact.check(0).errors == ("nonzero: expected NOT eq(eq)",)
        assert fact.build(generator, int) != 0

    def test_mapped(self) -> None:
        fact = mapped("parity", lambda x: eq(0) if x % 2 == 0 else eq(1))
        assert fact.check(0).is_ok()
        assert fact.check(1).is_ok()
        assert fact.check(4).errors == ("mapped(parity) > eq: expected 4 == 0",)

        g = Generator(b"")
        assert fact.mutate(4, g) == 0
        assert fact.mutate(7, g) == 1
