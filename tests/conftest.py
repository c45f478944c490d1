# SPDX-License-Identifier: MIT
"""Pytest configuration and shared fixtures for the factlens test suite.

This module provides:
- Deterministic test environment setup
- Settings isolation between tests
- Seeded generator fixtures
"""
from __future__ import annotations

import os
from collections.abc import Callable, Iterator

import pytest

from factlens import Generator, random_generator
from factlens.config import CONFIG_ENV_VAR, reset_settings

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

NOISE_SIZE = 100_000
DEFAULT_SEED = 20240917


# ---------------------------------------------------------------------------
# Environment Setup
# ---------------------------------------------------------------------------


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest environment for determinism.

    Sets environment variables to ensure reproducible test execution.
    """
    deterministic_env = {
        "LC_ALL": "C",
        "LANG": "C",
        "TZ": "UTC",
        "PYTHONHASHSEED": "0",
    }
    for key, value in deterministic_env.items():
        os.environ.setdefault(key, value)


# ---------------------------------------------------------------------------
# Fixtures: Settings
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Run every test against default settings unless it opts in to a file."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    reset_settings()
    yield
    reset_settings()


# ---------------------------------------------------------------------------
# Fixtures: Generators
# ---------------------------------------------------------------------------


@pytest.fixture
def make_generator() -> Callable[..., Generator]:
    """Factory for seeded build-mode generators.

    Usage:
        def test_something(make_generator):
            g = make_generator(seed=3)
    """

    def factory(seed: int = DEFAULT_SEED, size: int = NOISE_SIZE) -> Generator:
        return random_generator(size=size, seed=seed)

    return factory


@pytest.fixture
def generator(make_generator: Callable[..., Generator]) -> Generator:
    """A seeded build-mode generator with plenty of entropy."""
    return make_generator()
