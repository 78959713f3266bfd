"""Shared test fixtures."""

from __future__ import annotations

import pytest

from splitcheck.core.random import GeneratorState, make_generator


@pytest.fixture
def state() -> GeneratorState:
    """Deterministic generator state for tests."""
    return make_generator(42)


@pytest.fixture
def seeds() -> list[int]:
    """A spread of seeds, including values past both sub-seed moduli."""
    return [0, 1, 7, 42, 2147483561, 2147483562, 2**40 + 3, 2**64 + 11, -99]
