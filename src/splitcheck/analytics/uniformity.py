"""Diagnostics over streams drawn from a generator state.

These are sanity checks for reproducibility and gross bias, not a
statistical test suite.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from splitcheck.core.random import (
    GeneratorState,
    random_double,
    random_long,
    random_next,
    random_split,
)
from splitcheck.utils.exceptions import InvalidRangeError


@dataclass(frozen=True)
class StreamSummary:
    """Summary statistics of a batch of draws."""

    count: int
    minimum: float
    maximum: float
    mean: float
    std: float


def draw_array(
    state: GeneratorState, count: int, low: int, high: int
) -> tuple[NDArray[np.int64], GeneratorState]:
    """Draw ``count`` 64-bit integers in ``[low, high]``.

    Returns:
        Tuple of the ``int64`` array and the state after the last draw.
    """
    values = np.empty(count, dtype=np.int64)
    for i in range(count):
        values[i], state = random_long(state, low, high)
    return values, state


def draw_doubles(
    state: GeneratorState, count: int, low: float, high: float
) -> tuple[NDArray[np.float64], GeneratorState]:
    """Draw ``count`` floats in ``[low, high]``."""
    values = np.empty(count, dtype=np.float64)
    for i in range(count):
        values[i], state = random_double(state, low, high)
    return values, state


def bucket_counts(
    values: NDArray[Any], low: float, high: float, n_buckets: int = 10
) -> NDArray[np.int64]:
    """Count values falling in ``n_buckets`` equal-width buckets over ``[low, high]``.

    The upper bound lands in the last bucket.
    """
    if n_buckets < 1:
        raise ValueError(f"n_buckets must be at least 1, got {n_buckets}")
    if high < low:
        raise InvalidRangeError(f"high ({high}) must not be less than low ({low})")
    counts, _ = np.histogram(
        np.asarray(values, dtype=np.float64), bins=n_buckets, range=(float(low), float(high))
    )
    return counts.astype(np.int64)


def chi_square_statistic(counts: NDArray[Any]) -> float:
    """Pearson chi-square statistic of ``counts`` against a uniform expectation.

    For ``n`` buckets the statistic of a uniform source hovers around
    ``n - 1``.
    """
    observed = np.asarray(counts, dtype=np.float64)
    total = observed.sum()
    if total == 0:
        return 0.0
    expected = total / observed.size
    return float(((observed - expected) ** 2 / expected).sum())


def split_divergence(state: GeneratorState, n_steps: int) -> int:
    """Count positions where the streams of the two split children differ.

    Runs ``n_steps`` draws from each child of ``random_split(state)``; a
    healthy split differs at nearly every position.
    """
    left, right = random_split(state)
    differing = 0
    for _ in range(n_steps):
        a, left = random_next(left)
        b, right = random_next(right)
        if a != b:
            differing += 1
    return differing


def summarize(values: NDArray[Any]) -> StreamSummary:
    """Min, max, mean, and standard deviation of a batch of draws."""
    arr = np.asarray(values, dtype=np.float64)
    if arr.size == 0:
        raise ValueError("cannot summarize an empty batch")
    return StreamSummary(
        count=int(arr.size),
        minimum=float(arr.min()),
        maximum=float(arr.max()),
        mean=float(arr.mean()),
        std=float(arr.std()),
    )
