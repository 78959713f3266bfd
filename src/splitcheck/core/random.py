"""A purely functional, splittable random-number generator.

Implements the portable combined generator of L'Ecuyer for 32-bit machines,
as shipped with Hugs' ``System.Random``. Its period is roughly 2.30584e18.

Every operation takes a :class:`GeneratorState` and returns a new one; no
state is ever mutated, so states may be shared freely between threads and
replayed at will.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from splitcheck.utils.digits import digit_count
from splitcheck.utils.exceptions import InvalidRangeError, InvalidStateError

# Moduli of the two component generators, less one.
S1_MAX = 2147483562
S2_MAX = 2147483398

# Base used when accumulating draws: one less than the largest value of ``random_next``.
DRAW_BASE = 2147483561

LONG_MIN = -(1 << 63)
LONG_MAX = (1 << 63) - 1

# Bounds for float sampling, far beyond double mantissa precision.
MIN_BOUND = -(1 << 62)
MAX_BOUND = (1 << 62) - 1
LONG_RANGE = MAX_BOUND - MIN_BOUND


@dataclass(frozen=True)
class GeneratorState:
    """Immutable pair of sub-seeds for the two component generators.

    Attributes:
        s1: First sub-seed, in ``[1, 2147483562]``.
        s2: Second sub-seed, in ``[1, 2147483398]``.
    """

    s1: int
    s2: int

    def __post_init__(self) -> None:
        if not 1 <= self.s1 <= S1_MAX:
            raise InvalidStateError(f"s1 must be in [1, {S1_MAX}], got {self.s1}")
        if not 1 <= self.s2 <= S2_MAX:
            raise InvalidStateError(f"s2 must be in [1, {S2_MAX}], got {self.s2}")


def make_generator(seed: int) -> GeneratorState:
    """Make a generator state from an integer seed.

    Only the magnitude of ``seed`` matters: ``seed`` and ``-seed`` give the
    same state.
    """
    if seed < 0:
        seed = -seed
    q = seed // S1_MAX
    s1 = seed % S1_MAX
    s2 = q % S2_MAX
    return GeneratorState(s1 + 1, s2 + 1)


def random_next(state: GeneratorState) -> tuple[int, GeneratorState]:
    """Yield an integer in ``[1, 2147483562]`` and the advanced state."""
    s1, s2 = state.s1, state.s2
    k = s1 // 53668
    k2 = s2 // 52774
    s1 = 40014 * (s1 - k * 53668) - k * 12211
    s2 = 40692 * (s2 - k2 * 52774) - k2 * 3791
    if s1 < 0:
        s1 += 2147483563
    if s2 < 0:
        s2 += 2147483399
    z = s1 - s2
    if z < 1:
        z += S1_MAX
    return z, GeneratorState(s1, s2)


def random_split(state: GeneratorState) -> tuple[GeneratorState, GeneratorState]:
    """Split a state into two children.

    Consumes one step of the parent. The children share no sub-seed pair and
    their streams diverge after a few draws.
    """
    new_s1 = 1 if state.s1 == S1_MAX else state.s1 + 1
    new_s2 = S2_MAX if state.s2 == 1 else state.s2 - 1
    _, nxt = random_next(state)
    return GeneratorState(new_s1, nxt.s2), GeneratorState(nxt.s1, new_s2)


def random_in_range(state: GeneratorState, low: int, high: int) -> tuple[int, GeneratorState]:
    """Yield an integer from ``low`` to ``high`` inclusive, and the advanced state.

    Accumulates enough draws to cover ``DRAW_BASE ** n >= high - low + 1`` and
    reduces modulo the range size. Works for ranges of any width.

    Raises:
        InvalidRangeError: If ``high < low``.
    """
    if high < low:
        raise InvalidRangeError(f"high ({high}) must not be less than low ({low})")
    k = high - low + 1
    acc = low
    for _ in range(digit_count(DRAW_BASE, k)):
        x, state = random_next(state)
        acc = acc * DRAW_BASE + x
    return low + acc % k, state


random_bigint = random_in_range


def random_long(state: GeneratorState, low: int, high: int) -> tuple[int, GeneratorState]:
    """Like :func:`random_in_range` for bounds within the signed 64-bit range."""
    for name, bound in (("low", low), ("high", high)):
        if not LONG_MIN <= bound <= LONG_MAX:
            raise InvalidRangeError(f"{name} ({bound}) is outside the 64-bit range")
    return random_in_range(state, low, high)


def random_double(
    state: GeneratorState, low: float, high: float
) -> tuple[float, GeneratorState]:
    """Yield a float from ``low`` to ``high`` inclusive, and the advanced state.

    The draw is centred on the midpoint and scaled by the half-width, so
    ``low == high`` returns ``low`` and symmetric intervals stay symmetric.

    Raises:
        InvalidRangeError: If a bound is not finite or ``high < low``.
    """
    try:
        low = float(low)
        high = float(high)
    except OverflowError as exc:
        raise InvalidRangeError(f"bounds must be representable as floats: {exc}") from exc
    if not (math.isfinite(low) and math.isfinite(high)):
        raise InvalidRangeError(f"bounds must be finite, got [{low}, {high}]")
    if high < low:
        raise InvalidRangeError(f"high ({high}) must not be less than low ({low})")
    x, state = random_in_range(state, MIN_BOUND, MAX_BOUND)
    mid = (low + high) / 2
    if math.isinf(mid):
        mid = low / 2 + high / 2
    scale = (high - low) / LONG_RANGE
    if math.isinf(scale):
        scale = (high / 2 - low / 2) / (LONG_RANGE / 2)
    scaled = mid + scale * x
    # Rounding in the last ulp can leave the interval.
    return min(max(scaled, low), high), state
