"""Tests for the splittable L'Ecuyer generator."""

from __future__ import annotations

import dataclasses
import math

import pytest

from splitcheck.core.random import (
    LONG_MAX,
    LONG_MIN,
    S1_MAX,
    S2_MAX,
    GeneratorState,
    make_generator,
    random_bigint,
    random_double,
    random_in_range,
    random_long,
    random_next,
    random_split,
)
from splitcheck.utils.exceptions import InvalidRangeError, InvalidStateError


class TestMakeGenerator:
    def test_zero_seed(self) -> None:
        assert make_generator(0) == GeneratorState(1, 1)

    def test_small_seed(self) -> None:
        assert make_generator(5) == GeneratorState(6, 1)

    def test_seed_past_first_modulus(self) -> None:
        assert make_generator(S1_MAX) == GeneratorState(1, 2)
        assert make_generator(S1_MAX * 3 + 4) == GeneratorState(5, 4)

    def test_negative_seed_equivalence(self, seeds: list[int]) -> None:
        for seed in seeds:
            assert make_generator(seed) == make_generator(-seed)

    def test_huge_seed_in_bounds(self) -> None:
        state = make_generator(10**40 + 17)
        assert 1 <= state.s1 <= S1_MAX
        assert 1 <= state.s2 <= S2_MAX

    def test_deterministic(self, seeds: list[int]) -> None:
        for seed in seeds:
            assert make_generator(seed) == make_generator(seed)


class TestGeneratorState:
    def test_immutable(self) -> None:
        state = GeneratorState(1, 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            state.s1 = 2  # type: ignore[misc]

    def test_hashable(self) -> None:
        assert len({GeneratorState(3, 4), GeneratorState(3, 4)}) == 1

    @pytest.mark.parametrize("s1,s2", [(0, 1), (1, 0), (S1_MAX + 1, 1), (1, S2_MAX + 1)])
    def test_out_of_range_rejected(self, s1: int, s2: int) -> None:
        with pytest.raises(InvalidStateError):
            GeneratorState(s1, s2)


class TestRandomNext:
    def test_golden_vector(self) -> None:
        """Pinned output of the combined generator from state (1, 1)."""
        value, nxt = random_next(GeneratorState(1, 1))
        assert value == 2147482884
        assert nxt == GeneratorState(40014, 40692)

    def test_golden_second_step(self) -> None:
        _, nxt = random_next(GeneratorState(1, 1))
        value, nxt2 = random_next(nxt)
        # 40014 * 40014 = 1601120196; 40692 * 40692 = 1655838864.
        assert nxt2 == GeneratorState(1601120196, 1655838864)
        assert value == 1601120196 - 1655838864 + S1_MAX

    def test_does_not_mutate_input(self, state: GeneratorState) -> None:
        before = GeneratorState(state.s1, state.s2)
        random_next(state)
        assert state == before

    def test_deterministic(self, state: GeneratorState) -> None:
        assert random_next(state) == random_next(state)

    def test_values_and_states_in_bounds(self, seeds: list[int]) -> None:
        for seed in seeds:
            state = make_generator(seed)
            for _ in range(500):
                value, state = random_next(state)
                assert 1 <= value <= S1_MAX
                assert 1 <= state.s1 <= S1_MAX
                assert 1 <= state.s2 <= S2_MAX

    def test_extreme_states(self) -> None:
        for state in (GeneratorState(S1_MAX, S2_MAX), GeneratorState(S1_MAX, 1)):
            value, nxt = random_next(state)
            assert 1 <= value <= S1_MAX
            assert nxt != state


class TestRandomSplit:
    def test_golden_split(self) -> None:
        left, right = random_split(GeneratorState(1, 1))
        assert left == GeneratorState(2, 40692)
        assert right == GeneratorState(40014, S2_MAX)

    def test_wraparound(self) -> None:
        left, right = random_split(GeneratorState(S1_MAX, 1))
        assert left.s1 == 1
        assert right.s2 == S2_MAX

    def test_deterministic(self, state: GeneratorState) -> None:
        assert random_split(state) == random_split(state)

    def test_children_diverge(self, seeds: list[int]) -> None:
        for seed in seeds:
            left, right = random_split(make_generator(seed))
            left_values = []
            right_values = []
            for _ in range(8):
                a, left = random_next(left)
                b, right = random_next(right)
                left_values.append(a)
                right_values.append(b)
            assert left_values != right_values

    def test_children_differ_from_parent(self, state: GeneratorState) -> None:
        left, right = random_split(state)
        assert left != state
        assert right != state
        assert left != right


class TestRandomInRange:
    def test_range_size_one_advances_state(self, state: GeneratorState) -> None:
        value, nxt = random_in_range(state, 5, 5)
        assert value == 5
        assert nxt == random_next(state)[1]

    def test_low_equals_high_negative_and_huge(self, state: GeneratorState) -> None:
        assert random_in_range(state, -3, -3)[0] == -3
        assert random_in_range(state, 2**100, 2**100)[0] == 2**100

    def test_known_draw(self) -> None:
        state = GeneratorState(1, 1)
        value, nxt = random_in_range(state, 0, 9)
        assert value == (0 * 2147483561 + 2147482884) % 10
        assert nxt == GeneratorState(40014, 40692)

    def test_inverted_range_rejected(self, state: GeneratorState) -> None:
        with pytest.raises(InvalidRangeError):
            random_in_range(state, 10, 9)

    def test_inverted_range_is_value_error(self, state: GeneratorState) -> None:
        with pytest.raises(ValueError):
            random_in_range(state, 1, 0)

    def test_draws_consumed_by_width(self, state: GeneratorState) -> None:
        # A range wider than one draw's base needs two draws.
        _, after_narrow = random_in_range(state, 0, 2147483559)
        _, after_wide = random_in_range(state, 0, 2147483560)
        one = random_next(state)[1]
        two = random_next(one)[1]
        assert after_narrow == one
        assert after_wide == two

    @pytest.mark.parametrize(
        "low,high",
        [
            (0, 1),
            (-10, 10),
            (0, 2147483561),
            (-(2**40), 2**40),
            (LONG_MIN, LONG_MAX),
            (-(2**100), 2**100 + 12345),
            (10**30, 10**30 + 7),
        ],
    )
    def test_containment(self, low: int, high: int) -> None:
        state = make_generator(low ^ high)
        for _ in range(1500):
            value, state = random_in_range(state, low, high)
            assert low <= value <= high

    def test_containment_across_seeds(self, seeds: list[int]) -> None:
        for seed in seeds:
            state = make_generator(seed)
            for _ in range(1200):
                value, state = random_in_range(state, -1000, 1000)
                assert -1000 <= value <= 1000

    def test_small_range_covers_every_value(self, state: GeneratorState) -> None:
        seen = set()
        for _ in range(200):
            value, state = random_in_range(state, 0, 5)
            seen.add(value)
        assert seen == {0, 1, 2, 3, 4, 5}

    def test_bigint_alias(self, state: GeneratorState) -> None:
        assert random_bigint(state, 0, 99) == random_in_range(state, 0, 99)


class TestRandomLong:
    def test_matches_bigint(self, state: GeneratorState) -> None:
        assert random_long(state, -50, 50) == random_in_range(state, -50, 50)

    def test_full_width(self, state: GeneratorState) -> None:
        for _ in range(1000):
            value, state = random_long(state, LONG_MIN, LONG_MAX)
            assert LONG_MIN <= value <= LONG_MAX

    def test_boundary(self, state: GeneratorState) -> None:
        assert random_long(state, LONG_MAX, LONG_MAX)[0] == LONG_MAX

    @pytest.mark.parametrize("low,high", [(LONG_MIN - 1, 0), (0, LONG_MAX + 1), (5, 4)])
    def test_invalid_bounds(self, state: GeneratorState, low: int, high: int) -> None:
        with pytest.raises(InvalidRangeError):
            random_long(state, low, high)


class TestRandomDouble:
    def test_boundary_returns_low(self, state: GeneratorState) -> None:
        for bound in (0.0, -3.5, 1e300, -1e-300, 42.0):
            value, _ = random_double(state, bound, bound)
            assert value == bound

    def test_advances_state(self, state: GeneratorState) -> None:
        _, nxt = random_double(state, 0.0, 1.0)
        assert nxt != state

    @pytest.mark.parametrize(
        "low,high",
        [(0.0, 1.0), (-1.0, 1.0), (0.1, 0.3), (-1e300, 1e300), (1e-9, 2e-9), (-5.0, -4.0)],
    )
    def test_containment(self, low: float, high: float) -> None:
        state = make_generator(int(abs(high) * 1000) + 1)
        for _ in range(2000):
            value, state = random_double(state, low, high)
            assert low <= value <= high

    def test_extreme_width(self, state: GeneratorState) -> None:
        big = 1.7976931348623157e308
        for _ in range(200):
            value, state = random_double(state, -big, big)
            assert math.isfinite(value)
            assert -big <= value <= big

    def test_int_bounds_accepted(self, state: GeneratorState) -> None:
        value, _ = random_double(state, 0, 10)
        assert isinstance(value, float)
        assert 0.0 <= value <= 10.0

    def test_mean_near_midpoint(self, state: GeneratorState) -> None:
        total = 0.0
        for _ in range(5000):
            value, state = random_double(state, 0.0, 1.0)
            total += value
        assert total / 5000 == pytest.approx(0.5, abs=0.03)

    @pytest.mark.parametrize("low,high", [(0, 10**400), (-(10**400), 0)])
    def test_bounds_too_large_for_float(
        self, state: GeneratorState, low: int, high: int
    ) -> None:
        with pytest.raises(InvalidRangeError):
            random_double(state, low, high)

    @pytest.mark.parametrize(
        "low,high", [(1.0, 0.0), (math.nan, 1.0), (0.0, math.inf), (-math.inf, 0.0)]
    )
    def test_invalid_bounds(self, state: GeneratorState, low: float, high: float) -> None:
        with pytest.raises(InvalidRangeError):
            random_double(state, low, high)
