"""Tests for digit counting."""

from __future__ import annotations

import pytest

from splitcheck.utils.digits import digit_count
from splitcheck.utils.exceptions import PrecisionPreconditionError


class TestDigitCount:
    def test_below_base(self) -> None:
        assert digit_count(10, 1) == 1
        assert digit_count(10, 9) == 1

    def test_powers_of_base(self) -> None:
        assert digit_count(10, 10) == 2
        assert digit_count(10, 99) == 2
        assert digit_count(10, 100) == 3
        assert digit_count(2, 1024) == 11

    def test_draw_base(self) -> None:
        b = 2147483561
        assert digit_count(b, b - 1) == 1
        assert digit_count(b, b) == 2
        assert digit_count(b, 2**64) == 3

    def test_huge_value_does_not_recurse(self) -> None:
        assert digit_count(2, 2**5000) == 5001

    @pytest.mark.parametrize("base,value", [(1, 5), (0, 5), (-2, 5), (10, 0), (10, -1)])
    def test_preconditions(self, base: int, value: int) -> None:
        with pytest.raises(PrecisionPreconditionError):
            digit_count(base, value)
