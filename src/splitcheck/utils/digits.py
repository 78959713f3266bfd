"""Digit counting used to size the entropy accumulation loop."""

from __future__ import annotations

from splitcheck.utils.exceptions import PrecisionPreconditionError


def digit_count(base: int, value: int) -> int:
    """Number of base-``base`` digits needed to represent ``value``.

    Args:
        base: Radix, must be greater than 1.
        value: Value to represent, must be at least 1.

    Returns:
        1 when ``value < base``, otherwise one more than the digit count of
        ``value // base``.

    Raises:
        PrecisionPreconditionError: If ``base <= 1`` or ``value < 1``.
    """
    if base <= 1:
        raise PrecisionPreconditionError(f"base must be greater than 1, got {base}")
    if value < 1:
        raise PrecisionPreconditionError(f"value must be at least 1, got {value}")

    digits = 1
    while value >= base:
        value //= base
        digits += 1
    return digits
