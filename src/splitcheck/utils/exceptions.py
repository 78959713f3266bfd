"""Custom exceptions for splitcheck."""

from __future__ import annotations


class SplitcheckError(Exception):
    """Base exception for splitcheck."""


class InvalidRangeError(SplitcheckError, ValueError):
    """Sampling bounds are inverted, non-finite, or outside the allowed width."""


class PrecisionPreconditionError(SplitcheckError, ValueError):
    """Digit count requested for a non-positive value or a base below 2."""


class InvalidStateError(SplitcheckError, ValueError):
    """Generator state fields outside their legal ranges."""


class GeneratorError(SplitcheckError):
    """Misuse of a generator combinator."""


class ConfigError(SplitcheckError):
    """Invalid configuration."""
