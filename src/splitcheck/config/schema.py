"""Pydantic v2 configuration models for splitcheck."""

from __future__ import annotations

import math
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from splitcheck.core.random import LONG_MAX, LONG_MIN


def _finite_float(bound: int | float) -> bool:
    try:
        return math.isfinite(float(bound))
    except OverflowError:
        return False


class CheckConfig(BaseModel):
    """Parameters of a property-checking run."""

    model_config = ConfigDict(extra="forbid")

    seed: int | None = Field(
        default=None, description="Run seed; the current time in milliseconds when omitted"
    )
    num_tests: int = Field(default=100, ge=1, le=10_000_000)
    max_size: int = Field(default=200, ge=1, description="Sizes cycle through 0 .. max_size - 1")


class SampleConfig(BaseModel):
    """Parameters for drawing a batch of bounded values from one seed."""

    model_config = ConfigDict(extra="forbid")

    seed: int = 0
    count: int = Field(default=10, ge=1, le=10_000_000)
    low: int | float = Field(default=0, description="Inclusive lower bound")
    high: int | float = Field(default=100, description="Inclusive upper bound")
    kind: Literal["int", "long", "double"] = Field(
        default="int",
        description="Sampling primitive: arbitrary-precision int, 64-bit long, or double",
    )

    @model_validator(mode="after")
    def _validate_bounds(self) -> SampleConfig:
        if self.high < self.low:
            raise ValueError(f"high ({self.high}) must not be less than low ({self.low})")
        if self.kind == "double" and not all(_finite_float(b) for b in (self.low, self.high)):
            raise ValueError("double sampling requires finite bounds")
        if self.kind != "double":
            if any(isinstance(b, float) and not b.is_integer() for b in (self.low, self.high)):
                raise ValueError(f"{self.kind} sampling requires integral bounds")
        if self.kind == "long" and not (LONG_MIN <= self.low and self.high <= LONG_MAX):
            raise ValueError("long sampling requires bounds within the 64-bit range")
        return self

    @property
    def integer_bounds(self) -> tuple[int, int]:
        """Bounds as ints, for the integer sampling kinds."""
        return int(self.low), int(self.high)
