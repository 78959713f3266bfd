"""Default configuration values for splitcheck."""

from __future__ import annotations

from splitcheck.config.schema import CheckConfig, SampleConfig


def default_check_config() -> CheckConfig:
    """Default check config: 100 tests, sizes up to 200, time-based seed."""
    return CheckConfig()


def default_sample_config() -> SampleConfig:
    """Default sample config: 10 integers in [0, 100] from seed 0."""
    return SampleConfig()
