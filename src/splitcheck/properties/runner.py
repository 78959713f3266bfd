"""Run a property against many generated inputs."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any

from splitcheck.core.random import make_generator, random_split
from splitcheck.generators.core import Generator, call_gen
from splitcheck.properties.property import CheckResult, check_result_p, passed

logger = logging.getLogger(__name__)

DEFAULT_MAX_SIZE = 200


@dataclass
class QuickCheckResult:
    """Outcome of a :func:`quick_check` run.

    Attributes:
        result: ``True`` when every trial passed, otherwise the failing
            trial's result value (a falsy value or the raised exception).
        num_tests: Number of trials run, including the failing one.
        seed: Seed the run started from; replaying it reproduces the run.
        failing_size: Size of the failing trial, ``None`` on success.
        fail: Arguments of the failing trial, ``None`` on success.
    """

    result: Any
    num_tests: int
    seed: int
    failing_size: int | None = None
    fail: tuple[Any, ...] | None = None

    @property
    def passed(self) -> bool:
        return self.result is True


def quick_check(
    num_tests: int,
    prop: Generator,
    seed: int | None = None,
    max_size: int = DEFAULT_MAX_SIZE,
) -> QuickCheckResult:
    """Check ``prop`` against ``num_tests`` generated inputs.

    Trial ``i`` runs at size ``i % max_size`` on the left child of a split of
    the running state; the right child carries on to the next trial. The run
    stops at the first failure. There is no shrinking.

    Args:
        num_tests: Maximum number of trials.
        prop: Property built with :func:`~splitcheck.properties.for_all`.
        seed: Seed for the run; the current time in milliseconds when omitted.
        max_size: Sizes cycle through ``0 .. max_size - 1``.
    """
    if num_tests < 0:
        raise ValueError(f"num_tests must not be negative, got {num_tests}")
    if max_size < 1:
        raise ValueError(f"max_size must be at least 1, got {max_size}")
    if seed is None:
        seed = time.time_ns() // 1_000_000
    state = make_generator(seed)

    for trial in range(num_tests):
        size = trial % max_size
        trial_state, state = random_split(state)
        outcome = call_gen(prop, trial_state, size)
        if not check_result_p(outcome):
            raise TypeError(f"property produced {type(outcome).__name__}, not CheckResult")
        if not passed(outcome.result):
            return _failure(outcome, trial + 1, seed, size)

    logger.debug("Passed %d tests (seed=%d)", num_tests, seed)
    return QuickCheckResult(result=True, num_tests=num_tests, seed=seed)


def _failure(outcome: CheckResult, num_tests: int, seed: int, size: int) -> QuickCheckResult:
    logger.info(
        "Falsified after %d tests (seed=%d, size=%d): args=%r result=%r",
        num_tests,
        seed,
        size,
        outcome.args,
        outcome.result,
    )
    return QuickCheckResult(
        result=outcome.result,
        num_tests=num_tests,
        seed=seed,
        failing_size=size,
        fail=outcome.args,
    )
