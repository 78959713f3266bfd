"""Generator values and the combinators that build composite generators.

A generator is a function of a :class:`GeneratorState` and a size. Composite
generators split the state they are given so that every component draws
from its own reproducible stream.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from splitcheck.core.random import (
    GeneratorState,
    make_generator,
    random_double,
    random_in_range,
    random_long,
    random_split,
)
from splitcheck.utils.exceptions import GeneratorError

GenFn = Callable[[GeneratorState, int], Any]


@dataclass(frozen=True)
class Generator:
    """A sized, state-threading value generator."""

    gen: GenFn


def generator_p(obj: object) -> bool:
    """Is ``obj`` a generator?"""
    return isinstance(obj, Generator)


def call_gen(generator: Generator, state: GeneratorState, size: int) -> Any:
    """Run ``generator`` against ``state`` at ``size``."""
    return generator.gen(state, size)


def split_n(state: GeneratorState, n: int) -> list[GeneratorState]:
    """Split ``state`` into ``n`` states by repeatedly splitting the right child."""
    states: list[GeneratorState] = []
    for _ in range(n):
        left, state = random_split(state)
        states.append(left)
    return states


def return_(value: Any) -> Generator:
    """Generator that always produces ``value``."""
    return Generator(lambda state, size: value)


def fmap(f: Callable[[Any], Any], generator: Generator) -> Generator:
    """Generator producing ``f`` applied to the values of ``generator``."""
    return Generator(lambda state, size: f(call_gen(generator, state, size)))


def bind(generator: Generator, k: Callable[[Any], Generator]) -> Generator:
    """Sequence ``generator`` into the generator returned by ``k``.

    The left child of the split state feeds ``generator``; the right child
    feeds the generator that ``k`` builds from its value.
    """

    def _gen(state: GeneratorState, size: int) -> Any:
        r1, r2 = random_split(state)
        inner = call_gen(generator, r1, size)
        return call_gen(k(inner), r2, size)

    return Generator(_gen)


def tuple_(*generators: Generator) -> Generator:
    """Generator of tuples, one element per component generator."""

    def _gen(state: GeneratorState, size: int) -> tuple[Any, ...]:
        states = split_n(state, len(generators))
        return tuple(call_gen(g, s, size) for g, s in zip(generators, states))

    return Generator(_gen)


def sized(f: Callable[[int], Generator]) -> Generator:
    """Generator built from the current size."""
    return Generator(lambda state, size: call_gen(f(size), state, size))


def resize(n: int, generator: Generator) -> Generator:
    """Run ``generator`` with its size pinned to ``n``."""
    return Generator(lambda state, size: call_gen(generator, state, n))


def choose(low: int, high: int) -> Generator:
    """Integers from ``low`` to ``high`` inclusive, of any magnitude."""
    return Generator(lambda state, size: random_in_range(state, low, high)[0])


def choose_long(low: int, high: int) -> Generator:
    """Integers from ``low`` to ``high`` inclusive, bounds within 64 bits."""
    return Generator(lambda state, size: random_long(state, low, high)[0])


def choose_double(low: float, high: float) -> Generator:
    """Floats from ``low`` to ``high`` inclusive."""
    return Generator(lambda state, size: random_double(state, low, high)[0])


integers = sized(lambda size: choose(-size, size))
naturals = sized(lambda size: choose(0, size))
doubles = sized(lambda size: choose_double(-float(size), float(size)))
booleans = fmap(bool, choose(0, 1))


def elements(coll: Sequence[Any]) -> Generator:
    """Uniformly chosen elements of ``coll``."""
    items = list(coll)
    if not items:
        raise GeneratorError("elements requires a non-empty collection")
    return fmap(items.__getitem__, choose(0, len(items) - 1))


def one_of(*generators: Generator) -> Generator:
    """Values from a uniformly chosen component generator."""
    if not generators:
        raise GeneratorError("one_of requires at least one generator")
    return bind(choose(0, len(generators) - 1), generators.__getitem__)


def list_of(generator: Generator) -> Generator:
    """Lists of values from ``generator`` with length in ``[0, size]``."""

    def _gen(state: GeneratorState, size: int) -> list[Any]:
        r1, r2 = random_split(state)
        length = random_in_range(r1, 0, max(size, 0))[0]
        return [call_gen(generator, s, size) for s in split_n(r2, length)]

    return Generator(_gen)


def _seed_state(seed: int | None) -> GeneratorState:
    if seed is None:
        seed = time.time_ns() // 1_000_000
    return make_generator(seed)


def sample(generator: Generator, num_samples: int = 10, seed: int | None = None) -> list[Any]:
    """Draw ``num_samples`` values with sizes ``0, 1, 2, ...``.

    Args:
        generator: Generator to sample.
        num_samples: Number of values.
        seed: Seed for reproducible output; the current time when omitted.
    """
    states = split_n(_seed_state(seed), num_samples)
    return [call_gen(generator, state, size) for size, state in enumerate(states)]


def generate(generator: Generator, size: int = 30, seed: int | None = None) -> Any:
    """Draw a single value at ``size``."""
    return call_gen(generator, _seed_state(seed), size)
