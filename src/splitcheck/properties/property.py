"""Properties: generators of the outcome of applying a function under test."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from splitcheck.generators.core import Generator, bind, generator_p, return_, tuple_


@dataclass(frozen=True)
class CheckResult:
    """Outcome of applying a function under test to generated arguments.

    Attributes:
        result: Value returned by the function, or the exception it raised.
        function: The function under test.
        args: The generated arguments it was applied to.
    """

    result: Any
    function: Callable[..., Any]
    args: tuple[Any, ...]

    @property
    def passed(self) -> bool:
        return passed(self.result)


def check_result_p(obj: object) -> bool:
    """Is ``obj`` a result from a property run?"""
    return isinstance(obj, CheckResult)


def passed(result: Any) -> bool:
    """A result passes unless it is falsy or an exception."""
    return bool(result) and not isinstance(result, BaseException)


def for_all(generators: Sequence[Generator], function: Callable[..., Any]) -> Generator:
    """Create a property from argument generators and a function under test.

    The property is itself a generator: it draws one argument per generator,
    applies ``function`` to them and yields a :class:`CheckResult`. An
    exception raised by ``function`` becomes the result instead of
    propagating. A function may also return a ``CheckResult`` (passed through
    as is) or a generator (used in place of the property's own result).

    Example::

        for_all([gen.integers, gen.integers], lambda a, b: a + b == b + a)
    """

    def _apply(args: tuple[Any, ...]) -> Generator:
        try:
            result = function(*args)
        except Exception as exc:
            result = exc
        if check_result_p(result):
            return return_(result)
        if generator_p(result):
            return result
        return return_(CheckResult(result, function, args))

    return bind(tuple_(*generators), _apply)


def property_of(*generators: Generator) -> Callable[[Callable[..., Any]], Generator]:
    """Decorator form of :func:`for_all`.

    Example::

        @property_of(gen.integers, gen.integers)
        def addition_commutes(a, b):
            return a + b == b + a
    """

    def decorator(function: Callable[..., Any]) -> Generator:
        return for_all(generators, function)

    return decorator
