"""CLI entry point for splitcheck."""

from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Any

import click

from splitcheck.analytics.uniformity import (
    bucket_counts,
    chi_square_statistic,
    draw_array,
    split_divergence,
    summarize,
)
from splitcheck.config.defaults import default_check_config, default_sample_config
from splitcheck.config.schema import CheckConfig, SampleConfig
from splitcheck.core.random import (
    LONG_MAX,
    LONG_MIN,
    GeneratorState,
    make_generator,
    random_double,
    random_in_range,
    random_long,
    random_split,
)
from splitcheck.generators.core import generator_p
from splitcheck.io.serialize import dump_quick_check_result, dump_samples, load_config_file
from splitcheck.properties.runner import quick_check
from splitcheck.utils.exceptions import ConfigError

logger = logging.getLogger(__name__)

LONG_BOUND = click.IntRange(LONG_MIN, LONG_MAX)


@click.group()
@click.version_option(package_name="splitcheck")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """splitcheck — splittable random generation for property-based testing."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
    )


def _load(config_path: Path | None, model: Any, default: Any) -> Any:
    if config_path is None:
        return default
    try:
        return load_config_file(config_path, model)
    except ConfigError as exc:
        raise click.BadParameter(str(exc), param_hint="--config") from exc


def _draw(config: SampleConfig) -> list[Any]:
    state = make_generator(config.seed)
    values: list[Any] = []
    for _ in range(config.count):
        if config.kind == "double":
            value, state = random_double(state, config.low, config.high)
        elif config.kind == "long":
            value, state = random_long(state, *config.integer_bounds)
        else:
            value, state = random_in_range(state, *config.integer_bounds)
        values.append(value)
    return values


@cli.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to JSON or YAML sample config. Uses defaults if not provided.",
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to write the drawn values as JSON.",
)
@click.option("--seed", default=None, type=int, help="Random seed.")
@click.option("--count", default=None, type=int, help="Number of values to draw.")
@click.option("--low", default=None, type=str, help="Inclusive lower bound.")
@click.option("--high", default=None, type=str, help="Inclusive upper bound.")
@click.option(
    "--kind",
    default=None,
    type=click.Choice(["int", "long", "double"]),
    help="Sampling primitive.",
)
def sample(
    config_path: Path | None,
    output_path: Path | None,
    seed: int | None,
    count: int | None,
    low: str | None,
    high: str | None,
    kind: str | None,
) -> None:
    """Draw bounded values from a seed."""
    config = _load(config_path, SampleConfig, default_sample_config())

    # CLI overrides
    overrides: dict[str, Any] = {
        "seed": seed,
        "count": count,
        "low": _parse_bound(low, "--low"),
        "high": _parse_bound(high, "--high"),
        "kind": kind,
    }
    update = {key: val for key, val in overrides.items() if val is not None}
    if update:
        try:
            config = SampleConfig.model_validate({**config.model_dump(), **update})
        except ValueError as exc:
            raise click.UsageError(str(exc)) from exc

    values = _draw(config)
    for value in values:
        click.echo(value)

    if output_path is not None:
        output_path.write_text(
            dump_samples(values, config.seed, config.kind, config.low, config.high)
        )
        click.echo(f"\nSamples written to {output_path}")


def _parse_bound(raw: str | None, hint: str) -> int | float | None:
    # Keep integer bounds exact: arbitrary-precision ranges exceed float precision.
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        return float(raw)
    except ValueError as exc:
        raise click.BadParameter(f"not a number: {raw!r}", param_hint=hint) from exc


@cli.command()
@click.option("--seed", default=0, type=int, show_default=True, help="Random seed.")
@click.option("--depth", default=2, type=click.IntRange(0, 16), show_default=True)
def split(seed: int, depth: int) -> None:
    """Print the tree of states produced by repeated splitting."""

    def _show(state: GeneratorState, level: int, label: str) -> None:
        click.echo(f"{'  ' * level}{label}: s1={state.s1} s2={state.s2}")
        if level < depth:
            left, right = random_split(state)
            _show(left, level + 1, label + "L")
            _show(right, level + 1, label + "R")

    _show(make_generator(seed), 0, "root")


@cli.command()
@click.option("--seed", default=0, type=int, show_default=True, help="Random seed.")
@click.option("--count", default=10_000, type=click.IntRange(1), show_default=True)
@click.option("--low", default=0, type=LONG_BOUND, show_default=True)
@click.option("--high", default=99, type=LONG_BOUND, show_default=True)
@click.option("--buckets", default=10, type=click.IntRange(1), show_default=True)
def stats(seed: int, count: int, low: int, high: int, buckets: int) -> None:
    """Summarize a stream of bounded draws."""
    if high < low:
        raise click.UsageError(f"--high ({high}) must not be less than --low ({low})")
    state = make_generator(seed)
    values, _ = draw_array(state, count, low, high)
    summary = summarize(values)
    counts = bucket_counts(values, low, high, buckets)

    click.echo(f"Draws: {summary.count}, seed={seed}")
    click.echo(f"  min: {summary.minimum:g}")
    click.echo(f"  max: {summary.maximum:g}")
    click.echo(f"  mean: {summary.mean:.4f}")
    click.echo(f"  std: {summary.std:.4f}")
    click.echo(f"Chi-square over {buckets} buckets: {chi_square_statistic(counts):.3f}")
    click.echo(f"Split divergence (100 steps): {split_divergence(state, 100)}")


@cli.command()
@click.argument("target")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to JSON or YAML check config.",
)
@click.option("--num-tests", default=None, type=int, help="Number of trials.")
@click.option("--seed", default=None, type=int, help="Random seed.")
@click.option("--max-size", default=None, type=int, help="Largest generation size.")
@click.option(
    "--output",
    "output_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to write the run summary as JSON.",
)
def check(
    target: str,
    config_path: Path | None,
    num_tests: int | None,
    seed: int | None,
    max_size: int | None,
    output_path: Path | None,
) -> None:
    """Run the property named by TARGET (``module:attribute``)."""
    config = _load(config_path, CheckConfig, default_check_config())
    update = {
        key: val
        for key, val in {"num_tests": num_tests, "seed": seed, "max_size": max_size}.items()
        if val is not None
    }
    if update:
        try:
            config = CheckConfig.model_validate({**config.model_dump(), **update})
        except ValueError as exc:
            raise click.UsageError(str(exc)) from exc

    prop = _resolve_property(target)
    result = quick_check(config.num_tests, prop, seed=config.seed, max_size=config.max_size)

    if result.passed:
        click.echo(f"OK, passed {result.num_tests} tests (seed={result.seed})")
    else:
        click.echo(f"Falsified after {result.num_tests} tests (seed={result.seed})")
        click.echo(f"  size: {result.failing_size}")
        click.echo(f"  args: {result.fail!r}")
        click.echo(f"  result: {result.result!r}")

    if output_path is not None:
        output_path.write_text(dump_quick_check_result(result))
        click.echo(f"\nResults written to {output_path}")

    if not result.passed:
        raise SystemExit(1)


def _resolve_property(target: str) -> Any:
    module_name, sep, attribute = target.partition(":")
    if not sep or not module_name or not attribute:
        raise click.BadParameter("expected module:attribute", param_hint="TARGET")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise click.BadParameter(
            f"cannot import {module_name}: {exc}", param_hint="TARGET"
        ) from exc
    prop = getattr(module, attribute, None)
    if not generator_p(prop):
        raise click.BadParameter(f"{target} is not a property", param_hint="TARGET")
    logger.debug("Resolved property %s", target)
    return prop


if __name__ == "__main__":
    cli()
