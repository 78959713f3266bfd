"""Serialization for generator states, run results, and configs."""

from __future__ import annotations

import hashlib
import json
import logging
from pathlib import Path
from typing import Any, TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from splitcheck.core.random import GeneratorState
from splitcheck.io.yaml_loader import load_yaml
from splitcheck.properties.runner import QuickCheckResult
from splitcheck.utils.exceptions import ConfigError, InvalidStateError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

YAML_SUFFIXES = {".yaml", ".yml"}


def state_to_dict(state: GeneratorState) -> dict[str, int]:
    return {"s1": state.s1, "s2": state.s2}


def dump_state(state: GeneratorState) -> str:
    """Serialize a generator state to a JSON string."""
    return json.dumps(state_to_dict(state))


def load_state(json_str: str) -> GeneratorState:
    """Deserialize a generator state from a JSON string.

    Raises:
        InvalidStateError: If the payload is malformed or out of range.
    """
    try:
        data: dict[str, Any] = json.loads(json_str)
    except json.JSONDecodeError as exc:
        raise InvalidStateError(f"state is not valid JSON: {exc}") from exc
    try:
        s1, s2 = data["s1"], data["s2"]
    except (KeyError, TypeError) as exc:
        raise InvalidStateError(f"expected an object with s1 and s2, got {json_str!r}") from exc
    if not all(isinstance(s, int) and not isinstance(s, bool) for s in (s1, s2)):
        raise InvalidStateError(f"s1 and s2 must be integers, got {s1!r} and {s2!r}")
    return GeneratorState(s1, s2)


def compute_state_hash(state: GeneratorState) -> str:
    """Compute a deterministic SHA-256 hash of a state.

    Uses canonical JSON (sorted keys, no whitespace) so equal states always
    hash the same.
    """
    canonical = json.dumps(state_to_dict(state), sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(canonical.encode()).hexdigest()


def dump_quick_check_result(result: QuickCheckResult) -> str:
    """Serialize a run outcome to JSON.

    Failing arguments and non-boolean results are rendered with ``repr``.
    """
    data: dict[str, Any] = {
        "result": result.result if isinstance(result.result, bool) else repr(result.result),
        "passed": result.passed,
        "num_tests": result.num_tests,
        "seed": result.seed,
    }
    if result.fail is not None:
        data["failing_size"] = result.failing_size
        data["fail"] = [repr(arg) for arg in result.fail]
    return json.dumps(data, indent=2)


def dump_samples(values: list[Any], seed: int, kind: str, low: Any, high: Any) -> str:
    """Serialize a batch of drawn values to JSON.

    Integers wider than 53 bits are written as strings so JSON readers that
    parse numbers as doubles keep them exact.
    """

    def _encode(value: Any) -> Any:
        if isinstance(value, int) and abs(value) > 2**53:
            return str(value)
        return value

    data = {
        "seed": seed,
        "kind": kind,
        "low": _encode(low),
        "high": _encode(high),
        "values": [_encode(v) for v in values],
    }
    return json.dumps(data, indent=2)


def load_config_file(path: Path, model: type[ModelT]) -> ModelT:
    """Load a JSON or YAML config file into ``model``.

    Raises:
        ConfigError: If the content does not validate against ``model``.
    """
    try:
        if path.suffix.lower() in YAML_SUFFIXES:
            data = load_yaml(path)
        else:
            data = json.loads(path.read_text())
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise ConfigError(f"cannot parse {path}: {exc}") from exc
    logger.debug("Loaded %s config from %s", model.__name__, path)
    try:
        return model.model_validate(data or {})
    except ValidationError as exc:
        raise ConfigError(f"invalid config in {path}: {exc}") from exc
