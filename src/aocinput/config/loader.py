"""Config loading entry points for aocinput."""

from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import ValidationError

from .models import AocInputConfig


class ConfigError(RuntimeError):
    """Raised when configuration files cannot be loaded or validated."""


def load_config(
    path: Path | None = None,
    *,
    overrides: Mapping[str, Any] | None = None,
) -> AocInputConfig:
    """Load the configuration from `path` (if any) applying optional overrides.

    Values missing from the file fall back to the model defaults. Overrides
    accept dotted keys such as ``runtime.fail_fast``.
    """

    merged: dict[str, Any] = {}
    if path:
        merged = _expect_mapping(_read_structured_file(path), path)

    if overrides:
        merged = _deep_merge(merged, _expand_override_keys(overrides))

    try:
        return AocInputConfig.model_validate(merged)
    except ValidationError as exc:
        source = path or "overrides"
        raise ConfigError(f"Invalid configuration in {source}: {exc}") from exc


def dump_example_config(dest: Path) -> None:
    """Write the default configuration to ``dest``."""

    if dest.suffix.lower() == ".toml":
        raise ConfigError("TOML export is not supported; use a YAML or JSON destination.")

    dest.parent.mkdir(parents=True, exist_ok=True)
    payload = AocInputConfig().model_dump(mode="json")
    if dest.suffix.lower() == ".json":
        dest.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        return
    dest.write_text(yaml.safe_dump(payload, sort_keys=False), encoding="utf-8")


def _expect_mapping(payload: Any, source: Path) -> dict[str, Any]:
    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise ConfigError(f"Expected mapping data in {source}, got {type(payload)!r}.")
    return dict(payload)


def _read_structured_file(path: Path) -> Any:
    """Return the parsed contents of a YAML/TOML/JSON file."""

    if not path.exists():
        raise ConfigError(f"Config file {path} does not exist.")

    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")

    try:
        if suffix in {".yaml", ".yml"}:
            return yaml.safe_load(text) or {}
        if suffix == ".toml":
            return tomllib.loads(text)
        if suffix == ".json":
            return json.loads(text)
    except (yaml.YAMLError, tomllib.TOMLDecodeError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Could not parse {path}: {exc}") from exc

    raise ConfigError(f"Unsupported config format for {path}")


def _deep_merge(base: Mapping[str, Any], extra: Mapping[str, Any]) -> dict[str, Any]:
    """Recursively merge two mappings returning a new dictionary."""

    result: dict[str, Any] = dict(base)
    for key, value in extra.items():
        if key in result and isinstance(result[key], Mapping) and isinstance(value, Mapping):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _expand_override_keys(overrides: Mapping[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in overrides.items():
        if isinstance(key, str) and "." in key:
            *parents, leaf = key.split(".")
            nested: dict[str, Any] = {leaf: value}
            for segment in reversed(parents):
                nested = {segment: nested}
            result = _deep_merge(result, nested)
        else:
            result = _deep_merge(result, {key: value})
    return result


__all__ = [
    "ConfigError",
    "dump_example_config",
    "load_config",
]
