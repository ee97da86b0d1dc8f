"""Environment variable resolution helpers for configuration."""

from __future__ import annotations

import os

import yaml
from pydantic import ValidationError
from result import Err, Ok, Result

from kvtool.constants import ENV_PREFIX
from kvtool.utils import deep_merge

from .models import ConfigValidationError, GlobalConfig


def apply_env_overrides(config: GlobalConfig) -> Result[GlobalConfig, ConfigValidationError]:
    """Apply ``KVTOOL_CONFIG__<SECTION>__<KEY>`` overrides to config."""
    override_data: dict[str, object] = {}

    for key, value in os.environ.items():
        if not key.upper().startswith(ENV_PREFIX):
            continue
        path = key[len(ENV_PREFIX) :].strip("_")
        if not path:
            continue
        segments = [segment.lower() for segment in path.split("__") if segment]
        _insert_override(override_data, segments, _parse_env_value(value))

    if not override_data:
        return Ok(config)

    merged = deep_merge(config.model_dump(), override_data)
    try:
        return Ok(GlobalConfig.model_validate(merged))
    except ValidationError as exc:
        return Err(ConfigValidationError.from_exception(exc, None))


def _insert_override(data: dict[str, object], path: list[str], value: object) -> None:
    cursor = data
    *parents, leaf = path
    for segment in parents:
        child = cursor.get(segment)
        if not isinstance(child, dict):
            child = {}
            cursor[segment] = child
        cursor = child
    cursor[leaf] = value


def _parse_env_value(raw: str) -> object:
    try:
        parsed = yaml.safe_load(raw)
    except yaml.YAMLError:
        return raw
    return parsed
