"""Configuration file loading and validation helpers."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError
from result import Err, Ok, Result, is_err

from kvtool.common import AppPaths, create_logger, get_global_config_path

from .models import (
    ConfigError,
    ConfigIOError,
    ConfigNotFoundError,
    ConfigValidationError,
    ConfigYamlError,
    GlobalConfig,
)
from .resolver import apply_env_overrides

logger = create_logger("config")


def load_config(paths: AppPaths) -> Result[GlobalConfig, ConfigError]:
    """Load the global config, falling back to defaults when no file exists.

    Environment overrides are applied on top of whatever was loaded.
    """
    path = get_global_config_path(paths)
    result = load_global_config(path)

    if is_err(result) and isinstance(result.err_value, ConfigNotFoundError):
        logger.debug("No config file, using defaults", expected_path=str(path))
        result = Ok(GlobalConfig())

    return result.and_then(apply_env_overrides).inspect_err(
        lambda error: logger.error("Config load failed", error=error.message)
    )


def load_global_config(path: Path) -> Result[GlobalConfig, ConfigError]:
    """Load and validate global config from YAML file."""
    if not path.exists() or not path.is_file():
        return Err(
            ConfigNotFoundError(
                expected_path=path,
                message="Configuration file not found.",
            ),
        )

    try:
        raw_text = path.read_text(encoding="utf-8")
    except OSError as exc:
        return Err(ConfigIOError(path=path, message=str(exc)))

    try:
        data = yaml.safe_load(raw_text) or {}
    except yaml.YAMLError as exc:
        mark = getattr(exc, "problem_mark", None)
        line = getattr(mark, "line", None)
        column = getattr(mark, "column", None)
        return Err(
            ConfigYamlError(
                path=path,
                line=(line + 1) if line is not None else None,
                column=(column + 1) if column is not None else None,
                message=str(exc),
            ),
        )

    if not isinstance(data, dict):
        return Err(
            ConfigValidationError(
                path=path,
                field=None,
                message="Configuration root must be a mapping of keys to values.",
            ),
        )

    try:
        return Ok(GlobalConfig.model_validate(data))
    except ValidationError as exc:
        return Err(ConfigValidationError.from_exception(exc, path))
