"""Public configuration API for kvtool."""

from __future__ import annotations

from .loader import load_config, load_global_config
from .models import (
    ConfigError,
    ConfigIOError,
    ConfigNotFoundError,
    ConfigValidationError,
    ConfigYamlError,
    DefaultsConfig,
    GlobalConfig,
)
from .resolver import apply_env_overrides

__all__ = [
    "ConfigError",
    "ConfigIOError",
    "ConfigNotFoundError",
    "ConfigValidationError",
    "ConfigYamlError",
    "DefaultsConfig",
    "GlobalConfig",
    "apply_env_overrides",
    "load_config",
    "load_global_config",
]
