"""Pydantic models for kvtool configuration and its errors."""

from __future__ import annotations

from pathlib import Path
from typing import TypeAlias

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from kvtool.common import LoggingConfig
from kvtool.constants import DEFAULT_BUCKET, DEFAULT_CODEC, DEFAULT_DRIVER
from kvtool.store import StoreOptions


class ConfigNotFoundError(BaseModel):
    """Configuration file not found at expected location."""

    model_config = ConfigDict(extra="forbid")

    expected_path: Path
    message: str


class ConfigYamlError(BaseModel):
    """YAML parsing error in configuration file."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    line: int | None = None
    column: int | None = None
    message: str


class ConfigValidationError(BaseModel):
    """Schema validation error in configuration."""

    model_config = ConfigDict(extra="forbid")

    path: Path | None = None
    field: str | None = None
    message: str

    @classmethod
    def from_exception(cls, exc: ValidationError, path: Path | None) -> ConfigValidationError:
        error_details = exc.errors()
        field = None
        message = str(exc)
        if error_details:
            first = error_details[0]
            loc = first.get("loc") or ()
            field = ".".join(str(part) for part in loc) or None
            message = first.get("msg", message)
        return cls(path=path, field=field, message=message)


class ConfigIOError(BaseModel):
    """File I/O error reading configuration."""

    model_config = ConfigDict(extra="forbid")

    path: Path
    message: str


ConfigError: TypeAlias = ConfigNotFoundError | ConfigYamlError | ConfigValidationError | ConfigIOError


class DefaultsConfig(BaseModel):
    """Values used when a command is invoked without the matching option."""

    model_config = ConfigDict(extra="forbid", coerce_numbers_to_str=True)

    driver: str = DEFAULT_DRIVER
    bucket: str = DEFAULT_BUCKET
    codec: str = DEFAULT_CODEC


class GlobalConfig(BaseModel):
    """Global configuration (~/.config/kvtool/config.yaml)."""

    model_config = ConfigDict(extra="forbid")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)
    store: StoreOptions = Field(default_factory=StoreOptions)
