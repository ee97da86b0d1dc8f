"""Loguru setup for kvtool.

The CLI logs to a rotating file and nowhere else: stdout carries stored
values byte for byte and stderr carries the `error:` lines. As a library,
kvtool keeps its logger disabled until the caller opts in.
"""

import sys
from pathlib import Path
from typing import Any, Literal, TextIO, TypeAlias

import loguru
from loguru import logger
from pydantic import BaseModel, ConfigDict, field_validator

from kvtool.constants import APP_NAME

from .models import AppInfo, AppPaths
from .paths import get_data_directory

LogLevel: TypeAlias = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]
LogFormat: TypeAlias = Literal["json", "text"]

TEXT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message} | {extra}\n{exception}"

# Paths that would put log lines on the process's own standard streams.
_STREAM_PATHS = frozenset(
    {
        "-",
        "/dev/stdout",
        "/dev/stderr",
        "/dev/fd/1",
        "/dev/fd/2",
        "/proc/self/fd/1",
        "/proc/self/fd/2",
    }
)


class LoggingConfig(BaseModel):
    """`logging` section of the global config."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = True
    log_level: LogLevel = "INFO"
    log_file: str | None = None
    rotation: str = "1 MB"
    retention: str = "7 days"
    format: LogFormat = "text"

    @field_validator("log_file")
    @classmethod
    def _reject_standard_streams(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        if value in _STREAM_PATHS:
            raise ValueError(f"log_file must be a regular file, not {value!r}")
        return value or None

    def resolve_log_file(self, paths: AppPaths) -> Path:
        if self.log_file:
            return Path(self.log_file).expanduser()
        return get_default_log_file_path(paths)


def setup_cli_logging(app_info: AppInfo, config: LoggingConfig, paths: AppPaths) -> int:
    """Route every kvtool log record to the configured log file.

    The directory is created before existing handlers are removed, so an
    unwritable location raises ``OSError`` and leaves logging as it was.
    """
    log_file = config.resolve_log_file(paths)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logger.enable(APP_NAME)
    logger.remove()
    logger.configure(extra={"scope": "cli", "env": app_info.environment})

    handler_id = logger.add(
        log_file,
        level=config.log_level,
        rotation=config.rotation,
        retention=config.retention,
        encoding="utf-8",
        errors="backslashreplace",
        diagnose=app_info.environment == "dev",
        **_format_options(config.format),
    )

    logger.debug("CLI logging initialized", log_file=str(log_file), level=config.log_level, format=config.format)
    return handler_id


def disable_library_logging() -> None:
    logger.disable(APP_NAME)


def enable_library_logging(level: LogLevel = "INFO", sink: TextIO | None = None) -> int:
    """Turn on kvtool's logs for library callers, on stderr unless ``sink`` is given."""
    logger.enable(APP_NAME)
    logger.remove()
    return logger.add(sink or sys.stderr, level=level, format=TEXT_FORMAT, colorize=False)


def create_logger(scope: str) -> "loguru.Logger":
    return logger.bind(scope=scope)


def get_default_log_file_path(paths: AppPaths) -> Path:
    return get_data_directory(paths) / paths.logs_dir_name / paths.log_filename


def _format_options(log_format: LogFormat) -> dict[str, Any]:
    match log_format:
        case "json":
            return {"serialize": True}
        case "text":
            return {"format": TEXT_FORMAT}
