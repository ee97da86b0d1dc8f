"""Command options and error models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from kvtool.cancellation import CancelledError
from kvtool.constants import DEFAULT_BUCKET, DEFAULT_CODEC, DEFAULT_DRIVER
from kvtool.store import StoreFailure, StoreOptions


class Stage(StrEnum):
    """Lifecycle stages of a single command invocation."""

    PARSING = "parsing"
    RESOLVING = "resolving"
    EXECUTING = "executing"
    RENDERING = "rendering"


class CommandError(BaseModel):
    """Base command error."""

    model_config = ConfigDict(extra="forbid")

    message: str


class UsageError(CommandError):
    """Wrong number of positional arguments."""

    expected: str
    got: int


class InputReadError(CommandError):
    """Value could not be read from the input stream."""


class OutputWriteError(CommandError):
    """Value could not be written to the output stream."""


@dataclass(frozen=True)
class CommandFailure:
    """A failed invocation: which stage failed, why, and what to tell the user."""

    stage: Stage
    error: CommandError | CancelledError | StoreFailure
    message: str
    hint: str | None = None


@dataclass(frozen=True)
class CommandOptions:
    """Backend selection shared by every command."""

    driver: str = DEFAULT_DRIVER
    bucket: str = DEFAULT_BUCKET
    codec: str = DEFAULT_CODEC
    store: StoreOptions = field(default_factory=StoreOptions)


__all__ = [
    "CancelledError",
    "CommandError",
    "CommandFailure",
    "CommandOptions",
    "InputReadError",
    "OutputWriteError",
    "Stage",
    "UsageError",
]
