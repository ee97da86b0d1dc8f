"""Commands performing one storage operation per invocation."""

from .base import Command
from .get import GetCommand, GetRequest
from .models import (
    CancelledError,
    CommandError,
    CommandFailure,
    CommandOptions,
    InputReadError,
    OutputWriteError,
    Stage,
    UsageError,
)
from .put import PutCommand, PutRequest

__all__ = [
    "CancelledError",
    "Command",
    "CommandError",
    "CommandFailure",
    "CommandOptions",
    "GetCommand",
    "GetRequest",
    "InputReadError",
    "OutputWriteError",
    "PutCommand",
    "PutRequest",
    "Stage",
    "UsageError",
]
