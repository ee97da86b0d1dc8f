"""Store a single value."""

from __future__ import annotations

import os
from dataclasses import dataclass

from result import Err, Ok, Result

from kvtool.store import Store, display_key

from .base import Command
from .models import CommandFailure, InputReadError, Stage


@dataclass(frozen=True)
class PutRequest:
    location: str
    key: bytes
    value: bytes


class PutCommand(Command[PutRequest, None]):
    """Write one value, taken inline or read from the input stream until EOF."""

    name = "put"
    synopsis = "Store a value into a KV store"
    usage = "kvtool put [--driver NAME] [--bucket NAME] [--codec NAME] LOCATION KEY [VALUE]"
    min_args = 2
    max_args = 3

    def parse(self, args: list[str]) -> Result[PutRequest, CommandFailure]:
        location, key, *inline = args
        if inline:
            return Ok(PutRequest(location=location, key=os.fsencode(key), value=os.fsencode(inline[0])))

        try:
            value = self.console.read_input()
        except OSError as e:
            error = InputReadError(message=f"failed to read value from stdin: {e}")
            return Err(CommandFailure(stage=Stage.PARSING, error=error, message=error.message))

        return Ok(PutRequest(location=location, key=os.fsencode(key), value=value))

    def execute(self, store: Store, request: PutRequest) -> Result[None, CommandFailure]:
        return store.set(request.key, request.value).map_err(
            lambda error: CommandFailure(
                stage=Stage.EXECUTING,
                error=error,
                message=f"failed to write key {display_key(request.key)!r}: {error.message}",
            )
        )

    def render(self, value: None) -> None:
        return None
