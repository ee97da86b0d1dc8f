"""Fetch a single value."""

from __future__ import annotations

import os
from dataclasses import dataclass

from result import Err, Ok, Result

from kvtool.store import KeyNotFoundError, Store, display_key

from .base import Command
from .models import CommandFailure, Stage


@dataclass(frozen=True)
class GetRequest:
    location: str
    key: bytes


class GetCommand(Command[GetRequest, bytes]):
    name = "get"
    synopsis = "Fetch a value from a KV store"
    usage = "kvtool get [--driver NAME] [--bucket NAME] [--codec NAME] LOCATION KEY"
    min_args = 2
    max_args = 2

    def parse(self, args: list[str]) -> Result[GetRequest, CommandFailure]:
        location, key = args
        return Ok(GetRequest(location=location, key=os.fsencode(key)))

    def execute(self, store: Store, request: GetRequest) -> Result[bytes, CommandFailure]:
        key = display_key(request.key)
        match store.get(request.key):
            case Ok(None):
                # An absent key is an error, so it can't be confused with an empty value.
                error = KeyNotFoundError(
                    bucket=store.bucket,
                    key=key,
                    message=f"key {key!r} doesn't exist in bucket {store.bucket!r}",
                )
                return Err(CommandFailure(stage=Stage.EXECUTING, error=error, message=error.message))
            case Ok(value):
                return Ok(value)
            case Err(error):
                return Err(
                    CommandFailure(
                        stage=Stage.EXECUTING,
                        error=error,
                        message=f"failed to read key {key!r}: {error.message}",
                    )
                )

    def render(self, value: bytes) -> None:
        # Raw bytes, no trailing newline: binary values must round-trip exactly.
        self.console.write(value)
