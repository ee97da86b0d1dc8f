"""Shared lifecycle for commands that perform one storage operation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import ClassVar, Generic, TypeVar

from result import Err, Ok, Result, is_err

from kvtool.cancellation import CancellationController
from kvtool.codec import UnsupportedCodecError, supported_codecs
from kvtool.common import create_logger
from kvtool.console import Console
from kvtool.store import Store, StoreFailure, UnsupportedDriverError, resolve_store, supported_drivers

from .models import CommandFailure, CommandOptions, OutputWriteError, Stage, UsageError

logger = create_logger("commands")

RequestT = TypeVar("RequestT")
ValueT = TypeVar("ValueT")


class Command(ABC, Generic[RequestT, ValueT]):
    """Parse, resolve, execute and render exactly once per ``run``.

    Subclasses describe their arguments through ``min_args``/``max_args`` and
    implement ``parse``, ``execute`` and ``render``. The cancellation flag is
    checked after every stage; once it is set, later stages are skipped. The
    store is closed as soon as ``execute`` returns.
    """

    name: ClassVar[str]
    synopsis: ClassVar[str]
    usage: ClassVar[str]
    min_args: ClassVar[int]
    max_args: ClassVar[int]

    def __init__(
        self,
        console: Console,
        options: CommandOptions | None = None,
        cancellation: CancellationController | None = None,
    ) -> None:
        self.console = console
        self.options = options or CommandOptions()
        self._cancellation = cancellation

    def run(self, args: Sequence[str]) -> int:
        """Run the command and return the process exit code."""
        cancellation = self._cancellation or CancellationController()
        with cancellation:
            result = self._lifecycle(list(args), cancellation)

        if is_err(result):
            self._report(result.err_value)
            return 1
        return 0

    @abstractmethod
    def parse(self, args: list[str]) -> Result[RequestT, CommandFailure]:
        """Turn positional arguments, already checked for arity, into a request."""

    @abstractmethod
    def execute(self, store: Store, request: RequestT) -> Result[ValueT, CommandFailure]: ...

    @abstractmethod
    def render(self, value: ValueT) -> None: ...

    def _lifecycle(self, args: list[str], cancellation: CancellationController) -> Result[None, CommandFailure]:
        request = self._check_arity(args).and_then(self.parse)
        if is_err(request):
            return request
        if is_err(checked := self._checkpoint(cancellation, Stage.PARSING)):
            return checked

        opened = self._open_store(location=args[0])
        if is_err(opened):
            return opened

        with opened.ok_value as store:
            if is_err(checked := self._checkpoint(cancellation, Stage.RESOLVING)):
                return checked
            outcome = self.execute(store, request.ok_value)

        if is_err(outcome):
            return outcome
        if is_err(checked := self._checkpoint(cancellation, Stage.EXECUTING)):
            return checked

        try:
            self.render(outcome.ok_value)
        except OSError as e:
            error = OutputWriteError(message=f"failed to write output: {e}")
            return Err(CommandFailure(stage=Stage.RENDERING, error=error, message=error.message))

        logger.debug("Command finished", command=self.name)
        return Ok(None)

    def _check_arity(self, args: list[str]) -> Result[list[str], CommandFailure]:
        expected = str(self.min_args) if self.min_args == self.max_args else f"{self.min_args}-{self.max_args}"
        if self.min_args <= len(args) <= self.max_args:
            return Ok(args)

        problem = "Not enough arguments" if len(args) < self.min_args else "Too many arguments"
        message = f"{problem} (expected {expected}, got {len(args)})"
        return Err(
            CommandFailure(
                stage=Stage.PARSING,
                error=UsageError(expected=expected, got=len(args), message=message),
                message=message,
                hint=f"usage: {self.usage}",
            )
        )

    def _open_store(self, location: str) -> Result[Store, CommandFailure]:
        options = self.options
        return resolve_store(options.driver, location, options.bucket, options.codec, options.store).map_err(
            lambda error: CommandFailure(
                stage=Stage.RESOLVING,
                error=error,
                message=f"failed to open {options.driver} store: {error.message}",
                hint=_resolve_hint(error),
            )
        )

    def _checkpoint(self, cancellation: CancellationController, stage: Stage) -> Result[None, CommandFailure]:
        return cancellation.check().map_err(
            lambda error: CommandFailure(stage=stage, error=error, message=f"{self.name} aborted: {error.message}")
        )

    def _report(self, failure: CommandFailure) -> None:
        logger.debug("Command failed", command=self.name, stage=failure.stage.value, error=failure.message)
        self.console.error(failure.message, hint=failure.hint)


def _resolve_hint(error: StoreFailure) -> str | None:
    match error:
        case UnsupportedDriverError():
            return f"supported drivers: {', '.join(supported_drivers())}"
        case UnsupportedCodecError():
            return f"supported codecs: {', '.join(supported_codecs())}"
        case _:
            return None
