"""Bridge from process signals to a cancellation flag shared by a command."""

from __future__ import annotations

import signal
import threading
from collections.abc import Callable, Sequence
from types import FrameType, TracebackType
from typing import Self, TypeAlias

from pydantic import BaseModel, ConfigDict
from result import Err, Ok, Result

from kvtool.common import create_logger

logger = create_logger("cancellation")

SignalHandler: TypeAlias = Callable[[int, FrameType | None], object] | int | None

DEFAULT_SIGNALS: tuple[signal.Signals, ...] = (signal.SIGINT, signal.SIGTERM)


class CancelledError(BaseModel):
    """Command was interrupted before it could finish."""

    model_config = ConfigDict(extra="forbid")

    signal_name: str | None = None
    message: str


class CancellationController:
    """Turns SIGINT/SIGTERM into a cancellation flag.

    While the controller is entered, the listed signals set the flag instead of
    raising ``KeyboardInterrupt``. Work running under the controller checks the
    flag between stages; a blocking call in progress is not interrupted. A
    second delivery of any listed signal raises ``KeyboardInterrupt`` so a
    stuck call can still be aborted.

    Python only delivers signals to the main thread, so handlers are installed
    only there. Elsewhere the controller is a plain flag driven by ``cancel()``.

    Example:
    ```python
    with CancellationController() as cancellation:
        do_first_step()
        if cancellation.cancelled:
            return
        do_second_step()
    ```
    """

    def __init__(self, signals: Sequence[signal.Signals] = DEFAULT_SIGNALS) -> None:
        self._signals = tuple(signals)
        self._event = threading.Event()
        self._signum: int | None = None
        self._previous: dict[int, SignalHandler] = {}

    def __enter__(self) -> Self:
        if threading.current_thread() is threading.main_thread():
            for signum in self._signals:
                self._previous[signum] = signal.signal(signum, self._handle_signal)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        for signum, handler in self._previous.items():
            signal.signal(signum, handler if handler is not None else signal.SIG_DFL)
        self._previous.clear()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    @property
    def signal_name(self) -> str | None:
        if self._signum is None:
            return None
        try:
            return signal.Signals(self._signum).name
        except ValueError:
            return str(self._signum)

    def cancel(self, signum: int | None = None) -> None:
        if self._event.is_set():
            return
        self._signum = signum
        self._event.set()
        logger.debug("Cancellation requested", signal=self.signal_name)

    def wait(self, timeout: float | None = None) -> bool:
        return self._event.wait(timeout)

    def check(self) -> Result[None, CancelledError]:
        if not self.cancelled:
            return Ok(None)
        reason = f"interrupted by {self.signal_name}" if self.signal_name else "interrupted"
        return Err(CancelledError(signal_name=self.signal_name, message=reason))

    def _handle_signal(self, signum: int, frame: FrameType | None) -> None:
        if self._event.is_set():
            raise KeyboardInterrupt
        self.cancel(signum)
