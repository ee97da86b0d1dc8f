"""Store protocol."""

from __future__ import annotations

from types import TracebackType
from typing import Protocol, Self

from result import Result

from .models import StoreFailure


class Store(Protocol):
    """Get/set capability bound to one bucket and one codec for its lifetime."""

    driver: str
    location: str
    bucket: str

    def get(self, key: bytes) -> Result[bytes | None, StoreFailure]:
        """Look up ``key``.

        Returns:
            Ok(bytes) when the key exists, including an empty value.
            Ok(None) when the key is absent from the bucket.
            Err(StoreFailure) on backend or codec failures.
        """
        ...

    def set(self, key: bytes, value: bytes) -> Result[None, StoreFailure]:
        """Write or overwrite ``key`` in a single transaction."""
        ...

    def close(self) -> None: ...

    def __enter__(self) -> Self: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None: ...
