"""Store error models."""

from __future__ import annotations

from typing import TypeAlias

from pydantic import BaseModel, ConfigDict

from kvtool.codec import CodecError


class StoreError(BaseModel):
    """Base store error."""

    model_config = ConfigDict(extra="forbid")

    message: str


class UnsupportedDriverError(StoreError):
    """Driver name does not select any known backend."""

    driver: str


class StoreOpenError(StoreError):
    """Backend failed to open the location or bucket."""

    driver: str
    location: str
    bucket: str


class StoreReadError(StoreError):
    """Backend failed while reading a key."""

    bucket: str


class StoreWriteError(StoreError):
    """Backend failed while writing a key."""

    bucket: str


class KeyNotFoundError(StoreError):
    """Key is absent from the bucket."""

    bucket: str
    key: str


StoreFailure: TypeAlias = StoreError | CodecError


def display_key(key: bytes) -> str:
    """Render a key for messages without failing on non-UTF-8 bytes."""
    return key.decode("utf-8", errors="backslashreplace")
