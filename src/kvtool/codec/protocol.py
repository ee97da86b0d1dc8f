"""Codec protocol."""

from __future__ import annotations

from typing import Protocol

from result import Result

from .models import EncodingError


class Codec(Protocol):
    """Converts application values to the bytes a backend persists and back."""

    name: str

    def encode(self, value: bytes) -> Result[bytes, EncodingError]: ...

    def decode(self, data: bytes) -> Result[bytes, EncodingError]: ...
