"""Codec error models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CodecError(BaseModel):
    """Base codec error."""

    model_config = ConfigDict(extra="forbid")

    message: str


class UnsupportedCodecError(CodecError):
    """Codec name is not one of the known codecs."""

    codec: str


class EncodingError(CodecError):
    """Value handed to or produced by a codec has the wrong shape."""

    codec: str
    value_type: str
