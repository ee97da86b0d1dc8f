"""Lookup of codecs by name."""

from __future__ import annotations

from enum import StrEnum

from result import Err, Ok, Result

from .models import UnsupportedCodecError
from .none import NoneCodec
from .protocol import Codec


class CodecName(StrEnum):
    NONE = "none"


def supported_codecs() -> list[str]:
    return [codec.value for codec in CodecName]


def get_codec(name: str) -> Result[Codec, UnsupportedCodecError]:
    """Return the codec registered under ``name``.

    Names are matched exactly; ``NONE`` is not the same codec as ``none``.
    """
    match name:
        case CodecName.NONE:
            return Ok(NoneCodec())
        case _:
            return Err(
                UnsupportedCodecError(
                    codec=name,
                    message=f"unknown codec {name!r} (expected one of: {', '.join(supported_codecs())})",
                )
            )
