"""kvtool codec module."""

from .models import CodecError, EncodingError, UnsupportedCodecError
from .none import NoneCodec
from .protocol import Codec
from .registry import CodecName, get_codec, supported_codecs

__all__ = [
    "Codec",
    "CodecError",
    "CodecName",
    "EncodingError",
    "NoneCodec",
    "UnsupportedCodecError",
    "get_codec",
    "supported_codecs",
]
