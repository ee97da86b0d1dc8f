"""Identity codec."""

from __future__ import annotations

from result import Err, Ok, Result

from .models import EncodingError

_BYTES_LIKE = (bytes, bytearray, memoryview)


class NoneCodec:
    """Passes bytes through untouched.

    The signatures are typed as ``bytes``; the shape check only guards callers
    that bypass type checking.
    """

    name = "none"

    def encode(self, value: bytes) -> Result[bytes, EncodingError]:
        return self._passthrough(value)

    def decode(self, data: bytes) -> Result[bytes, EncodingError]:
        return self._passthrough(data)

    def _passthrough(self, value: object) -> Result[bytes, EncodingError]:
        if not isinstance(value, _BYTES_LIKE):
            value_type = type(value).__name__
            return Err(
                EncodingError(
                    codec=self.name,
                    value_type=value_type,
                    message=f"unsupported value type: {value_type}",
                )
            )
        return Ok(bytes(value))

    def __repr__(self) -> str:
        return "NoneCodec()"
