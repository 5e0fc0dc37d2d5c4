"""Public API."""

from gifkit.api.processor import (
    DecodeFailure,
    DecodeOk,
    DecodeResult,
    GifParser,
    decode,
    try_decode,
)

__all__ = ["DecodeFailure", "DecodeOk", "DecodeResult", "GifParser", "decode", "try_decode"]
