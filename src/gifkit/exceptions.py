"""Custom exceptions for the gifkit package."""

from enum import Enum
from typing import Optional


class DecodeStage(Enum):
    """Decode pass stages, in the order they run."""

    HEADER = "header"
    SCREEN_DESCRIPTOR = "screen_descriptor"
    GLOBAL_COLOR_TABLE = "global_color_table"
    GRAPHICS_CONTROL_EXTENSION = "graphics_control_extension"
    IMAGES = "images"


class GifKitError(Exception):
    """Base exception for all gifkit errors."""

    pass


class ConfigurationError(GifKitError):
    """Raised when configuration is invalid."""

    pass


class GifReadError(GifKitError):
    """Raised when the bytes of a GIF file cannot be loaded."""

    pass


class NotYetDecodedError(GifKitError):
    """Raised when a parser accessor is used before a decode pass."""

    pass


class DecodeError(GifKitError):
    """Raised when a buffer cannot be decoded.

    ``stage`` is filled in by the facade with the stage that was running.
    """

    def __init__(self, message: str, stage: Optional[DecodeStage] = None) -> None:
        super().__init__(message)
        self.stage = stage

    def __str__(self) -> str:
        message = super().__str__()
        if self.stage is None:
            return message
        return f"{self.stage.value}: {message}"


class OutOfBoundsError(DecodeError):
    """Raised when a read extends past the end of the buffer."""

    def __init__(self, offset: int, length: int, size: int) -> None:
        super().__init__(
            f"read of {length} byte(s) at offset {offset} exceeds buffer of {size} byte(s)"
        )
        self.offset = offset
        self.length = length
        self.size = size


class InvalidSignatureError(DecodeError):
    """Raised when signature validation is enabled and the header is not GIF."""

    pass
