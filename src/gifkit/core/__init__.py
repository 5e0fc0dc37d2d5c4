"""Core modules for byte access, block decoding and image scanning."""

from gifkit.core.config import DecodeConfig, DecodeConfigBuilder
from gifkit.core.cursor import ByteCursor
from gifkit.core.scanner import ImageBlockScanner, ScanState

__all__ = ["ByteCursor", "DecodeConfig", "DecodeConfigBuilder", "ImageBlockScanner", "ScanState"]
