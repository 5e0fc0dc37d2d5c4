"""Configuration classes using Builder pattern for decode settings."""

from dataclasses import dataclass
from typing import Optional

from gifkit.exceptions import ConfigurationError


@dataclass(frozen=True)
class DecodeConfig:
    """Configuration for one decode pass."""

    scan_start_offset: Optional[int] = None  # None: first byte after the global table
    graphics_control_offset: Optional[int] = None  # None: first byte after the global table
    per_frame_extensions: bool = False
    validate_signature: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.scan_start_offset is not None and self.scan_start_offset < 0:
            raise ConfigurationError("Scan start offset cannot be negative")
        if self.graphics_control_offset is not None and self.graphics_control_offset < 0:
            raise ConfigurationError("Graphics control offset cannot be negative")


class DecodeConfigBuilder:
    """Builder for DecodeConfig."""

    def __init__(self) -> None:
        """Initialize the builder."""
        self._scan_start_offset: Optional[int] = None
        self._graphics_control_offset: Optional[int] = None
        self._per_frame_extensions: bool = False
        self._validate_signature: bool = False

    def with_scan_start_offset(self, offset: int) -> "DecodeConfigBuilder":
        """Set the offset the image scan starts from."""
        self._scan_start_offset = offset
        return self

    def with_graphics_control_offset(self, offset: int) -> "DecodeConfigBuilder":
        """Set the block start of the fixed-position graphics control extension."""
        self._graphics_control_offset = offset
        return self

    def with_per_frame_extensions(self, enabled: bool = True) -> "DecodeConfigBuilder":
        """Attach each graphics control extension to the image that follows it."""
        self._per_frame_extensions = enabled
        return self

    def with_signature_validation(self, enabled: bool = True) -> "DecodeConfigBuilder":
        """Reject buffers whose signature is not GIF."""
        self._validate_signature = enabled
        return self

    def build(self) -> DecodeConfig:
        """Build the DecodeConfig object."""
        return DecodeConfig(
            scan_start_offset=self._scan_start_offset,
            graphics_control_offset=self._graphics_control_offset,
            per_frame_extensions=self._per_frame_extensions,
            validate_signature=self._validate_signature,
        )
