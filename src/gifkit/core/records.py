"""Immutable records produced by a decode pass."""

from dataclasses import dataclass, field
from typing import Iterator, Optional

import numpy as np

from gifkit import constants
from gifkit.processing.color_space import LabColor, RgbColor, rgb_to_lab, srgb_to_lab_array


@dataclass(frozen=True)
class HeaderBlock:
    """The 6-byte signature/version pair."""

    signature: str
    version: str

    @property
    def is_gif(self) -> bool:
        return self.signature == constants.GIF_SIGNATURE


@dataclass(frozen=True)
class LogicalScreenDescriptor:
    """Canvas geometry and global palette flags."""

    width: int
    height: int
    global_color_table_flag: bool
    color_resolution: int
    """Three-bit exponent (0-7)."""

    sort_flag: bool
    global_color_table_size_exponent: int
    background_color_index: int
    pixel_aspect_ratio: int

    @property
    def color_resolution_value(self) -> int:
        """Number of values per primary color, ``2 ** (color_resolution + 1)``."""
        return 2 ** (self.color_resolution + 1)

    @property
    def global_color_table_length(self) -> int:
        """Entry count of the global table, whether or not it is present."""
        return 2 ** (self.global_color_table_size_exponent + 1)


@dataclass(frozen=True)
class Color:
    """One palette entry. ``lab`` is always derived from ``rgb``."""

    rgb: RgbColor
    lab: LabColor = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "lab", rgb_to_lab(self.rgb.r, self.rgb.g, self.rgb.b))

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Color":
        return cls(RgbColor(r, g, b))

    @property
    def hex(self) -> str:
        return f"#{self.rgb.r:02x}{self.rgb.g:02x}{self.rgb.b:02x}"


@dataclass(frozen=True)
class ColorTable:
    """Ordered palette; an entry's position is its color index."""

    colors: tuple[Color, ...] = ()

    def __len__(self) -> int:
        return len(self.colors)

    def __iter__(self) -> Iterator[Color]:
        return iter(self.colors)

    def __getitem__(self, index: int) -> Color:
        return self.colors[index]

    def hex_values(self) -> list[str]:
        return [color.hex for color in self.colors]

    def to_rgb_array(self) -> np.ndarray:
        """Return the palette as a (N, 3) uint8 array."""
        if not self.colors:
            return np.zeros((0, 3), dtype=np.uint8)
        return np.array([(c.rgb.r, c.rgb.g, c.rgb.b) for c in self.colors], dtype=np.uint8)

    def to_lab_array(self) -> np.ndarray:
        """Return the palette as a (N, 3) float64 array of CIELAB values."""
        return srgb_to_lab_array(self.to_rgb_array().reshape(-1, 3))


@dataclass(frozen=True)
class GraphicsControlExtension:
    """Frame timing and transparency settings."""

    disposal_method: int
    user_input_flag: bool
    transparent_color_flag: bool
    delay_time: int
    """Delay in hundredths of a second."""

    transparent_color_index: int

    @property
    def delay_seconds(self) -> float:
        return self.delay_time / 100.0

    @property
    def disposal_method_name(self) -> str:
        return constants.DISPOSAL_METHODS.get(self.disposal_method, "reserved")


@dataclass(frozen=True)
class ImageDescriptor:
    """Position, size and local palette flags of one image."""

    left: int
    top: int
    width: int
    height: int
    local_color_table_flag: bool
    interlace_flag: bool
    sort_flag: bool
    local_color_table_size_exponent: int

    @property
    def local_color_table_length(self) -> int:
        return 2 ** (self.local_color_table_size_exponent + 1)


@dataclass(frozen=True)
class Image:
    """One image block with its still LZW-encoded pixel data."""

    descriptor: ImageDescriptor
    local_color_table: Optional[ColorTable]
    lzw_minimum_code_size: int
    encoded_data: bytes
    """Sub-block payloads concatenated, size prefixes and terminator removed."""

    graphics_control_extension: Optional[GraphicsControlExtension] = None


@dataclass(frozen=True)
class GifRecordSet:
    """Everything decoded from one buffer."""

    header: HeaderBlock
    screen_descriptor: LogicalScreenDescriptor
    global_color_table: ColorTable
    graphics_control_extension: Optional[GraphicsControlExtension]
    images: tuple[Image, ...]

    @property
    def frame_count(self) -> int:
        return len(self.images)

    @property
    def is_animated(self) -> bool:
        return len(self.images) > 1
