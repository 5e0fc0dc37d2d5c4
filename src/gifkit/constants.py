"""Centralized constants for gifkit."""

from typing import NamedTuple


class BitField(NamedTuple):
    """Mask and shift locating one field inside a packed byte."""

    mask: int
    shift: int


# Block layout
HEADER_SIZE = 6
SIGNATURE_LENGTH = 3
SCREEN_DESCRIPTOR_OFFSET = 6
SCREEN_DESCRIPTOR_SIZE = 7
GLOBAL_COLOR_TABLE_OFFSET = SCREEN_DESCRIPTOR_OFFSET + SCREEN_DESCRIPTOR_SIZE
IMAGE_DESCRIPTOR_SIZE = 10
GRAPHICS_CONTROL_SIZE = 7
COLOR_ENTRY_SIZE = 3

GIF_SIGNATURE = "GIF"
SUPPORTED_VERSIONS = {"87a", "89a"}

# Block markers
IMAGE_SEPARATOR = 0x2C
EXTENSION_INTRODUCER = 0x21
GRAPHICS_CONTROL_LABEL = 0xF9
TRAILER = 0x3B
BLOCK_TERMINATOR = 0x00

# Logical screen descriptor packed byte
GLOBAL_COLOR_TABLE_FLAG = BitField(0b10000000, 7)
COLOR_RESOLUTION = BitField(0b01110000, 4)
SCREEN_SORT_FLAG = BitField(0b00001000, 3)
GLOBAL_COLOR_TABLE_SIZE = BitField(0b00000111, 0)

# Image descriptor packed byte
LOCAL_COLOR_TABLE_FLAG = BitField(0b10000000, 7)
INTERLACE_FLAG = BitField(0b01000000, 6)
IMAGE_SORT_FLAG = BitField(0b00100000, 5)
LOCAL_COLOR_TABLE_SIZE = BitField(0b00000111, 0)

# Graphics control extension packed byte
DISPOSAL_METHOD = BitField(0b00011100, 2)
USER_INPUT_FLAG = BitField(0b00000010, 1)
TRANSPARENT_COLOR_FLAG = BitField(0b00000001, 0)

DISPOSAL_METHODS = {
    0: "unspecified",
    1: "do not dispose",
    2: "restore to background",
    3: "restore to previous",
}

# sRGB (D65) to CIE XYZ
SRGB_TO_XYZ = (
    (0.4124, 0.3576, 0.1805),
    (0.2126, 0.7152, 0.0722),
    (0.0193, 0.1192, 0.9505),
)
D65_WHITE_POINT = (0.95047, 1.0, 1.08883)
SRGB_LINEAR_THRESHOLD = 0.04045
CIE_EPSILON = (6 / 29) ** 3

PALETTE_FORMATS = ["hex", "rgb", "lab"]
