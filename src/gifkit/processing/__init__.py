"""Processing modules for palette color space conversion."""

from gifkit.processing.color_space import (
    LabColor,
    RgbColor,
    rgb_to_lab,
    srgb_to_lab_array,
)

__all__ = [
    "LabColor",
    "RgbColor",
    "rgb_to_lab",
    "srgb_to_lab_array",
]
