"""sRGB to CIELAB conversion for palette entries."""

from dataclasses import dataclass

import numpy as np

from gifkit import constants

_SRGB_TO_XYZ = np.array(constants.SRGB_TO_XYZ, dtype=np.float64)
_WHITE_POINT = np.array(constants.D65_WHITE_POINT, dtype=np.float64)


@dataclass(frozen=True)
class RgbColor:
    """8-bit sRGB channel values."""

    r: int
    g: int
    b: int


@dataclass(frozen=True)
class LabColor:
    """CIELAB coordinates relative to the D65 white point."""

    l: float  # noqa: E741
    a: float
    b: float


def _srgb_to_linear(srgb: np.ndarray) -> np.ndarray:
    """Invert the sRGB transfer function.

    Args:
        srgb: sRGB values [0, 1]

    Returns:
        Linear-light values [0, 1]
    """
    mask = srgb <= constants.SRGB_LINEAR_THRESHOLD
    return np.where(
        mask,
        srgb / 12.92,
        np.power((srgb + 0.055) / 1.055, 2.4),
    )


def _cie_f(t: np.ndarray) -> np.ndarray:
    mask = t > constants.CIE_EPSILON
    return np.where(
        mask,
        np.cbrt(t),
        t * (29 / 6) ** 2 / 3 + 4 / 29,
    )


def srgb_to_lab_array(rgb: np.ndarray) -> np.ndarray:
    """Convert 8-bit sRGB triples to CIELAB (D65).

    Args:
        rgb: Array of shape (..., 3) with channel values in [0, 255]

    Returns:
        float64 array of the same shape holding (L, a, b)
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    if rgb.shape[-1:] != (3,):
        raise ValueError(f"Expected trailing dimension of 3, got shape {rgb.shape}")

    linear = _srgb_to_linear(rgb / 255.0)
    xyz = linear @ _SRGB_TO_XYZ.T
    f = _cie_f(xyz / _WHITE_POINT)
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]

    lab = np.empty_like(f)
    lab[..., 0] = 116.0 * fy - 16.0
    lab[..., 1] = 500.0 * (fx - fy)
    lab[..., 2] = 200.0 * (fy - fz)
    return lab


def rgb_to_lab(r: int, g: int, b: int) -> LabColor:
    """Convert one 8-bit sRGB color to CIELAB."""
    l_value, a_value, b_value = srgb_to_lab_array(np.array([r, g, b]))
    return LabColor(l=float(l_value), a=float(a_value), b=float(b_value))
