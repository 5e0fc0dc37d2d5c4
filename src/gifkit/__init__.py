"""Structural decoder for GIF containers."""

from __future__ import annotations

__version__ = "0.3.0"

__all__ = ["GifParser", "decode", "try_decode"]


def __getattr__(name: str):
    if name in __all__:
        from gifkit.api import processor

        return getattr(processor, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + __all__)
