"""
Shared types for shadow layer effects.

Rasters are numpy arrays in (H, W, C) layout.

Supported formats:
- RGB8: uint8 (0-255), 3 channels
- RGBA8: uint8 (0-255), 4 channels
- RGBf32: float32 (0.0-1.0), 3 channels
- RGBAf32: float32 (0.0-1.0), 4 channels
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

import numpy as np


class PixelFormat(Enum):
    """Pixel format for images."""
    RGB8 = "RGB8"      # uint8, 3 channels
    RGBA8 = "RGBA8"    # uint8, 4 channels
    RGBf32 = "RGBf32"  # float32, 3 channels
    RGBAf32 = "RGBAf32"  # float32, 4 channels

    @classmethod
    def from_array(cls, arr: np.ndarray) -> "PixelFormat":
        """Detect pixel format from numpy array."""
        if arr.ndim != 3:
            raise ValueError(f"Expected 3D array, got {arr.ndim}D")

        channels = arr.shape[2]
        dtype = arr.dtype

        if channels not in (3, 4):
            raise ValueError(f"Expected 3 or 4 channels, got {channels}")

        if dtype == np.uint8:
            return cls.RGBA8 if channels == 4 else cls.RGB8
        elif dtype == np.float32 or dtype == np.float64:
            return cls.RGBAf32 if channels == 4 else cls.RGBf32
        else:
            raise ValueError(f"Unsupported dtype: {dtype}")

    @classmethod
    def resolve(cls, image: np.ndarray, format: Union["PixelFormat", str, None]) -> "PixelFormat":
        """Resolve pixel format from argument or auto-detect."""
        if format is None:
            return cls.from_array(image)
        if isinstance(format, str):
            return cls(format)
        return format

    @property
    def has_alpha(self) -> bool:
        return self in (PixelFormat.RGBA8, PixelFormat.RGBAf32)

    @property
    def is_float(self) -> bool:
        return self in (PixelFormat.RGBf32, PixelFormat.RGBAf32)


@dataclass(frozen=True)
class Expansion:
    """Insets around the content: how much the shadow expands the canvas."""
    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0

    @property
    def horizontal(self) -> int:
        return self.left + self.right

    @property
    def vertical(self) -> int:
        return self.top + self.bottom

    def as_tuple(self) -> tuple[int, int, int, int]:
        """Padding as (left, top, right, bottom)."""
        return (self.left, self.top, self.right, self.bottom)


@dataclass
class EffectResult:
    """Result of an effect stage that may grow the raster."""
    image: np.ndarray  # Output image (may be larger than input)
    offset_x: int = 0  # X offset of output relative to input origin
    offset_y: int = 0  # Y offset of output relative to input origin

