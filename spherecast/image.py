"""
Frame buffer and Targa output.

Image holds linear colors in a (height, width, 3) float64 array indexed
[y, x] with y = 0 at the bottom, and keeps track of the brightest channel
written so far. Writing maps channels to bytes either by clamping at 1.0
or by rescaling against that maximum.
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image as PILImage

from .vec3 import Color

logger = logging.getLogger(__name__)


class Image:
    """A width x height grid of linear colors."""

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Image dimensions must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self._pixels = np.zeros((height, width, 3), dtype=np.float64)
        self._max = 1.0

    @classmethod
    def from_array(cls, hdr: np.ndarray) -> Image:
        """Build an image from a (height, width, 3) linear color array."""
        height, width = hdr.shape[:2]
        image = cls(width, height)
        image._pixels[...] = hdr
        image._max = max(1.0, float(hdr.max()))
        return image

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def max(self) -> float:
        """Brightest channel written so far (never below 1.0)."""
        return self._max

    def _check_bounds(self, x: int, y: int) -> None:
        if x < 0 or x >= self._width or y < 0 or y >= self._height:
            raise IndexError(f"Pixel ({x}, {y}) outside {self._width}x{self._height} image")

    def pixel(self, x: int, y: int) -> Color:
        self._check_bounds(x, y)
        return Color.from_array(self._pixels[y, x].copy())

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        self._check_bounds(x, y)
        self._pixels[y, x] = color.to_array()
        self._max = max(self._max, color.max_component())

    def fill(self, color: Color) -> None:
        self._pixels[...] = color.to_array()
        self._max = max(self._max, color.max_component())

    def to_array(self) -> np.ndarray:
        """Return a copy of the linear color array."""
        return self._pixels.copy()

    def to_ldr(self, scale_color: bool = False) -> np.ndarray:
        """Convert to 8-bit channels.

        Args:
            scale_color: Map [0, max] onto [0, 255] instead of clamping at 1.0

        Returns:
            uint8 array of shape (height, width, 3), bottom row first
        """
        if scale_color:
            scaled = self._pixels / self._max
        else:
            scaled = np.minimum(self._pixels, 1.0)
        return (np.clip(scaled, 0.0, 1.0) * 255).astype(np.uint8)

    def write_tga(self, filename: Union[str, Path], scale_color: bool = False) -> Path:
        """Write a 24-bit uncompressed Targa file.

        Args:
            filename: Output path; parent directories are created
            scale_color: Rescale against the brightest channel instead of clamping

        Returns:
            The path written
        """
        return self.save(filename, scale_color, format='TGA')

    def save(self, filename: Union[str, Path], scale_color: bool = False, format: str = None) -> Path:
        """Write the image with Pillow; the extension picks the format unless given."""
        path = Path(filename)
        path.parent.mkdir(parents=True, exist_ok=True)

        # Pillow images are stored top row first
        ldr = np.ascontiguousarray(np.flipud(self.to_ldr(scale_color)))
        PILImage.fromarray(ldr).save(path, format=format)

        logger.info("Wrote %dx%d image to %s (scale_color=%s)", self._width, self._height, path, scale_color)
        return path

    def __repr__(self) -> str:
        return f"Image({self._width}x{self._height}, max={self._max:.4f})"


def save_image(hdr: np.ndarray, filename: Union[str, Path], scale_color: bool = False) -> Path:
    """Save a rendered (height, width, 3) linear color array.

    `.tga` files (and paths without an extension) are written as Targa;
    other extensions go through Pillow's format detection.
    """
    path = Path(filename)
    image = Image.from_array(hdr)
    if path.suffix.lower() in ('.tga', ''):
        return image.write_tga(path, scale_color)
    return image.save(path, scale_color)
