"""
GrayscaleMap: a rectangle of 8-bit grayscale pixels.

Pixels are stored row-major in one flat ``uint8`` array of length
``width * height``.  ``as_image()`` exposes the same memory as a
``(height, width)`` array for code that wants 2-D indexing.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple, Union

import numpy as np

# ---------------------------------------------------------------------------
# Default map size used by the demo
# ---------------------------------------------------------------------------
DEFAULT_WIDTH: int = 1024
DEFAULT_HEIGHT: int = 576
DEFAULT_SIZE: Tuple[int, int] = (DEFAULT_WIDTH, DEFAULT_HEIGHT)

PixelSource = Union[np.ndarray, Sequence[int], bytes]


@dataclass
class GrayscaleMap:
    """Flat pixel buffer plus its ``(width, height)``.

    ``pixels`` is owned by the map.  Write into it in place; do not
    reassign it with an array of a different length.
    """

    pixels: np.ndarray
    size: Tuple[int, int]

    @property
    def width(self) -> int:
        return self.size[0]

    @property
    def height(self) -> int:
        return self.size[1]

    def pixel(self, x: int, y: int) -> int:
        """Value at column *x*, row *y*."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} map")
        return int(self.pixels[y * self.width + x])

    def as_image(self) -> np.ndarray:
        """2-D ``(height, width)`` view of ``pixels`` (no copy)."""
        return self.pixels.reshape(self.height, self.width)


def new_map(size: Tuple[int, int], pixels: PixelSource) -> GrayscaleMap:
    """Build a map from *pixels*, which must hold exactly width * height values."""
    width, height = int(size[0]), int(size[1])
    if width < 0 or height < 0:
        raise ValueError(f"map size must be non-negative, got {size!r}")
    if isinstance(pixels, (bytes, bytearray)):
        data = np.frombuffer(pixels, dtype=np.uint8).copy()
    else:
        raw = np.array(pixels).reshape(-1)
        if raw.size and raw.dtype.kind not in "iu":
            raise ValueError(f"pixels must be integers, got dtype {raw.dtype}")
        if raw.size and (raw.min() < 0 or raw.max() > 255):
            raise ValueError(
                f"pixel values must be in 0..255, got range {raw.min()}..{raw.max()}"
            )
        data = raw.astype(np.uint8)
    if len(data) != width * height:
        raise ValueError(
            f"expected {width * height} pixels for a {width}x{height} map, got {len(data)}"
        )
    return GrayscaleMap(pixels=data, size=(width, height))


def blank_map(size: Tuple[int, int] = DEFAULT_SIZE) -> GrayscaleMap:
    """Zero-filled map, allocated once."""
    width, height = int(size[0]), int(size[1])
    if width < 0 or height < 0:
        raise ValueError(f"map size must be non-negative, got {size!r}")
    return GrayscaleMap(pixels=np.zeros(width * height, dtype=np.uint8), size=(width, height))
