"""twostack.imaging — fixed-size 8-bit grayscale pixel map."""

from twostack.imaging.grayscale import (
    GrayscaleMap,
    new_map,
    blank_map,
    DEFAULT_WIDTH,
    DEFAULT_HEIGHT,
    DEFAULT_SIZE,
)

__all__ = [
    "GrayscaleMap",
    "new_map",
    "blank_map",
    "DEFAULT_WIDTH",
    "DEFAULT_HEIGHT",
    "DEFAULT_SIZE",
]
