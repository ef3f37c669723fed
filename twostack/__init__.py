"""twostack — a two-list FIFO queue and a fixed-size grayscale pixel map."""

from twostack.fifo import TwoStackQueue, QueueConsumedError, front_to_back
from twostack.imaging import GrayscaleMap, new_map, blank_map

__all__ = [
    "TwoStackQueue",
    "QueueConsumedError",
    "front_to_back",
    "GrayscaleMap",
    "new_map",
    "blank_map",
]
