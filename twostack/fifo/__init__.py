"""twostack.fifo — two-list FIFO queue with amortized O(1) push and pop."""

from twostack.fifo.two_stack import (
    TwoStackQueue,
    TransferStats,
    QueueConsumedError,
    front_to_back,
)

__all__ = [
    "TwoStackQueue",
    "TransferStats",
    "QueueConsumedError",
    "front_to_back",
]
