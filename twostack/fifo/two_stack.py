"""
TwoStackQueue: a FIFO built from two plain Python lists.

Layout
------
  ``_younger`` : push side.  New values are appended to its tail.
  ``_older``   : pop side.   Its tail holds the current front of the queue.

Front-to-back order is always ``reversed(_older) + _younger``.

When ``_older`` runs dry, ``pop()`` performs a *transfer step*: the two
lists are swapped and ``_older`` is reversed in place, so the oldest value
ends up at its tail.  Each value crosses from ``_younger`` to ``_older`` at
most once between its push and its pop, which keeps ``push`` and ``pop``
amortized O(1).

``split()`` hands both lists to the caller and retires the queue.  The
lists come back in raw storage order; use ``front_to_back()`` to get the
logical order.

Not thread-safe.  Callers sharing a queue across threads wrap it in their
own lock.
"""

from dataclasses import dataclass
from typing import Generic, List, Optional, Sequence, Tuple, TypeVar

from twostack.logger import get_logger

log = get_logger("fifo")

T = TypeVar("T")


class QueueConsumedError(RuntimeError):
    """Raised when a queue is used after ``split()`` gave its contents away."""


@dataclass
class TransferStats:
    """Counters for transfer steps performed by ``pop()``.

    Attributes
    ----------
    transfers : int
        Number of transfer steps (swap + reverse) performed.
    moved : int
        Total number of values moved from the push side to the pop side.
    """

    transfers: int = 0
    moved: int = 0


class TwoStackQueue(Generic[T]):
    """First-in-first-out queue over any value type.

    ``pop()`` returns ``None`` on an empty queue.  ``None`` itself may be
    queued; check ``is_empty()`` first when that matters.
    """

    def __init__(self) -> None:
        self._older: List[T] = []
        self._younger: List[T] = []
        self._stats = TransferStats()
        self._consumed = False

    # ── public API ───────────────────────────────────────────────────

    def push(self, value: T) -> None:
        """Append *value* to the back of the queue."""
        self._check_usable()
        self._younger.append(value)

    def pop(self) -> Optional[T]:
        """Remove and return the front value, or None if the queue is empty."""
        self._check_usable()
        if not self._older:
            if not self._younger:
                return None
            self._transfer()
        return self._older.pop()

    def is_empty(self) -> bool:
        self._check_usable()
        return not self._older and not self._younger

    def split(self) -> Tuple[List[T], List[T]]:
        """Give up both buffers and retire the queue.

        Returns ``(older, younger)`` as stored: ``older`` is newest-first,
        ``younger`` is oldest-first.  The returned lists are the queue's own
        storage, not copies; the queue keeps no reference to them and every
        later call on it raises ``QueueConsumedError``.
        """
        self._check_usable()
        older, younger = self._older, self._younger
        self._older = []
        self._younger = []
        self._consumed = True
        log.debug("split: handed out older=%d younger=%d", len(older), len(younger))
        return older, younger

    @property
    def stats(self) -> TransferStats:
        """Snapshot of the transfer counters (a copy, safe to keep)."""
        return TransferStats(self._stats.transfers, self._stats.moved)

    def __len__(self) -> int:
        self._check_usable()
        return len(self._older) + len(self._younger)

    def __repr__(self) -> str:
        if self._consumed:
            return f"{type(self).__name__}(<consumed>)"
        return f"{type(self).__name__}({front_to_back(self._older, self._younger)!r})"

    # ── internals ────────────────────────────────────────────────────

    def _transfer(self) -> None:
        # Only called with _older empty and _younger non-empty.
        self._older, self._younger = self._younger, self._older
        self._older.reverse()
        self._stats.transfers += 1
        self._stats.moved += len(self._older)
        log.debug("transfer #%d: moved %d values", self._stats.transfers, len(self._older))

    def _check_usable(self) -> None:
        if self._consumed:
            raise QueueConsumedError("queue was split; its contents belong to the caller")


def front_to_back(older: Sequence[T], younger: Sequence[T]) -> List[T]:
    """Rebuild front-to-back order from the pair returned by ``split()``."""
    return list(reversed(older)) + list(younger)
