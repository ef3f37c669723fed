"""
Unit tests for twostack.fifo — push / pop / is_empty and transfer cost.

Run:
    python -m pytest tests/test_two_stack_queue.py -v
or:
    python tests/test_two_stack_queue.py
"""

import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import random
from collections import deque

from twostack.fifo import TwoStackQueue, TransferStats


# ── helpers ──────────────────────────────────────────────────────────────

def _drain(q: TwoStackQueue) -> list:
    out = []
    while not q.is_empty():
        out.append(q.pop())
    return out


# ── basic FIFO ───────────────────────────────────────────────────────────

def test_new_queue_is_empty():
    q = TwoStackQueue()
    assert q.is_empty()
    assert len(q) == 0
    assert q.pop() is None


def test_fifo_order_without_interleaving():
    q = TwoStackQueue()
    values = list(range(20))
    for v in values:
        q.push(v)
    assert [q.pop() for _ in values] == values
    assert q.pop() is None


def test_char_scenario():
    """push a, b; pop a; push c; pop b; pop c; pop -> empty."""
    q = TwoStackQueue()
    q.push("a")
    q.push("b")
    assert q.pop() == "a"
    assert not q.is_empty()
    q.push("c")
    assert not q.is_empty()
    assert q.pop() == "b"
    assert not q.is_empty()
    assert q.pop() == "c"
    assert q.is_empty()
    assert q.pop() is None
    assert q.is_empty()


def test_float_values():
    q = TwoStackQueue()
    q.push(0.5)
    q.push(1.5)
    assert q.pop() == 0.5
    assert q.pop() == 1.5
    assert q.pop() is None


def test_arbitrary_objects_keep_identity():
    """The queue hands back the very objects it was given."""
    a, b = {"id": 1}, ["x"]
    q = TwoStackQueue()
    q.push(a)
    q.push(b)
    assert q.pop() is a
    assert q.pop() is b


def test_push_after_partial_drain_goes_to_back():
    q = TwoStackQueue()
    for v in (1, 2, 3):
        q.push(v)
    assert q.pop() == 1       # transfer: older = [3, 2]
    q.push(4)                 # lands in younger
    q.push(5)
    assert _drain(q) == [2, 3, 4, 5]


def test_len_tracks_both_buffers():
    q = TwoStackQueue()
    for v in range(5):
        q.push(v)
    q.pop()
    q.push(5)
    assert len(q) == 5


def test_none_can_be_queued():
    """A stored None is only distinguishable from 'empty' via is_empty()."""
    q = TwoStackQueue()
    q.push(None)
    assert not q.is_empty()
    assert q.pop() is None
    assert q.is_empty()


def test_repr_shows_front_to_back():
    q = TwoStackQueue()
    for v in (1, 2, 3):
        q.push(v)
    q.pop()
    q.push(4)
    assert repr(q) == "TwoStackQueue([2, 3, 4])"


# ── interleaving against a reference deque ───────────────────────────────

def test_random_interleaving_matches_deque():
    rng = random.Random(1234)
    q = TwoStackQueue()
    ref = deque()
    for step in range(5000):
        if rng.random() < 0.5:
            q.push(step)
            ref.append(step)
        else:
            expected = ref.popleft() if ref else None
            assert q.pop() == expected
        assert q.is_empty() == (len(ref) == 0)
        assert len(q) == len(ref)
    assert _drain(q) == list(ref)


# ── transfer cost ────────────────────────────────────────────────────────

def test_no_transfer_on_empty_pop():
    q = TwoStackQueue()
    q.pop()
    q.pop()
    assert q.stats == TransferStats(transfers=0, moved=0)


def test_single_transfer_for_batch():
    q = TwoStackQueue()
    for v in range(10):
        q.push(v)
    _drain(q)
    stats = q.stats
    assert stats.transfers == 1
    assert stats.moved == 10


def test_stats_is_a_snapshot():
    q = TwoStackQueue()
    q.push(1)
    before = q.stats
    q.pop()
    assert before.transfers == 0
    assert q.stats.transfers == 1


def test_moves_bounded_by_pushes_over_long_trace():
    """Each value crosses into the pop side at most once: O(N) total work."""
    rng = random.Random(99)
    q = TwoStackQueue()
    pushes = 0
    ops = 20000
    for step in range(ops):
        if rng.random() < 0.6:
            q.push(step)
            pushes += 1
        else:
            q.pop()
    stats = q.stats
    assert stats.moved <= pushes
    assert stats.transfers <= stats.moved
    assert stats.moved + pushes <= 2 * ops


# ── run as script ────────────────────────────────────────────────────────

if __name__ == "__main__":
    tests = [v for k, v in sorted(globals().items()) if k.startswith("test_")]
    for fn in tests:
        fn()
        print(f"  PASS  {fn.__name__}")
    print(f"\nAll {len(tests)} tests passed.")
