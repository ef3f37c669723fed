"""
Demo: exercise the grayscale map and the two-list queue end to end.

Run from the repo root:
    python -m twostack.demo
    python -m twostack.demo --trace 50000 --seed 7

Steps:
  1. Build a blank 1024x576 map and check its size and pixel count.
  2. Run the scripted char and float queue scenarios.
  3. Run a random push/pop trace against collections.deque and report
     how many values the transfer steps moved.

Exit code 0 if every check passes, 1 otherwise.
"""

import argparse
import random
from collections import deque
from typing import List, Optional

from twostack.config import Settings
from twostack.fifo import TwoStackQueue, TransferStats
from twostack.imaging import blank_map, DEFAULT_WIDTH, DEFAULT_HEIGHT
from twostack.logger import get_logger

log = get_logger("demo")


def _check(condition: bool, message: str) -> None:
    if not condition:
        raise ValueError(message)


def check_map() -> None:
    image = blank_map((DEFAULT_WIDTH, DEFAULT_HEIGHT))
    _check(image.size == (1024, 576), f"map size is {image.size}, expected (1024, 576)")
    _check(len(image.pixels) == 1024 * 576, f"map holds {len(image.pixels)} pixels")
    log.info("Map %dx%d allocated (%d pixels).", image.width, image.height, len(image.pixels))


def run_char_scenario() -> List[Optional[str]]:
    """push a, b; pop; push c; pop; pop; pop -> a, b, c, None."""
    q: TwoStackQueue[str] = TwoStackQueue()
    q.push("a")
    q.push("b")
    popped = [q.pop()]
    _check(not q.is_empty(), "queue reported empty while holding values")
    q.push("c")
    popped.append(q.pop())
    _check(not q.is_empty(), "queue reported empty while holding values")
    popped.append(q.pop())
    _check(q.is_empty(), "queue not empty after draining")
    popped.append(q.pop())
    _check(q.is_empty(), "queue not empty after draining")
    _check(popped == ["a", "b", "c", None], f"popped {popped}, expected ['a', 'b', 'c', None]")
    log.info("Char scenario popped %s", popped)
    return popped


def run_float_scenario() -> List[Optional[float]]:
    q: TwoStackQueue[float] = TwoStackQueue()
    q.push(0.5)
    q.push(1.5)
    popped = [q.pop(), q.pop(), q.pop()]
    _check(popped == [0.5, 1.5, None], f"popped {popped}, expected [0.5, 1.5, None]")
    log.info("Float scenario popped %s", popped)
    return popped


def run_trace(length: int, seed: int) -> TransferStats:
    """Random push/pop trace checked step by step against a deque.

    Returns the queue's transfer counters.  Every value is moved at most
    once, so ``moved`` can never exceed the number of pushes.
    """
    rng = random.Random(seed)
    q: TwoStackQueue[int] = TwoStackQueue()
    reference: deque = deque()
    pushes = 0

    for step in range(length):
        if rng.random() < 0.55:
            q.push(step)
            reference.append(step)
            pushes += 1
        else:
            expected = reference.popleft() if reference else None
            got = q.pop()
            _check(got == expected, f"step {step}: popped {got!r}, expected {expected!r}")
        _check(q.is_empty() == (not reference), f"step {step}: is_empty() disagrees with reference")

    stats = q.stats
    _check(stats.moved <= pushes, f"moved {stats.moved} values for {pushes} pushes")
    log.info(
        "Trace of %d ops: %d pushes, %d transfers, %d values moved, %d left queued.",
        length, pushes, stats.transfers, stats.moved, len(q),
    )
    return stats


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Two-list FIFO queue demo")
    parser.add_argument("--trace", type=int, default=None,
                        help="number of random push/pop operations (default from settings.json)")
    parser.add_argument("--seed", type=int, default=None,
                        help="random seed for the trace (default from settings.json)")
    args = parser.parse_args(argv)

    try:
        settings = Settings()
        trace = args.trace if args.trace is not None else settings.get_trace_length()
        seed = args.seed if args.seed is not None else settings.get_trace_seed()
        check_map()
        run_char_scenario()
        run_float_scenario()
        run_trace(trace, seed)
    except ValueError as e:
        log.error("Demo check failed: %s", e)
        return 1
    log.info("All checks passed.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
