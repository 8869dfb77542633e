"""
timing.py - Tick scheduling.

Render and move ticks run on independent intervals. Everything here works
in integer microseconds read from a monotonic clock.
"""

import time

MICROSECONDS_PER_SECOND = 1_000_000


def interval_us(fps: int) -> int:
    """Microseconds between two ticks at `fps` ticks per second."""
    if fps <= 0:
        raise ValueError(f"fps must be positive, got {fps}")
    if fps > MICROSECONDS_PER_SECOND:
        raise ValueError(f"fps must be at most {MICROSECONDS_PER_SECOND}, got {fps}")
    return MICROSECONDS_PER_SECOND // fps


def is_due(now_us: int, last_us: int, interval: int) -> bool:
    return now_us - last_us >= interval


def monotonic_us() -> int:
    return time.monotonic_ns() // 1000


class TickTimer:
    """
    One periodic action. The caller asks `due()` and, after acting on a
    True answer, records the firing with `fire()`.
    """

    def __init__(self, interval: int, last_us: int = 0):
        self.interval = interval
        self.last_us = last_us

    def due(self, now_us: int) -> bool:
        return is_due(now_us, self.last_us, self.interval)

    def fire(self, now_us: int) -> None:
        self.last_us = now_us
