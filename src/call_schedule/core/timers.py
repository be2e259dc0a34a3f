"""Timer scheduling primitives.

A scheduler arms single-shot timers: ``schedule(action, delay)`` runs
``action`` once, no earlier than ``delay`` seconds later, on the same
logical thread as every other wrapper call.
"""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def schedule(self, action: Callable[[], object], delay: float) -> TimerHandle: ...


@dataclass(slots=True, order=True)
class ManualTimer:
    """Timer armed on a ``ManualScheduler``."""

    due: float
    seq: int
    action: Callable[[], object] = field(compare=False)
    cancelled: bool = field(default=False, compare=False)

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Deterministic scheduler driven by an explicit virtual clock.

    Timers fire only from ``advance``/``run_until_idle``, ordered by due time
    and then by scheduling order. A negative delay makes a timer due
    immediately; it fires on the next ``advance`` call, even ``advance(0)``.
    """

    def __init__(self, *, start: float = 0.0) -> None:
        self._now = float(start)
        self._queue: list[ManualTimer] = []
        self._counter = itertools.count()

    @property
    def now(self) -> float:
        return self._now

    @property
    def pending(self) -> int:
        return sum(1 for timer in self._queue if not timer.cancelled)

    def schedule(self, action: Callable[[], object], delay: float) -> ManualTimer:
        timer = ManualTimer(self._now + delay, next(self._counter), action)
        heapq.heappush(self._queue, timer)
        return timer

    def advance(self, seconds: float) -> None:
        """Move the clock forward, firing every timer that falls due.

        Timers armed by a firing action are honoured within the same call.
        An error raised by an action propagates; the clock then rests at
        that timer's due time and a later ``advance`` resumes from there.
        """

        if seconds < 0:
            raise ValueError("seconds must be >= 0")
        target = self._now + seconds
        while self._queue and self._queue[0].due <= target:
            timer = heapq.heappop(self._queue)
            if timer.cancelled:
                continue
            self._now = max(self._now, timer.due)
            timer.action()
        self._now = target

    def run_until_idle(self, *, max_timers: int = 10_000) -> None:
        fired = 0
        while self._queue:
            timer = heapq.heappop(self._queue)
            if timer.cancelled:
                continue
            fired += 1
            if fired > max_timers:
                heapq.heappush(self._queue, timer)
                raise RuntimeError(f"timers still pending after {max_timers} firings")
            self._now = max(self._now, timer.due)
            timer.action()


__all__ = [
    "TimerHandle",
    "Scheduler",
    "ManualTimer",
    "ManualScheduler",
]
