"""Leading-edge throttles.

``BlockingThrottle`` runs the first call of a burst immediately and drops
every further call until ``delay`` has elapsed. ``DeferringThrottle`` keeps
the arguments of the last dropped call and replays them once the window
closes; that replay opens a new full-length window of its own.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Concatenate, Generic, ParamSpec, TypeVar, overload

from .config import ScheduleConfig
from .core.timers import Scheduler, TimerHandle
from .wrapper_shared import prepare_wrapper

P = ParamSpec("P")
R = TypeVar("R")

logger = logging.getLogger("call_schedule")


class BlockingThrottle(Generic[P]):
    """Allows at most one call per cooldown window."""

    def __init__(
        self,
        callback: Callable[P, object],
        delay: float,
        *,
        scheduler: Scheduler,
    ) -> None:
        self._callback = callback
        self._delay = delay
        self._scheduler = scheduler
        self._timer: TimerHandle | None = None
        self._blocked = False

    @property
    def callback(self) -> Callable[P, object]:
        return self._callback

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def blocked(self) -> bool:
        return self._blocked

    def __call__(self, *args: P.args, **kwargs: P.kwargs) -> None:
        if self._blocked:
            self._on_blocked_call(args, kwargs)
            return
        self._open_window()
        self._callback(*args, **kwargs)

    def _open_window(self) -> None:
        # Armed before the callback runs so a raising callback cannot leave
        # the gate closed without a timer to reopen it.
        self._blocked = True
        try:
            self._timer = self._scheduler.schedule(self._on_window_closed, self._delay)
        except Exception:
            self._blocked = False
            self._timer = None
            raise

    def _on_blocked_call(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        logger.debug("blocking_throttle dropped call callback=%r", self._callback)

    def _on_window_closed(self) -> None:
        self._timer = None
        self._blocked = False


class DeferringThrottle(BlockingThrottle[P]):
    """Blocking throttle that replays the last blocked call after the window."""

    def __init__(
        self,
        callback: Callable[P, object],
        delay: float,
        *,
        scheduler: Scheduler,
    ) -> None:
        super().__init__(callback, delay, scheduler=scheduler)
        self._deferred = False
        self._last_call: tuple[tuple[Any, ...], dict[str, Any]] | None = None

    @property
    def deferred(self) -> bool:
        return self._deferred

    def _open_window(self) -> None:
        self._deferred = False
        super()._open_window()

    def _on_blocked_call(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        if not self._deferred:
            logger.debug("deferring_throttle deferred call callback=%r", self._callback)
        self._last_call = (args, kwargs)
        self._deferred = True

    def _on_window_closed(self) -> None:
        self._timer = None
        if not self._deferred or self._last_call is None:
            self._blocked = False
            return

        args, kwargs = self._last_call
        self._last_call = None
        # Stay blocked: the trailing call opens a fresh window.
        self._open_window()
        logger.debug("deferring_throttle trailing call callback=%r", self._callback)
        self._callback(*args, **kwargs)


@overload
def blocking_throttle(
    callback: Callable[P, object],
    wait: float,
    context: None = None,
    *,
    scheduler: Scheduler | None = None,
    config: ScheduleConfig | None = None,
) -> BlockingThrottle[P]: ...


@overload
def blocking_throttle(
    callback: Callable[Concatenate[R, P], object],
    wait: float,
    context: R,
    *,
    scheduler: Scheduler | None = None,
    config: ScheduleConfig | None = None,
) -> BlockingThrottle[P]: ...


def blocking_throttle(
    callback: Callable[..., object],
    wait: float,
    context: Any = None,
    *,
    scheduler: Scheduler | None = None,
    config: ScheduleConfig | None = None,
) -> BlockingThrottle[Any]:
    """Return a wrapper that blocks all following calls for ``wait`` after each run.

    Typical waits for UI-rate events: 0.06 (16 fps), 0.04 (25 fps), 0.02 (50 fps).
    """

    bound, delay, resolved_scheduler = prepare_wrapper(
        callback,
        wait,
        context,
        scheduler=scheduler,
        config=config,
    )
    return BlockingThrottle(bound, delay, scheduler=resolved_scheduler)


@overload
def deferring_throttle(
    callback: Callable[P, object],
    wait: float,
    context: None = None,
    *,
    scheduler: Scheduler | None = None,
    config: ScheduleConfig | None = None,
) -> DeferringThrottle[P]: ...


@overload
def deferring_throttle(
    callback: Callable[Concatenate[R, P], object],
    wait: float,
    context: R,
    *,
    scheduler: Scheduler | None = None,
    config: ScheduleConfig | None = None,
) -> DeferringThrottle[P]: ...


def deferring_throttle(
    callback: Callable[..., object],
    wait: float,
    context: Any = None,
    *,
    scheduler: Scheduler | None = None,
    config: ScheduleConfig | None = None,
) -> DeferringThrottle[Any]:
    """Like ``blocking_throttle``, but runs once more at the end of the window
    with the last blocked call's arguments if any call was blocked.
    """

    bound, delay, resolved_scheduler = prepare_wrapper(
        callback,
        wait,
        context,
        scheduler=scheduler,
        config=config,
    )
    return DeferringThrottle(bound, delay, scheduler=resolved_scheduler)


__all__ = [
    "BlockingThrottle",
    "DeferringThrottle",
    "blocking_throttle",
    "deferring_throttle",
]
