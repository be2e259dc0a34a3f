"""Delayed execution of every call."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, Concatenate, Generic, ParamSpec, TypeVar, overload

from .config import ScheduleConfig
from .core.timers import Scheduler
from .wrapper_shared import prepare_wrapper

P = ParamSpec("P")
R = TypeVar("R")


class Postponed(Generic[P]):
    """Runs the callback ``delay`` seconds after each call.

    Calls never coalesce: every call arms its own timer carrying its own
    arguments, and nothing is shared between them.
    """

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

    @property
    def callback(self) -> Callable[P, object]:
        return self._callback

    @property
    def delay(self) -> float:
        return self._delay

    def __call__(self, *args: P.args, **kwargs: P.kwargs) -> None:
        self._scheduler.schedule(functools.partial(self._callback, *args, **kwargs), self._delay)


@overload
def postpone(
    callback: Callable[P, object],
    wait: float,
    context: None = None,
    *,
    scheduler: Scheduler | None = None,
    config: ScheduleConfig | None = None,
) -> Postponed[P]: ...


@overload
def postpone(
    callback: Callable[Concatenate[R, P], object],
    wait: float,
    context: R,
    *,
    scheduler: Scheduler | None = None,
    config: ScheduleConfig | None = None,
) -> Postponed[P]: ...


def postpone(
    callback: Callable[..., object],
    wait: float,
    context: Any = None,
    *,
    scheduler: Scheduler | None = None,
    config: ScheduleConfig | None = None,
) -> Postponed[Any]:
    """Return a wrapper that executes ``callback`` only after ``wait`` has elapsed.

    ``context``, when given, is bound as the callback's first argument.
    """

    bound, delay, resolved_scheduler = prepare_wrapper(
        callback,
        wait,
        context,
        scheduler=scheduler,
        config=config,
    )
    return Postponed(bound, delay, scheduler=resolved_scheduler)


__all__ = [
    "Postponed",
    "postpone",
]
