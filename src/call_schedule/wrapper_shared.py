"""Shared helpers for the wrapper factories."""

from __future__ import annotations

import functools
from collections.abc import Callable

from .config import DEFAULT_CONFIG, ScheduleConfig
from .core.async_timers import AsyncioScheduler
from .core.errors import ScheduleValidationError
from .core.timers import Scheduler


def bind_context(callback: Callable[..., object], context: object | None) -> Callable[..., object]:
    """Capture ``context`` as the callback's receiver (first argument)."""

    if context is None:
        return callback
    return functools.partial(callback, context)


def resolve_config(config: ScheduleConfig | None) -> ScheduleConfig:
    resolved = config or DEFAULT_CONFIG
    resolved.validate()
    return resolved


def resolve_scheduler(scheduler: Scheduler | None) -> Scheduler:
    return scheduler if scheduler is not None else AsyncioScheduler()


def validate_wrapper_inputs(callback: object, wait: object) -> None:
    if not callable(callback):
        raise ScheduleValidationError("callback must be callable", field="callback")
    if isinstance(wait, bool) or not isinstance(wait, (int, float)):
        raise ScheduleValidationError("wait must be a number", field="wait")
    if wait < 0:
        raise ScheduleValidationError("wait must be >= 0", field="wait")


def prepare_wrapper(
    callback: Callable[..., object],
    wait: float,
    context: object | None,
    *,
    scheduler: Scheduler | None,
    config: ScheduleConfig | None,
) -> tuple[Callable[..., object], float, Scheduler]:
    """Resolve what a wrapper needs: bound callback, delay in seconds, scheduler."""

    resolved = resolve_config(config)
    if resolved.validate_inputs:
        validate_wrapper_inputs(callback, wait)
    return (
        bind_context(callback, context),
        resolved.to_seconds(wait),
        resolve_scheduler(scheduler),
    )


__all__ = [
    "bind_context",
    "resolve_config",
    "resolve_scheduler",
    "validate_wrapper_inputs",
    "prepare_wrapper",
]
