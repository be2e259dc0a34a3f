"""Public package exports for call-rate control wrappers."""

from .config import ScheduleConfig
from .core.async_timers import AsyncioScheduler
from .core.errors import CallScheduleError, ScheduleValidationError, SchedulerUnavailableError
from .core.timers import ManualScheduler, Scheduler, TimerHandle
from .postpone import Postponed, postpone
from .throttle import BlockingThrottle, DeferringThrottle, blocking_throttle, deferring_throttle

__all__ = [
    "postpone",
    "blocking_throttle",
    "deferring_throttle",
    "Postponed",
    "BlockingThrottle",
    "DeferringThrottle",
    "ScheduleConfig",
    "Scheduler",
    "TimerHandle",
    "AsyncioScheduler",
    "ManualScheduler",
    "CallScheduleError",
    "ScheduleValidationError",
    "SchedulerUnavailableError",
]
