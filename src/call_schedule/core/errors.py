"""Error types."""

from __future__ import annotations


class CallScheduleError(Exception):
    """Base exception for this package."""


class ScheduleValidationError(CallScheduleError, ValueError):
    """Invalid wrapper input (only raised when validation is enabled)."""

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class SchedulerUnavailableError(CallScheduleError, RuntimeError):
    """Raised when no event loop is available to arm a timer on."""


__all__ = [
    "CallScheduleError",
    "ScheduleValidationError",
    "SchedulerUnavailableError",
]
