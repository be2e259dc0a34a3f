"""Wrapper configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class ScheduleConfig:
    """Settings shared by the wrapper factories."""

    # Waits are multiplied by this factor; 0.001 makes them milliseconds.
    time_unit_seconds: float = 1.0
    validate_inputs: bool = False

    def to_seconds(self, wait: float) -> float:
        return wait * self.time_unit_seconds

    def validate(self) -> None:
        if isinstance(self.time_unit_seconds, bool) or not isinstance(
            self.time_unit_seconds, (int, float)
        ):
            raise ValueError("time_unit_seconds must be a number")
        if self.time_unit_seconds <= 0:
            raise ValueError("time_unit_seconds must be > 0")
        if not isinstance(self.validate_inputs, bool):
            raise ValueError("validate_inputs must be bool")


DEFAULT_CONFIG = ScheduleConfig()


__all__ = [
    "ScheduleConfig",
    "DEFAULT_CONFIG",
]
