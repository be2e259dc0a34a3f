from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from call_schedule.core.timers import ManualScheduler  # noqa: E402


class CallRecorder:
    """Callback stand-in recording arguments and the virtual time of each call."""

    def __init__(self, scheduler: ManualScheduler | None = None) -> None:
        self._scheduler = scheduler
        self.calls: list[tuple[tuple[Any, ...], dict[str, Any]]] = []
        self.times: list[float] = []

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        self.calls.append((args, kwargs))
        if self._scheduler is not None:
            self.times.append(self._scheduler.now)

    @property
    def count(self) -> int:
        return len(self.calls)

    @property
    def args(self) -> list[tuple[Any, ...]]:
        return [args for args, _ in self.calls]


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def recorder(scheduler: ManualScheduler) -> CallRecorder:
    return CallRecorder(scheduler)
