"""Asyncio-backed timer scheduling."""

from __future__ import annotations

import asyncio
from collections.abc import Callable

from .errors import SchedulerUnavailableError


class AsyncioScheduler:
    """Arms timers with ``loop.call_later``.

    Without an explicit loop the running loop is resolved on every
    ``schedule`` call, so wrappers may be built before a loop exists.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def _resolve_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is not None:
            return self._loop
        try:
            return asyncio.get_running_loop()
        except RuntimeError as exc:
            raise SchedulerUnavailableError(
                "no running event loop; pass AsyncioScheduler(loop=...) or another scheduler"
            ) from exc

    def schedule(self, action: Callable[[], object], delay: float) -> asyncio.TimerHandle:
        return self._resolve_loop().call_later(delay, action)


__all__ = [
    "AsyncioScheduler",
]
