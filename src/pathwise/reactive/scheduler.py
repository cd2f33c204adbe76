"""Cancellable delayed calls for debounced propagation.

A scheduler is anything with ``call_later(delay, callback)`` returning a
handle with ``cancel()``. An asyncio event loop already qualifies; the
default ``LoopScheduler`` looks up the running loop each time so a
binding can be created before the loop starts.
"""

import asyncio
from collections.abc import Callable
from typing import Any, Protocol


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def call_later(self, delay: float, callback: Callable[[], Any]) -> TimerHandle: ...


class LoopScheduler:
    """Schedule on the running asyncio loop.

    Raises ``RuntimeError`` when no loop is running; pass an explicit
    scheduler to use a binding outside of async code.
    """

    __slots__ = ()

    def call_later(self, delay: float, callback: Callable[[], Any]) -> asyncio.TimerHandle:
        loop = asyncio.get_running_loop()
        return loop.call_later(delay, callback)
