"""Test utilities for code built on pathwise.

``ManualScheduler`` stands in for the event loop so debounce behaviour
can be asserted without sleeping::

    scheduler = ManualScheduler()
    binding = ReactiveBinding(generator, "/a/[id]", source,
                              update_delay=0.5, scheduler=scheduler)
    binding.update_params(params={"id": "2"})
    scheduler.advance(0.5)
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class ManualTimer:
    """A scheduled callback on a ``ManualScheduler``."""

    when: float
    callback: Callable[[], Any]
    cancelled: bool = False
    fired: bool = False

    def cancel(self) -> None:
        self.cancelled = True


@dataclass(slots=True)
class ManualScheduler:
    """Deterministic scheduler driven by ``advance()``."""

    now: float = 0.0
    timers: list[ManualTimer] = field(default_factory=list)

    def call_later(self, delay: float, callback: Callable[[], Any]) -> ManualTimer:
        timer = ManualTimer(when=self.now + delay, callback=callback)
        self.timers.append(timer)
        return timer

    @property
    def pending(self) -> list[ManualTimer]:
        return [t for t in self.timers if not t.cancelled and not t.fired]

    def advance(self, seconds: float = 0.0) -> int:
        """Move the clock forward and fire due timers in order.

        Returns the number of callbacks fired.
        """
        self.now += seconds
        fired = 0
        while True:
            due = sorted(
                (t for t in self.pending if t.when <= self.now),
                key=lambda t: t.when,
            )
            if not due:
                return fired
            timer = due[0]
            timer.fired = True
            timer.callback()
            fired += 1
