"""Debounced two-way sync between an external value and local state.

``ThrottledSync`` is the generic form of what a ``ReactiveBinding`` does
for route params: it mirrors an external getter into local state and
pushes local edits back through a setter after a delay::

    sync = ThrottledSync(
        getter=lambda: store["filters"],
        setter=lambda value: store.update(filters=value),
        delay=0.5,
        scheduler=scheduler,
    )
    sync.state = {"color": "red"}   # setter runs 0.5s later
    sync.external_changed()         # call when the store changes
"""

import copy
import logging
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from pathwise.reactive.scheduler import LoopScheduler, Scheduler, TimerHandle

logger = logging.getLogger("pathwise.reactive")


T = TypeVar("T")


class ThrottledSync(Generic[T]):
    """Mirror of an external value with debounced write-back.

    External changes are adopted only when they differ from the last
    synced snapshot. Local changes reach the setter once the delay has
    passed without another local change.
    """

    __slots__ = (
        "_closed",
        "_debug",
        "_delay",
        "_getter",
        "_previous",
        "_scheduler",
        "_setter",
        "_state",
        "_timer",
    )

    def __init__(
        self,
        getter: Callable[[], T],
        setter: Callable[[T], Any],
        *,
        delay: float = 0.0,
        scheduler: Scheduler | None = None,
        debug: bool = False,
    ) -> None:
        self._getter = getter
        self._setter = setter
        self._delay = delay
        self._scheduler: Scheduler = scheduler or LoopScheduler()
        self._debug = debug
        self._timer: TimerHandle | None = None
        self._closed = False
        initial = copy.deepcopy(getter())
        self._state: T = initial
        self._previous: T = copy.deepcopy(initial)

    @property
    def state(self) -> T:
        return self._state

    @state.setter
    def state(self, value: T) -> None:
        self._state = copy.deepcopy(value)
        self._schedule()

    @property
    def pending(self) -> bool:
        return self._timer is not None

    def external_changed(self) -> bool:
        """Pull the external value; returns True if local state was replaced."""
        if self._closed:
            return False
        value = copy.deepcopy(self._getter())
        if value == self._previous:
            return False
        if self._debug:
            logger.debug("ThrottledSync: adopting external value %r", value)
        self._previous = value
        self._state = copy.deepcopy(value)
        return True

    def immediate_update(self, value: T) -> None:
        """Set local state and call the setter now, skipping the delay."""
        if self._closed or value == self._state:
            return
        self._cancel()
        self._state = copy.deepcopy(value)
        self._previous = copy.deepcopy(value)
        self._setter(copy.deepcopy(value))

    def close(self) -> None:
        self._closed = True
        self._cancel()

    def _schedule(self) -> None:
        if self._closed:
            return
        self._cancel()
        self._timer = self._scheduler.call_later(self._delay, self._flush)

    def _flush(self) -> None:
        self._timer = None
        if self._closed or self._state == self._previous:
            return
        if self._debug:
            logger.debug("ThrottledSync: writing %r", self._state)
        self._previous = copy.deepcopy(self._state)
        self._setter(copy.deepcopy(self._state))

    def _cancel(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
