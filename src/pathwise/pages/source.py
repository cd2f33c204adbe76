"""Page state source — the externally owned location a binding follows.

The host integration owns a ``PageSource`` and calls ``set()`` whenever
the router reports a new location. Bindings subscribe and reconcile.

Delivery is synchronous: ``set()`` calls every subscriber before it
returns, in subscription order.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, TypeAlias

PageListener: TypeAlias = Callable[["PageState"], Any]


@dataclass(frozen=True, slots=True)
class PageState:
    """Raw page state as the host router reports it.

    Attributes:
        params: Raw path captures (string to string).
        search: The query string, with or without the leading ``?``.
    """

    params: Mapping[str, str] = field(default_factory=dict)
    search: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PageState):
            return NotImplemented
        return dict(self.params) == dict(other.params) and self.search == other.search

    def __hash__(self) -> int:
        return hash((tuple(sorted(self.params.items())), self.search))


class PageSource:
    """Observable holder of the current ``PageState``.

    Usage::

        source = PageSource(PageState({"id": "1"}, "?tab=info"))
        unsubscribe = source.subscribe(lambda page: print(page.params))
        source.set(PageState({"id": "2"}))
        unsubscribe()
    """

    __slots__ = ("_closed", "_listeners", "_state")

    def __init__(self, initial: PageState | None = None) -> None:
        self._state = initial or PageState()
        self._listeners: list[PageListener] = []
        self._closed = False

    def get(self) -> PageState:
        return self._state

    def set(self, state: PageState) -> None:
        """Replace the page state and notify subscribers if it changed."""
        if self._closed:
            msg = "PageSource is closed."
            raise RuntimeError(msg)
        if state == self._state:
            return
        self._state = state
        for listener in list(self._listeners):
            listener(state)

    def navigate(self, params: Mapping[str, str], search: str = "") -> None:
        """Convenience for ``set(PageState(params, search))``."""
        self.set(PageState(params, search))

    def subscribe(self, listener: PageListener) -> Callable[[], None]:
        """Register *listener*; returns a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    @property
    def subscriber_count(self) -> int:
        return len(self._listeners)

    def close(self) -> None:
        """Drop all subscribers; further ``set()`` calls raise."""
        self._listeners.clear()
        self._closed = True
