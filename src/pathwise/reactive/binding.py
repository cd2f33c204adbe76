"""Reactive binding — keeps validated route state and the location in step.

A binding follows a ``PageSource`` (the host router's view of the
location) and owns the client-side current params. Two reconciliation
steps run explicitly instead of through framework reactivity:

- sync-in, on every page change: adopt the external value unless there
  is a pending local edit (current differs from the last synced
  snapshot)
- sync-out, after every local write: regenerate the URL, update the
  snapshot, and (re)start the debounce timer that hands the URL to
  ``on_update`` and the navigator

Example::

    binding = ReactiveBinding(
        generator,
        "/search/[category]",
        source,
        update_delay=0.3,
        navigator=lambda url, action: router.push(url),
    )
    binding.update_params(search_params={"q": "dune"})
    # 300ms later, unless superseded: router.push("/search/books?q=dune")
    binding.close()
"""

import copy
import functools
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from pathwise.config import UpdateAction
from pathwise.generator import GenerationResult, UrlGenerator
from pathwise.http.query import decode_query
from pathwise.pages.source import PageSource, PageState
from pathwise.reactive.scheduler import LoopScheduler, Scheduler, TimerHandle

logger = logging.getLogger("pathwise.reactive")


@dataclass(slots=True)
class BindingState:
    """State owned by exactly one binding. Never shared."""

    current_params: Mapping[str, Any]
    current_search_params: Mapping[str, Any]
    previous_params: Mapping[str, Any]
    previous_search_params: Mapping[str, Any]

    @property
    def dirty(self) -> bool:
        """True when current values differ from the last synced snapshot."""
        return (
            self.current_params != self.previous_params
            or self.current_search_params != self.previous_search_params
        )


class ReactiveBinding:
    """Client-side route state with debounced URL propagation.

    Args:
        generator: The URL generator for the route table.
        address: The route this binding tracks.
        source: The externally owned page state.
        update_delay: Debounce delay in seconds. Defaults to the
            generator config's ``update_delay``.
        update_action: Tag passed to the navigator. Defaults to the
            generator config's ``update_action``.
        on_update: Called with each propagated URL.
        navigator: Called with ``(url, action)`` for each propagated URL.
        scheduler: Provides cancellable delayed calls. Defaults to the
            running asyncio loop.
        debug: Log sync decisions at DEBUG level.
    """

    __slots__ = (
        "_address",
        "_closed",
        "_debug",
        "_generator",
        "_navigator",
        "_on_update",
        "_pending_url",
        "_scheduler",
        "_source",
        "_state",
        "_timer",
        "_unsubscribe",
        "_update_action",
        "_update_delay",
    )

    def __init__(
        self,
        generator: UrlGenerator,
        address: str,
        source: PageSource,
        *,
        update_delay: float | None = None,
        update_action: UpdateAction | None = None,
        on_update: Callable[[str], Any] | None = None,
        navigator: Callable[[str, UpdateAction], Any] | None = None,
        scheduler: Scheduler | None = None,
        debug: bool = False,
    ) -> None:
        config = generator.config
        self._generator = generator
        self._address = address
        self._source = source
        self._update_delay = config.update_delay if update_delay is None else update_delay
        self._update_action = update_action or config.update_action
        self._on_update = on_update
        self._navigator = navigator
        self._scheduler: Scheduler = scheduler or LoopScheduler()
        self._debug = debug
        self._timer: TimerHandle | None = None
        self._pending_url: str | None = None
        self._closed = False

        if self._update_delay < 0:
            msg = f"update_delay must be >= 0, got {self._update_delay}"
            raise ValueError(msg)

        initial = self._from_page(source.get())
        self._state = BindingState(
            current_params=copy.deepcopy(initial.params),
            current_search_params=copy.deepcopy(initial.search_params),
            previous_params=copy.deepcopy(initial.params),
            previous_search_params=copy.deepcopy(initial.search_params),
        )
        self._unsubscribe: Callable[[], None] | None = source.subscribe(self._sync_in)

    # -- public state -----------------------------------------------------

    @property
    def address(self) -> str:
        return self._address

    @property
    def params(self) -> dict[str, Any]:
        """A copy of the current params. Assign to change them."""
        return copy.deepcopy(dict(self._state.current_params))

    @params.setter
    def params(self, value: Mapping[str, Any]) -> None:
        self._ensure_open()
        self._state.current_params = copy.deepcopy(dict(value))
        self._sync_out()

    @property
    def search_params(self) -> dict[str, Any]:
        """A copy of the current search params. Assign to change them."""
        return copy.deepcopy(dict(self._state.current_search_params))

    @search_params.setter
    def search_params(self, value: Mapping[str, Any]) -> None:
        self._ensure_open()
        self._state.current_search_params = copy.deepcopy(dict(value))
        self._sync_out()

    @property
    def pending(self) -> bool:
        """True while a propagation is scheduled but has not fired."""
        return self._timer is not None

    @property
    def closed(self) -> bool:
        return self._closed

    # -- updates ----------------------------------------------------------

    def update_params(
        self,
        *,
        params: Mapping[str, Any] | None = None,
        search_params: Mapping[str, Any] | None = None,
    ) -> GenerationResult:
        """Merge a partial update, store the result, and schedule propagation.

        The update is merged against the raw external page state, not the
        validated current values, so validators always see raw input.
        """
        self._ensure_open()
        result = self.url_for(params=params, search_params=search_params)
        self._state.current_params = copy.deepcopy(dict(result.params))
        self._state.current_search_params = copy.deepcopy(dict(result.search_params))
        self._sync_out()
        return result

    def url_for(
        self,
        *,
        params: Mapping[str, Any] | None = None,
        search_params: Mapping[str, Any] | None = None,
    ) -> GenerationResult:
        """Compute what ``update_params`` would produce without applying it."""
        page = self._source.get()
        return self._generator.merge_and_generate(
            self._address,
            page.params,
            page.search,
            params=params,
            search_params=search_params,
        )

    def flush(self) -> None:
        """Fire a pending propagation now instead of waiting for the timer."""
        if self._timer is None or self._pending_url is None:
            return
        url = self._pending_url
        self._cancel_timer()
        self._propagate(url)

    def close(self) -> None:
        """Cancel any pending propagation and detach from the page source."""
        if self._closed:
            return
        self._closed = True
        self._cancel_timer()
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def __enter__(self) -> "ReactiveBinding":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # -- reconciliation ---------------------------------------------------

    def _from_page(self, page: PageState) -> GenerationResult:
        return self._generator.generate(
            self._address,
            dict(page.params),
            decode_query(page.search),
        )

    def _sync_in(self, page: PageState) -> None:
        if self._closed:
            return
        external = self._from_page(page)
        state = self._state

        # Only adopt when there is no local edit waiting to go out
        if (
            state.current_params != external.params
            and state.current_params == state.previous_params
        ):
            state.current_params = copy.deepcopy(dict(external.params))
            state.previous_params = copy.deepcopy(dict(external.params))
            if self._debug:
                logger.debug("%s: adopted external params %r", self._address, external.params)

        if (
            state.current_search_params != external.search_params
            and state.current_search_params == state.previous_search_params
        ):
            state.current_search_params = copy.deepcopy(dict(external.search_params))
            state.previous_search_params = copy.deepcopy(dict(external.search_params))
            if self._debug:
                logger.debug(
                    "%s: adopted external search params %r",
                    self._address,
                    external.search_params,
                )

    def _sync_out(self) -> None:
        if self._closed or not self._state.dirty:
            return
        state = self._state
        result = self._generator.generate(
            self._address,
            state.current_params,
            state.current_search_params,
        )
        self._cancel_timer()
        self._timer = self._scheduler.call_later(
            self._update_delay,
            functools.partial(self._propagate, result.url),
        )
        self._pending_url = result.url

        # Snapshot after scheduling so a failed schedule leaves the edit dirty
        state.previous_params = copy.deepcopy(state.current_params)
        state.previous_search_params = copy.deepcopy(state.current_search_params)
        if self._debug:
            logger.debug(
                "%s: scheduled %s in %.3fs", self._address, result.url, self._update_delay
            )

    def _propagate(self, url: str) -> None:
        self._timer = None
        self._pending_url = None
        if self._closed:
            return
        if self._debug:
            logger.debug("%s: propagating %s (%s)", self._address, url, self._update_action.value)
        if self._on_update is not None:
            self._on_update(url)
        if self._navigator is not None:
            self._navigator(url, self._update_action)

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
            self._pending_url = None

    def _ensure_open(self) -> None:
        if self._closed:
            msg = f"Binding for {self._address!r} is closed."
            raise RuntimeError(msg)
