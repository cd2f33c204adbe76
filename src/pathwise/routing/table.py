"""Route table — the static registry of addresses and their validators.

Built once at startup from the mapping a route scanner (or the
application) declares, then treated as read-only. Every address is
compiled while the table is built, so a malformed template fails at
import time rather than on the first URL generation.
"""

import logging
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, TypeAlias

from pathwise.errors import ConfigurationError
from pathwise.routing.template import CompiledTemplate, parse_template
from pathwise.validation.adapter import Validator
from pathwise.validation.result import ValidationOutcome

logger = logging.getLogger("pathwise.routing")


@dataclass(frozen=True, slots=True)
class Redirect:
    """Failure-handler answer: send the caller somewhere else."""

    url: str


@dataclass(frozen=True, slots=True)
class Substitute:
    """Failure-handler answer: use this value instead of the invalid one."""

    value: Any


FailureHandler: TypeAlias = Callable[[ValidationOutcome, Any], Redirect | Substitute | None]

_ENTRY_KEYS = frozenset({
    "params",
    "search_params",
    "params_validation",
    "search_params_validation",
    "on_params_error",
    "on_search_params_error",
    "meta",
})


@dataclass(frozen=True, slots=True)
class RouteEntry:
    """A frozen route declaration.

    Attributes:
        address: The address template, e.g. ``/users/[id]``.
        params_validator: Validates raw path params. ``None`` passes them
            through.
        search_params_validator: Validates the decoded query object.
        on_params_error: Gets first refusal when params fail validation.
            Returns ``Redirect``, ``Substitute``, or ``None`` (give up).
        on_search_params_error: Same for search params.
        meta: Free-form metadata (title, description, tags).
    """

    address: str
    params_validator: Validator | None = None
    search_params_validator: Validator | None = None
    on_params_error: FailureHandler | None = None
    on_search_params_error: FailureHandler | None = None
    meta: Mapping[str, Any] = field(default_factory=dict)

    @property
    def template(self) -> CompiledTemplate:
        return parse_template(self.address)


def _check_validator(obj: object, address: str, key: str) -> None:
    if obj is not None and not callable(getattr(obj, "validate", None)):
        msg = (
            f"Route {address!r}: {key} must provide a validate() method, "
            f"got {type(obj).__name__}."
        )
        raise ConfigurationError(msg)


def entry_from_declaration(address: str, declaration: Mapping[str, Any] | RouteEntry) -> RouteEntry:
    """Build a ``RouteEntry`` from one registry declaration.

    Accepts ``params`` / ``search_params`` and the legacy
    ``params_validation`` / ``search_params_validation`` keys.
    """
    if isinstance(declaration, RouteEntry):
        if declaration.address != address:
            msg = f"Route entry for {declaration.address!r} registered under {address!r}."
            raise ConfigurationError(msg)
        entry = declaration
    else:
        unknown = set(declaration) - _ENTRY_KEYS
        if unknown:
            msg = f"Route {address!r} has unknown keys: {', '.join(sorted(unknown))}."
            raise ConfigurationError(msg)
        params = declaration.get("params", declaration.get("params_validation"))
        search = declaration.get("search_params", declaration.get("search_params_validation"))
        entry = RouteEntry(
            address=address,
            params_validator=params,
            search_params_validator=search,
            on_params_error=declaration.get("on_params_error"),
            on_search_params_error=declaration.get("on_search_params_error"),
            meta=MappingProxyType(dict(declaration.get("meta") or {})),
        )

    _check_validator(entry.params_validator, address, "params")
    _check_validator(entry.search_params_validator, address, "search_params")
    for key in ("on_params_error", "on_search_params_error"):
        handler = getattr(entry, key)
        if handler is not None and not callable(handler):
            msg = f"Route {address!r}: {key} must be callable."
            raise ConfigurationError(msg)
    return entry


class RouteTable(Mapping[str, RouteEntry]):
    """Immutable mapping of address template to ``RouteEntry``.

    Usage::

        table = RouteTable({
            "/users/[id]": {"params": Schema({"id": [required]})},
            "/search": {"search_params": Schema({"q": [required]})},
        })
        table["/users/[id]"].params_validator
    """

    __slots__ = ("_entries",)

    def __init__(
        self,
        registry: Mapping[str, Mapping[str, Any] | RouteEntry] | None = None,
    ) -> None:
        entries: dict[str, RouteEntry] = {}
        for address, declaration in (registry or {}).items():
            if not isinstance(address, str):
                msg = f"Route addresses must be strings, got {type(address).__name__}."
                raise ConfigurationError(msg)
            parse_template(address)
            entries[address] = entry_from_declaration(address, declaration or {})
        self._entries: Mapping[str, RouteEntry] = MappingProxyType(entries)
        logger.debug("Route table built with %d routes", len(entries))

    @classmethod
    def merge(cls, *tables: "RouteTable | Mapping[str, Any]") -> "RouteTable":
        """Combine tables at construction time. Later tables win per address."""
        combined: dict[str, Mapping[str, Any] | RouteEntry] = {}
        for table in tables:
            combined.update(table.items())
        return cls(combined)

    def __getitem__(self, address: str) -> RouteEntry:
        return self._entries[address]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"RouteTable({list(self._entries)!r})"
