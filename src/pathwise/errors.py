"""Pathwise exception hierarchy.

Shared across the route table, validation adapter, and URL generator so
every module raises and catches the same types.
"""

from collections.abc import Sequence
from typing import Any


class PathwiseError(Exception):
    """Base for all pathwise-specific errors."""


class ConfigurationError(PathwiseError):
    """Raised when a route table or address template is malformed.

    Typically raised while building a ``RouteTable`` at startup, never
    during URL generation.
    """


class RouteNotFound(PathwiseError):  # noqa: N818
    """The requested address is not registered in the route table."""

    def __init__(self, address: str) -> None:
        self.address = address
        super().__init__(f"Route not found: {address!r}")


class ValidationFailure(PathwiseError):  # noqa: N818
    """Params or search params failed validation and nothing recovered them.

    ``kind`` is ``"params"`` or ``"search_params"``.
    """

    def __init__(self, kind: str, issues: Sequence[Any] = ()) -> None:
        self.kind = kind
        self.issues = tuple(issues)
        label = "Params" if kind == "params" else "Search params"
        super().__init__(f"{label} validation failed")


class AsyncValidationUnsupported(PathwiseError):  # noqa: N818
    """A validator returned an awaitable.

    URL generation is synchronous; an async validator is a programming
    error, not a recoverable validation outcome.
    """

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail or "Async validation not supported in URL generator")
