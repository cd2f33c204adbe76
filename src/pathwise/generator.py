"""URL generation — validate params, fill the template, encode the query.

``UrlGenerator.generate()`` never raises for bad input. Unknown
addresses, failed validation, and async validators all turn into an
error result pointing at the configured error address::

    generator = UrlGenerator(table, GeneratorConfig(error_url="/error"))

    generator.generate("/users/[id]", {"id": "42"}).url
    # '/users/42'

    generator.generate("/users/[id]", {"nope": "x"})
    # GenerationResult(url='/error?message=Error+generating+URL', error=True, ...)

The generator holds no mutable state; one instance can serve any number
of callers.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pathwise._internal.types import UNSET
from pathwise.config import GeneratorConfig
from pathwise.errors import RouteNotFound, ValidationFailure
from pathwise.http.query import decode_query, encode_query, prune_unset
from pathwise.merge import merge_params
from pathwise.routing.table import FailureHandler, Redirect, RouteTable, Substitute
from pathwise.routing.template import fill_template
from pathwise.validation.adapter import Validator, run_validator

logger = logging.getLogger("pathwise.generator")


@dataclass(frozen=True, slots=True)
class GenerationResult:
    """The outcome of turning an address and param values into a URL.

    On failure ``error`` is True, ``url`` points at the error address (or
    at a failure handler's redirect), and both param objects are empty.
    """

    address: str
    url: str
    error: bool = False
    params: Mapping[str, Any] = field(default_factory=dict)
    search_params: Mapping[str, Any] = field(default_factory=dict)

    def __bool__(self) -> bool:
        """Falsy for error results — enables ``if not result:``."""
        return not self.error


class _Redirected(Exception):  # noqa: N818
    """Internal signal: a failure handler asked for a redirect."""

    def __init__(self, url: str) -> None:
        super().__init__(url)
        self.url = url


def _supplied(value: object) -> bool:
    return value is not None and value is not UNSET


class UrlGenerator:
    """Generates URLs for the addresses in a ``RouteTable``.

    Usage::

        generator = UrlGenerator(table)
        result = generator.generate(
            "/search/[category]",
            {"category": "books"},
            {"q": "dune", "page": 2},
        )
        result.url  # '/search/books?q=dune&page=2'
    """

    __slots__ = ("_config", "_error_url", "_table")

    def __init__(self, table: RouteTable, config: GeneratorConfig | None = None) -> None:
        self._table = table
        self._config = config or GeneratorConfig()
        message_query = encode_query({"message": self._config.error_message})
        self._error_url = f"{self._config.error_url}?{message_query}"

    @property
    def table(self) -> RouteTable:
        return self._table

    @property
    def config(self) -> GeneratorConfig:
        return self._config

    @property
    def error_url(self) -> str:
        """The full URL returned for every failed generation."""
        return self._error_url

    def generate(
        self,
        address: str,
        params_value: Mapping[str, Any] | None = None,
        search_params_value: Mapping[str, Any] | None = None,
    ) -> GenerationResult:
        """Validate the values for *address* and build its URL.

        Omitted values pass through as empty objects without running the
        route's validator.
        """
        try:
            return self._generate(address, params_value, search_params_value)
        except _Redirected as redirect:
            logger.debug("Redirecting %s to %s after validation failure", address, redirect.url)
            return GenerationResult(address=address, url=redirect.url, error=True)
        except Exception as exc:
            return self._failed(address, exc)

    def merge_and_generate(
        self,
        address: str,
        current_raw_params: Mapping[str, Any] | None,
        current_raw_query: str | Mapping[str, Any] | None,
        *,
        params: Mapping[str, Any] | None = None,
        search_params: Mapping[str, Any] | None = None,
    ) -> GenerationResult:
        """Apply a partial update to the raw page state and regenerate.

        *current_raw_query* is the query string as it appears in the
        location (or an already decoded object). Updates use the merge
        rules of ``merge_params``: ``UNSET`` deletes a key, lists replace.
        """
        try:
            if isinstance(current_raw_query, Mapping):
                base_search: Mapping[str, Any] = current_raw_query
            else:
                base_search = decode_query(current_raw_query or "")
            merged_params = merge_params(current_raw_params, params)
            merged_search = merge_params(base_search, search_params)
        except Exception as exc:
            return self._failed(address, exc)
        return self.generate(address, merged_params, merged_search)

    # -- internals --------------------------------------------------------

    def _failed(self, address: str, exc: Exception) -> GenerationResult:
        logger.debug("URL generation failed for %s: %s", address, exc)
        return GenerationResult(address=address, url=self._error_url, error=True)

    def _generate(
        self,
        address: str,
        params_value: Mapping[str, Any] | None,
        search_params_value: Mapping[str, Any] | None,
    ) -> GenerationResult:
        entry = self._table.get(address)
        if entry is None:
            raise RouteNotFound(address)

        params = self._validated(
            "params",
            entry.params_validator,
            entry.on_params_error,
            params_value,
        )
        search_params = self._validated(
            "search_params",
            entry.search_params_validator,
            entry.on_search_params_error,
            search_params_value,
        )

        url = fill_template(address, params)
        if isinstance(search_params, Mapping):
            query = encode_query(search_params)
            if query:
                url = f"{url}?{query}"
            search_params = prune_unset(search_params)

        return GenerationResult(
            address=address,
            url=url,
            params=params,
            search_params=search_params,
        )

    def _validated(
        self,
        kind: str,
        validator: Validator | None,
        on_error: FailureHandler | None,
        raw: Mapping[str, Any] | None,
    ) -> Any:
        if not _supplied(raw):
            return {}
        if validator is None:
            return dict(raw)  # type: ignore[arg-type]

        outcome = run_validator(validator, raw)
        if outcome:
            return outcome.value

        if on_error is not None:
            answer = on_error(outcome, raw)
            if isinstance(answer, Redirect):
                raise _Redirected(answer.url)
            if isinstance(answer, Substitute):
                return answer.value
        raise ValidationFailure(kind, outcome.issues)
