"""Query string codec for structured search params.

Encoding writes one entry per top-level key. Strings, numbers, and
booleans are written as text; anything else (objects, lists, ``None``)
is written as compact JSON::

    encode_query({"filter": "active", "page": 2, "cfg": {"a": 1}})
    # 'filter=active&page=2&cfg=%7B%22a%22%3A1%7D'

Decoding tries ``json.loads`` on every value and keeps the raw text when
that fails. This is deliberately *not* a perfect round trip: a string
value that happens to be valid JSON comes back as the JSON type::

    decode_query("page=2&flag=true&q=hello")
    # {"page": 2, "flag": True, "q": "hello"}
"""

import json
import math
from collections.abc import Mapping
from typing import Any
from urllib.parse import parse_qsl, quote_plus, urlencode

from pathwise._internal.types import UNSET
from pathwise.routing.template import stringify


def prune_unset(obj: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of *obj* without ``UNSET`` values.

    Recurses through nested mappings only. Lists are kept as they are.
    """
    pruned: dict[str, Any] = {}
    for key, value in obj.items():
        if value is UNSET:
            continue
        if isinstance(value, Mapping):
            pruned[key] = prune_unset(value)
        else:
            pruned[key] = value
    return pruned


def _jsonable(value: Any) -> Any:
    """Shape *value* the way ``JSON.stringify`` would see it.

    ``UNSET`` keys are dropped from objects at any depth and become
    ``null`` inside lists. Integral floats become ints and non-finite
    floats become ``null``.
    """
    if isinstance(value, Mapping):
        return {k: _jsonable(v) for k, v in value.items() if v is not UNSET}
    if isinstance(value, list | tuple):
        return [None if v is UNSET else _jsonable(v) for v in value]
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        if value.is_integer():
            return int(value)
    return value


def _encode_value(value: Any) -> str:
    if isinstance(value, str | bool | int | float):
        return stringify(value)
    return json.dumps(_jsonable(value), separators=(",", ":"), ensure_ascii=False)


def encode_query(obj: Mapping[str, Any]) -> str:
    """Encode a search-params object as a form-urlencoded query string.

    ``UNSET`` values are pruned first. Returns ``""`` when nothing is left.
    Raises ``TypeError`` for values JSON cannot represent.
    """
    pruned = prune_unset(obj)
    pairs = [(key, _encode_value(value)) for key, value in pruned.items()]
    return urlencode(pairs, quote_via=quote_plus, safe="*")


def _reject_constant(token: str) -> None:
    msg = f"{token} is not valid JSON"
    raise ValueError(msg)


def decode_value(raw: str) -> Any:
    """JSON-decode *raw* when possible, otherwise return it unchanged.

    Input nested too deeply for the decoder is also kept as raw text.
    """
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return raw


def decode_query(query: str | bytes) -> dict[str, Any]:
    """Decode a query string into a search-params object.

    Accepts an optional leading ``?``. Blank values are kept; when a key
    repeats, the last value wins.
    """
    if isinstance(query, bytes):
        query = query.decode("utf-8", errors="replace")
    if query.startswith("?"):
        query = query[1:]
    return {key: decode_value(value) for key, value in parse_qsl(query, keep_blank_values=True)}
