"""Address templates — parse placeholders and fill them with values.

Template syntax::

    /users/[id]                 simple      -> /users/42
    /files/[...path]/raw        rest        -> /files/a/b/raw
    /items/[id=integer]         typed       -> /items/7      (``=integer`` is documentary)
    /docs/[[lang]]/intro        optional    -> /docs/en/intro or /docs/intro
    /docs/[[lang=locale]]/intro optional    -> same, ``=locale`` is documentary
    /(marketing)/pricing        group       -> /pricing

Only the fill direction (template -> path) lives here; matching a
concrete path back to raw params is the host router's job.
"""

import functools
import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pathwise._internal.types import UNSET
from pathwise.errors import ConfigurationError


class PlaceholderKind(Enum):
    """The four placeholder forms an address template may contain."""

    SIMPLE = "simple"
    REST = "rest"
    TYPED = "typed"
    OPTIONAL = "optional"


@dataclass(frozen=True, slots=True)
class Placeholder:
    """A parsed placeholder token.

    Simple:   ``[id]``          (kind=SIMPLE)
    Rest:     ``[...path]``     (kind=REST)
    Typed:    ``[id=integer]``  (kind=TYPED, type_hint="integer")
    Optional: ``[[lang]]``      (kind=OPTIONAL)
    Optional: ``[[lang=locale]]`` (kind=OPTIONAL, type_hint="locale")
    """

    token: str
    name: str
    kind: PlaceholderKind
    type_hint: str | None = None


@dataclass(frozen=True, slots=True)
class CompiledTemplate:
    """A validated address template with its placeholders and groups."""

    address: str
    placeholders: tuple[Placeholder, ...]
    groups: tuple[str, ...]

    @property
    def names(self) -> tuple[str, ...]:
        """Placeholder names in template order, without duplicates."""
        return tuple(dict.fromkeys(p.name for p in self.placeholders))

    @property
    def required_names(self) -> frozenset[str]:
        """Names that must have a value for the path to be fully resolved."""
        return frozenset(
            p.name for p in self.placeholders if p.kind is not PlaceholderKind.OPTIONAL
        )

    def fill(self, params: Mapping[str, Any] | None) -> str:
        return fill_template(self.address, params)


# Scanner for parse_template: optional first so ``[[x]]`` is not read as ``[`` + ``[x]``
_TOKEN_RE = re.compile(
    r"\[\[(?P<optional>[^\[\]]+)\]\]"
    r"|\[(?P<inner>[^\[\]]+)\]"
    r"|\((?P<group>[^()/]+)\)"
)

# Substitution passes, applied in this order
_PLACEHOLDER_RE = re.compile(r"/\[(?P<rest>\.\.\.)?(?P<name>[^\[\]=]+?)(?:=[^\[\]]+)?\]")
_OPTIONAL_RE = re.compile(r"/\[\[(?P<name>[^\[\]=]+)(?:=[^\[\]]+)?\]\]")
_GROUP_RE = re.compile(r"/\([^)]+\)")

_NAME_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_\-]*$")


def _check_name(name: str, address: str) -> None:
    if not _NAME_RE.match(name):
        msg = f"Invalid placeholder name {name!r} in address template {address!r}."
        raise ConfigurationError(msg)


def _parse_inner(token: str, inner: str, address: str) -> Placeholder:
    if inner.startswith("..."):
        name = inner[3:]
        _check_name(name, address)
        return Placeholder(token=token, name=name, kind=PlaceholderKind.REST)
    if "=" in inner:
        name, type_hint = inner.split("=", 1)
        _check_name(name, address)
        if not type_hint:
            msg = f"Typed placeholder {token!r} in {address!r} has an empty type."
            raise ConfigurationError(msg)
        return Placeholder(
            token=token, name=name, kind=PlaceholderKind.TYPED, type_hint=type_hint
        )
    _check_name(inner, address)
    return Placeholder(token=token, name=inner, kind=PlaceholderKind.SIMPLE)


@functools.lru_cache(maxsize=1024)
def parse_template(address: str) -> CompiledTemplate:
    """Parse an address template into placeholders and groups.

    Examples::

        "/users/[id]"            -> (Placeholder("[id]", "id", SIMPLE),)
        "/a/[...rest]/b"         -> (Placeholder("[...rest]", "rest", REST),)
        "/n/[n=number]"          -> (Placeholder("[n=number]", "n", TYPED, "number"),)
        "/o/[[slug]]/x"          -> (Placeholder("[[slug]]", "slug", OPTIONAL),)

    Raises ``ConfigurationError`` for templates that do not start with
    ``/``, contain nested or unbalanced brackets, or use invalid names.
    """
    if not address.startswith("/"):
        msg = f"Address template {address!r} must start with '/'."
        raise ConfigurationError(msg)

    placeholders: list[Placeholder] = []
    groups: list[str] = []
    for match in _TOKEN_RE.finditer(address):
        token = match.group(0)
        if match.group("optional") is not None:
            name, _, type_hint = match.group("optional").partition("=")
            _check_name(name, address)
            if "=" in match.group("optional") and not type_hint:
                msg = f"Optional placeholder {token!r} in {address!r} has an empty type."
                raise ConfigurationError(msg)
            placeholders.append(
                Placeholder(
                    token=token,
                    name=name,
                    kind=PlaceholderKind.OPTIONAL,
                    type_hint=type_hint or None,
                )
            )
        elif match.group("inner") is not None:
            placeholders.append(_parse_inner(token, match.group("inner"), address))
        else:
            groups.append(match.group("group"))

    leftover = _TOKEN_RE.sub("", address)
    if any(ch in leftover for ch in "[]()"):
        msg = (
            f"Address template {address!r} has nested or unbalanced brackets. "
            "Placeholders look like [name], [...name], [name=type], [[name]], [[name=type]] "
            "and groups like (name)."
        )
        raise ConfigurationError(msg)

    return CompiledTemplate(
        address=address,
        placeholders=tuple(placeholders),
        groups=tuple(groups),
    )


def stringify(value: Any) -> str:
    """Convert a param value to its path text.

    Values are spelled the way a browser-side consumer spells them:
    ``True`` becomes ``true``, ``None`` becomes ``null``, ``2.0`` becomes
    ``2`` and ``nan`` becomes ``NaN``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    return str(value)


def _has_value(params: Mapping[str, Any], name: str) -> bool:
    return name in params and params[name] is not UNSET


def fill_template(address: str, params: Mapping[str, Any] | None) -> str:
    """Substitute *params* into *address*.

    Simple, rest, and typed placeholders are replaced when their key has
    a value and are otherwise left untouched (``[id]`` stays in the
    output). Optional placeholders are resolved next: replaced when
    present, removed with their leading slash when not. Groups are
    removed last. An empty result collapses to ``/``.
    """
    values: Mapping[str, Any] = params or {}

    def _placeholder(match: re.Match[str]) -> str:
        name = match.group("name")
        if _has_value(values, name):
            return "/" + stringify(values[name])
        return match.group(0)

    def _optional(match: re.Match[str]) -> str:
        name = match.group("name")
        if _has_value(values, name):
            return "/" + stringify(values[name])
        return ""

    url = _PLACEHOLDER_RE.sub(_placeholder, address)
    url = _OPTIONAL_RE.sub(_optional, url)
    url = _GROUP_RE.sub("", url)
    return url or "/"
