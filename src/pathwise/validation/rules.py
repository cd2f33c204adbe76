"""Built-in field rules for ``Schema``.

Each rule is a callable with the signature::

    def rule(value) -> str | None:
        '''Return an issue message, or None if valid.'''

Path captures arrive as strings and decoded query values may already be
numbers, booleans, or nested structures, so rules accept any value and
compare against its string form where that makes sense.

Parameterized rules are factory functions that return a rule::

    def max_length(n: int) -> Rule:
        def check(value) -> str | None:
            if len(_text(value)) > n:
                return f"Must be at most {n} characters"
            return None
        return check
"""

import re
from collections.abc import Callable
from typing import Any, TypeAlias

from pathwise._internal.types import UNSET

Rule: TypeAlias = Callable[[Any], str | None]


def _text(value: Any) -> str:
    if value is UNSET or value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


# ---------------------------------------------------------------------------
# Presence
# ---------------------------------------------------------------------------


def required(value: Any) -> str | None:
    """Value must be present and non-empty."""
    if value is UNSET or value is None:
        return "This field is required"
    if isinstance(value, str) and not value.strip():
        return "This field is required"
    return None


# ---------------------------------------------------------------------------
# Length
# ---------------------------------------------------------------------------


def max_length(n: int) -> Rule:
    """String form must be at most *n* characters."""

    def check(value: Any) -> str | None:
        if len(_text(value)) > n:
            return f"Must be at most {n} characters"
        return None

    return check


def min_length(n: int) -> Rule:
    """String form must be at least *n* characters."""

    def check(value: Any) -> str | None:
        if len(_text(value)) < n:
            return f"Must be at least {n} characters"
        return None

    return check


# ---------------------------------------------------------------------------
# Format
# ---------------------------------------------------------------------------


def matches(pattern: str, message: str | None = None) -> Rule:
    """String form must match the given regex pattern."""
    compiled = re.compile(pattern)

    def check(value: Any) -> str | None:
        if not compiled.match(_text(value)):
            return message or f"Must match pattern: {pattern}"
        return None

    return check


_SLUG_RE = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


def slug(value: Any) -> str | None:
    """Lowercase words joined by single hyphens."""
    if not _SLUG_RE.match(_text(value)):
        return "Must be a slug (lowercase letters, digits, and hyphens)"
    return None


# ---------------------------------------------------------------------------
# Choice
# ---------------------------------------------------------------------------


def one_of(*choices: str) -> Rule:
    """String form must be one of the given choices."""
    allowed = frozenset(choices)

    def check(value: Any) -> str | None:
        if _text(value) not in allowed:
            options = ", ".join(sorted(allowed))
            return f"Must be one of: {options}"
        return None

    return check


# ---------------------------------------------------------------------------
# Type checks
# ---------------------------------------------------------------------------


def integer(value: Any) -> str | None:
    """Value must be an integer or a string holding one."""
    if isinstance(value, bool):
        return "Must be a whole number"
    if isinstance(value, int):
        return None
    try:
        int(_text(value))
    except ValueError:
        return "Must be a whole number"
    return None


def number(value: Any) -> str | None:
    """Value must be a number or a string holding one."""
    if isinstance(value, bool):
        return "Must be a number"
    if isinstance(value, int | float):
        return None
    try:
        float(_text(value))
    except ValueError:
        return "Must be a number"
    return None


def mapping(value: Any) -> str | None:
    """Value must be a structured object (decoded from a JSON query value)."""
    if not isinstance(value, dict):
        return "Must be an object"
    return None
