"""Validator protocol and the synchronous adapter around it.

Any object with a ``validate(raw)`` method is a validator. The method
returns a ``ValidationOutcome`` (or a mapping with a ``"value"`` or
``"issues"`` key, for libraries that speak plain dicts). Returning an
awaitable is a usage error and raises ``AsyncValidationUnsupported``.
"""

import inspect
from collections.abc import Callable, Mapping
from typing import Any, Protocol, runtime_checkable

from pathwise.errors import AsyncValidationUnsupported
from pathwise.validation.result import Issue, ValidationOutcome


@runtime_checkable
class Validator(Protocol):
    """Single-operation validation capability."""

    def validate(self, raw: Any) -> ValidationOutcome: ...


def run_validator(validator: Validator | None, raw: Any) -> ValidationOutcome:
    """Run *validator* over *raw* and normalize its result.

    A missing validator passes *raw* through unchanged.

    Raises:
        AsyncValidationUnsupported: If the validator returned an awaitable.
        TypeError: If the validator returned something that is neither an
            outcome nor an outcome-shaped mapping.
    """
    if validator is None:
        return ValidationOutcome.success(raw)

    result = validator.validate(raw)
    if inspect.isawaitable(result):
        if inspect.iscoroutine(result):
            result.close()
        raise AsyncValidationUnsupported
    return _normalize(result)


def _normalize(result: object) -> ValidationOutcome:
    if isinstance(result, ValidationOutcome):
        return result
    if isinstance(result, Mapping):
        issues = result.get("issues")
        if issues:
            return ValidationOutcome.failure(
                [_issue_from(i) for i in issues],
            )
        if "value" in result:
            return ValidationOutcome.success(result["value"])
    msg = f"Validator returned {type(result).__name__}, expected a ValidationOutcome"
    raise TypeError(msg)


def _issue_from(raw: object) -> Issue:
    if isinstance(raw, Issue):
        return raw
    if isinstance(raw, Mapping):
        path = tuple(raw.get("path") or ())
        return Issue(message=str(raw.get("message", "Invalid value")), path=path)
    return Issue(str(raw))


class CallableValidator:
    """Adapts a ``parse``-style function to the ``Validator`` protocol.

    The function returns the validated value or raises ``ValueError`` /
    ``TypeError``::

        def parse_user(raw):
            return {"id": int(raw["id"])}

        validator = validator_from_callable(parse_user)
    """

    __slots__ = ("_func",)

    def __init__(self, func: Callable[[Any], Any]) -> None:
        self._func = func

    def validate(self, raw: Any) -> ValidationOutcome:
        try:
            value = self._func(raw)
        except (ValueError, TypeError, KeyError) as exc:
            return ValidationOutcome.failure([Issue(str(exc) or type(exc).__name__)])
        return ValidationOutcome.success(value)

    def __repr__(self) -> str:
        name = getattr(self._func, "__qualname__", repr(self._func))
        return f"CallableValidator({name})"


def validator_from_callable(func: Callable[[Any], Any]) -> CallableValidator:
    """Wrap a ``parse``-style function as a validator."""
    return CallableValidator(func)
