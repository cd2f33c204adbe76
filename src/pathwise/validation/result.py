"""Validation outcome — immutable container for a validated value or issues."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from pathwise._internal.types import UNSET


@dataclass(frozen=True, slots=True)
class Issue:
    """A single validation problem.

    ``path`` locates the offending value (``("otherConfig", "item2")``);
    an empty path means the whole input.
    """

    message: str
    path: tuple[str | int, ...] = ()

    def __str__(self) -> str:
        if not self.path:
            return self.message
        dotted = ".".join(str(p) for p in self.path)
        return f"{dotted}: {self.message}"


@dataclass(frozen=True, slots=True)
class ValidationOutcome:
    """The result of running a validator over raw input.

    Exactly one of the two shapes is meaningful:

    - success: ``value`` holds the validated (possibly coerced) value and
      ``issues`` is empty
    - failure: ``issues`` is non-empty and ``value`` is ``UNSET``

    The outcome is falsy on failure, so you can write::

        outcome = run_validator(schema, raw)
        if not outcome:
            ...
    """

    value: Any = UNSET
    issues: tuple[Issue, ...] = ()

    @classmethod
    def success(cls, value: Any) -> "ValidationOutcome":
        return cls(value=value)

    @classmethod
    def failure(cls, issues: Sequence[Issue | str]) -> "ValidationOutcome":
        normalized = tuple(i if isinstance(i, Issue) else Issue(str(i)) for i in issues)
        if not normalized:
            normalized = (Issue("Invalid value"),)
        return cls(issues=normalized)

    @property
    def is_valid(self) -> bool:
        """True if validation passed with no issues."""
        return not self.issues

    def __bool__(self) -> bool:
        return self.is_valid
