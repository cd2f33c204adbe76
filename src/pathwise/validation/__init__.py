"""Validation — one capability, any library behind it.

A validator is any object with ``validate(raw) -> ValidationOutcome``.
Pathwise ships a rule-based ``Schema`` and a pydantic adapter
(``pathwise.validation.pydantic``); anything else plugs in by
implementing the one method.

Usage::

    from pathwise.validation import Schema, integer, required, run_validator

    schema = Schema({"id": [required, integer]}, coerce={"id": int})
    outcome = run_validator(schema, {"id": "42"})
    if not outcome:
        print(outcome.issues)
"""

from pathwise.validation.adapter import (
    CallableValidator,
    Validator,
    run_validator,
    validator_from_callable,
)
from pathwise.validation.result import Issue, ValidationOutcome
from pathwise.validation.rules import (
    Rule,
    integer,
    mapping,
    matches,
    max_length,
    min_length,
    number,
    one_of,
    required,
    slug,
)
from pathwise.validation.schema import Schema

__all__ = [
    "CallableValidator",
    "Issue",
    "Rule",
    "Schema",
    "ValidationOutcome",
    "Validator",
    "integer",
    "mapping",
    "matches",
    "max_length",
    "min_length",
    "number",
    "one_of",
    "required",
    "run_validator",
    "slug",
    "validator_from_callable",
]
