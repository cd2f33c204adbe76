"""Rule-based schema — the validator pathwise ships with.

Usage::

    from pathwise.validation import Schema, integer, max_length, required

    user_params = Schema(
        {"id": [required, integer]},
        coerce={"id": int},
    )

    outcome = user_params.validate({"id": "42"})
    outcome.value  # {"id": 42}

Fields not listed in *optional* are required. Keys in the raw input that
the schema does not declare are dropped unless ``keep_unknown=True``.
"""

from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any

from pathwise._internal.types import UNSET
from pathwise.validation.result import Issue, ValidationOutcome
from pathwise.validation.rules import Rule, required


class Schema:
    """Validates a mapping field by field.

    Args:
        fields: Field name to a list of rules. Each rule returns an issue
            message or ``None``.
        coerce: Field name to a conversion callable applied after the
            rules pass (``{"page": int}``). A ``ValueError`` or
            ``TypeError`` from the converter becomes an issue.
        optional: Fields that may be absent. Absent optional fields are
            left out of the validated value unless *defaults* names them.
        defaults: Values used for absent optional fields.
        keep_unknown: Keep undeclared keys in the validated value.
    """

    __slots__ = ("_coerce", "_defaults", "_fields", "_keep_unknown", "_optional")

    def __init__(
        self,
        fields: Mapping[str, Sequence[Rule]],
        *,
        coerce: Mapping[str, Callable[[Any], Any]] | None = None,
        optional: Iterable[str] = (),
        defaults: Mapping[str, Any] | None = None,
        keep_unknown: bool = False,
    ) -> None:
        self._fields = {name: tuple(rules) for name, rules in fields.items()}
        self._coerce = dict(coerce or {})
        self._optional = frozenset(optional)
        self._defaults = dict(defaults or {})
        self._keep_unknown = keep_unknown

    @property
    def fields(self) -> tuple[str, ...]:
        return tuple(self._fields)

    def validate(self, raw: Any) -> ValidationOutcome:
        if not isinstance(raw, Mapping):
            return ValidationOutcome.failure([Issue("Expected an object")])

        issues: list[Issue] = []
        cleaned: dict[str, Any] = {}

        for name, rules in self._fields.items():
            value = raw.get(name, UNSET)

            if value is UNSET or value is None:
                if name in self._optional:
                    if name in self._defaults:
                        cleaned[name] = self._defaults[name]
                    continue
                issues.append(Issue(required(value) or "This field is required", (name,)))
                continue

            field_issues: list[Issue] = []
            for rule in rules:
                message = rule(value)
                if message is not None:
                    field_issues.append(Issue(message, (name,)))
                    # No point running length checks on an empty value
                    if rule is required:
                        break

            if field_issues:
                issues.extend(field_issues)
                continue

            converter = self._coerce.get(name)
            if converter is not None:
                try:
                    value = converter(value)
                except (ValueError, TypeError) as exc:
                    issues.append(Issue(str(exc) or "Invalid value", (name,)))
                    continue
            cleaned[name] = value

        if issues:
            return ValidationOutcome.failure(issues)
        if self._keep_unknown:
            cleaned.update((k, v) for k, v in raw.items() if k not in self._fields)
        return ValidationOutcome.success(cleaned)

    def __repr__(self) -> str:
        return f"Schema(fields={list(self._fields)!r})"
