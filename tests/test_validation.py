"""Tests for pathwise.validation — rules, Schema, and the validator adapter."""

import pytest
from pydantic import BaseModel, TypeAdapter

from pathwise import UNSET
from pathwise.errors import AsyncValidationUnsupported
from pathwise.validation import (
    CallableValidator,
    Issue,
    Schema,
    ValidationOutcome,
    Validator,
    integer,
    mapping,
    matches,
    max_length,
    min_length,
    number,
    one_of,
    required,
    run_validator,
    slug,
    validator_from_callable,
)
from pathwise.validation.pydantic import PydanticValidator

# ---------------------------------------------------------------------------
# Individual rule tests
# ---------------------------------------------------------------------------


class TestRequired:
    def test_empty_string(self) -> None:
        assert required("") is not None

    def test_whitespace_only(self) -> None:
        assert required("   ") is not None

    def test_unset_and_none(self) -> None:
        assert required(UNSET) is not None
        assert required(None) is not None

    def test_valid(self) -> None:
        assert required("hello") is None

    def test_zero_is_present(self) -> None:
        assert required(0) is None


class TestLength:
    def test_max_within_limit(self) -> None:
        assert max_length(5)("hello") is None

    def test_max_exceeds_limit(self) -> None:
        assert max_length(5)("123456") is not None

    def test_min_below(self) -> None:
        assert min_length(3)("ab") is not None

    def test_min_uses_string_form(self) -> None:
        assert min_length(3)(1234) is None


class TestMatches:
    def test_match(self) -> None:
        assert matches(r"^\d{4}$")("2024") is None

    def test_no_match(self) -> None:
        assert matches(r"^\d{4}$")("abcd") is not None

    def test_custom_message(self) -> None:
        assert matches(r"^\d+$", "Digits only")("x") == "Digits only"


class TestSlug:
    def test_valid(self) -> None:
        assert slug("hello-world-2") is None

    def test_uppercase(self) -> None:
        assert slug("Hello") is not None

    def test_double_hyphen(self) -> None:
        assert slug("a--b") is not None


class TestOneOf:
    def test_valid(self) -> None:
        assert one_of("asc", "desc")("asc") is None

    def test_invalid(self) -> None:
        message = one_of("asc", "desc")("up")
        assert message == "Must be one of: asc, desc"


class TestInteger:
    def test_int(self) -> None:
        assert integer(42) is None

    def test_string(self) -> None:
        assert integer("42") is None
        assert integer("-3") is None

    def test_float_string(self) -> None:
        assert integer("3.14") is not None

    def test_bool_rejected(self) -> None:
        assert integer(True) is not None


class TestNumber:
    def test_values(self) -> None:
        assert number(1.5) is None
        assert number("1.5") is None
        assert number(3) is None

    def test_invalid(self) -> None:
        assert number("abc") is not None
        assert number(False) is not None


class TestMapping:
    def test_dict(self) -> None:
        assert mapping({"a": 1}) is None

    def test_json_string_is_not_an_object(self) -> None:
        assert mapping('{"a": 1}') is not None

    def test_list(self) -> None:
        assert mapping([1]) is not None


# ---------------------------------------------------------------------------
# Outcome
# ---------------------------------------------------------------------------


class TestValidationOutcome:
    def test_success(self) -> None:
        outcome = ValidationOutcome.success({"id": 1})
        assert outcome.is_valid
        assert bool(outcome) is True
        assert outcome.value == {"id": 1}

    def test_failure_normalizes_strings(self) -> None:
        outcome = ValidationOutcome.failure(["bad"])
        assert not outcome
        assert outcome.issues == (Issue("bad"),)
        assert outcome.value is UNSET

    def test_failure_without_issues_still_fails(self) -> None:
        outcome = ValidationOutcome.failure([])
        assert not outcome
        assert outcome.issues[0].message == "Invalid value"

    def test_issue_str(self) -> None:
        assert str(Issue("Must be a number", ("otherConfig", "item2"))) == (
            "otherConfig.item2: Must be a number"
        )
        assert str(Issue("Expected an object")) == "Expected an object"


# ---------------------------------------------------------------------------
# Schema
# ---------------------------------------------------------------------------


class TestSchema:
    def test_valid(self) -> None:
        schema = Schema({"id": [required, integer]}, coerce={"id": int})
        outcome = schema.validate({"id": "42"})
        assert outcome.is_valid
        assert outcome.value == {"id": 42}

    def test_missing_required_field(self) -> None:
        outcome = Schema({"id": [integer]}).validate({})
        assert not outcome
        assert outcome.issues == (Issue("This field is required", ("id",)),)

    def test_rule_failure_has_path(self) -> None:
        outcome = Schema({"id": [integer]}).validate({"id": "abc"})
        assert outcome.issues[0].path == ("id",)
        assert outcome.issues[0].message == "Must be a whole number"

    def test_required_failure_stops_rules(self) -> None:
        outcome = Schema({"name": [required, min_length(3)]}).validate({"name": " "})
        assert len(outcome.issues) == 1

    def test_collects_issues_across_fields(self) -> None:
        schema = Schema({"a": [integer], "b": [slug]})
        outcome = schema.validate({"a": "x", "b": "Not A Slug"})
        assert {i.path for i in outcome.issues} == {("a",), ("b",)}

    def test_optional_field_absent(self) -> None:
        schema = Schema({"q": [], "page": [integer]}, optional=["q", "page"])
        outcome = schema.validate({})
        assert outcome.is_valid
        assert outcome.value == {}

    def test_optional_default(self) -> None:
        schema = Schema({"page": [integer]}, optional=["page"], defaults={"page": 1})
        assert schema.validate({}).value == {"page": 1}

    def test_unknown_keys_dropped(self) -> None:
        outcome = Schema({"id": []}).validate({"id": "1", "extra": "x"})
        assert outcome.value == {"id": "1"}

    def test_unknown_keys_kept(self) -> None:
        outcome = Schema({"id": []}, keep_unknown=True).validate({"id": "1", "extra": "x"})
        assert outcome.value == {"id": "1", "extra": "x"}

    def test_coercion_error_becomes_issue(self) -> None:
        outcome = Schema({"n": []}, coerce={"n": int}).validate({"n": "x"})
        assert not outcome
        assert outcome.issues[0].path == ("n",)

    def test_non_mapping_input(self) -> None:
        outcome = Schema({"id": []}).validate("not an object")
        assert outcome.issues == (Issue("Expected an object"),)

    def test_does_not_mutate_input(self) -> None:
        raw = {"id": "7"}
        Schema({"id": [integer]}, coerce={"id": int}).validate(raw)
        assert raw == {"id": "7"}

    def test_fields(self) -> None:
        assert Schema({"a": [], "b": []}).fields == ("a", "b")

    def test_satisfies_protocol(self) -> None:
        assert isinstance(Schema({}), Validator)


# ---------------------------------------------------------------------------
# Adapter
# ---------------------------------------------------------------------------


class _DictValidator:
    def __init__(self, result: object) -> None:
        self.result = result

    def validate(self, raw):
        return self.result


class _AsyncValidator:
    async def validate(self, raw):
        return ValidationOutcome.success(raw)


class TestRunValidator:
    def test_no_validator_passes_through(self) -> None:
        raw = {"id": "1"}
        outcome = run_validator(None, raw)
        assert outcome.is_valid
        assert outcome.value is raw

    def test_outcome_returned_as_is(self) -> None:
        expected = ValidationOutcome.success({"a": 1})
        assert run_validator(_DictValidator(expected), {}) is expected

    def test_mapping_success(self) -> None:
        outcome = run_validator(_DictValidator({"value": {"a": 1}}), {})
        assert outcome.value == {"a": 1}

    def test_mapping_failure(self) -> None:
        result = {"issues": [{"message": "nope", "path": ["a"]}, "plain"]}
        outcome = run_validator(_DictValidator(result), {})
        assert outcome.issues == (Issue("nope", ("a",)), Issue("plain"))

    def test_unrecognized_result(self) -> None:
        with pytest.raises(TypeError, match="expected a ValidationOutcome"):
            run_validator(_DictValidator(42), {})

    def test_async_validator_rejected(self) -> None:
        with pytest.raises(AsyncValidationUnsupported) as exc_info:
            run_validator(_AsyncValidator(), {})
        assert str(exc_info.value) == "Async validation not supported in URL generator"


class TestCallableValidator:
    def test_success(self) -> None:
        validator = validator_from_callable(lambda raw: {"id": int(raw["id"])})
        assert isinstance(validator, CallableValidator)
        assert validator.validate({"id": "5"}).value == {"id": 5}

    def test_value_error(self) -> None:
        validator = validator_from_callable(lambda raw: {"id": int(raw["id"])})
        outcome = validator.validate({"id": "x"})
        assert not outcome

    def test_key_error(self) -> None:
        validator = validator_from_callable(lambda raw: raw["id"])
        assert not validator.validate({})

    def test_other_errors_propagate(self) -> None:
        def boom(raw):
            raise RuntimeError("broken")

        with pytest.raises(RuntimeError):
            validator_from_callable(boom).validate({})


# ---------------------------------------------------------------------------
# Pydantic
# ---------------------------------------------------------------------------


class UserParams(BaseModel):
    id: int
    slug: str | None = None


class TestPydanticValidator:
    def test_valid_model(self) -> None:
        outcome = PydanticValidator(UserParams).validate({"id": "42"})
        assert outcome.is_valid
        assert outcome.value == {"id": 42}

    def test_none_fields_dropped(self) -> None:
        outcome = PydanticValidator(UserParams).validate({"id": 1, "slug": None})
        assert outcome.value == {"id": 1}

    def test_invalid_model(self) -> None:
        outcome = PydanticValidator(UserParams).validate({"id": "abc"})
        assert not outcome
        assert outcome.issues[0].path == ("id",)

    def test_missing_field(self) -> None:
        outcome = PydanticValidator(UserParams).validate({})
        assert outcome.issues[0].path == ("id",)

    def test_type_adapter(self) -> None:
        validator = PydanticValidator(TypeAdapter(dict[str, int]))
        assert validator.validate({"page": "3"}).value == {"page": 3}
        assert not validator.validate({"page": "x"})

    def test_satisfies_protocol(self) -> None:
        assert isinstance(PydanticValidator(UserParams), Validator)

    def test_repr(self) -> None:
        assert repr(PydanticValidator(UserParams)) == "PydanticValidator(UserParams)"
