"""Pydantic adapter for the ``Validator`` protocol.

Wraps pydantic models so they satisfy the protocol::

    from pydantic import BaseModel
    from pathwise.validation.pydantic import PydanticValidator

    class UserParams(BaseModel):
        id: int

    table = RouteTable({"/users/[id]": {"params": PydanticValidator(UserParams)}})

The validated value is a plain dict (``model_dump(exclude_none=True)``)
so the template engine and query codec can consume it directly. Fields
left at ``None`` are dropped, which makes ``slug: str | None = None``
behave as an absent optional placeholder.
"""

from typing import Any

from pydantic import BaseModel, TypeAdapter, ValidationError

from pathwise.validation.result import Issue, ValidationOutcome


class PydanticValidator:
    """Validate with a pydantic model class or ``TypeAdapter``.

    A model class is wrapped in a ``TypeAdapter`` so both forms share one
    validate-then-dump path.
    """

    __slots__ = ("_adapter", "_label")

    def __init__(self, model: type[BaseModel] | TypeAdapter[Any]) -> None:
        if isinstance(model, TypeAdapter):
            self._adapter: TypeAdapter[Any] = model
            self._label = repr(model)
        else:
            self._adapter = TypeAdapter(model)
            self._label = model.__name__

    def validate(self, raw: Any) -> ValidationOutcome:
        try:
            value = self._adapter.validate_python(raw)
        except ValidationError as exc:
            return ValidationOutcome.failure(
                [Issue(message=err["msg"], path=tuple(err["loc"])) for err in exc.errors()]
            )
        return ValidationOutcome.success(self._adapter.dump_python(value, exclude_none=True))

    def __repr__(self) -> str:
        return f"PydanticValidator({self._label})"
