"""Common schemas and form validation used across the application."""

from typing import Any, Generic, List, Mapping, Optional, Type, TypeVar
from pydantic import BaseModel, ValidationError

T = TypeVar("T", bound=BaseModel)


class FieldError(BaseModel):
    """A single rejected form field."""
    field: str
    message: str

    def __str__(self) -> str:
        return f'"{self.field}" {self.message}'


class FormResult(BaseModel, Generic[T]):
    """Outcome of validating a submitted form: a value or field errors."""
    value: Optional[T] = None
    errors: List[FieldError] = []

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def message(self) -> str:
        """All field errors joined into one line for the error page."""
        return ", ".join(str(error) for error in self.errors)


def _describe(error: Mapping[str, Any]) -> str:
    kind = error["type"]
    ctx = error.get("ctx") or {}
    if kind == "missing":
        return "is required"
    if kind == "string_too_short":
        return "is not allowed to be empty"
    if kind in ("float_parsing", "float_type", "int_parsing", "int_type", "int_from_float"):
        return "must be a number" if kind.startswith("float") else "must be an integer"
    if kind == "finite_number":
        return "must be a finite number"
    if kind == "greater_than_equal":
        return f"must be greater than or equal to {ctx.get('ge'):g}"
    if kind == "less_than_equal":
        return f"must be less than or equal to {ctx.get('le'):g}"
    return error["msg"]


def validate_form(schema: Type[T], data: Mapping[str, Any]) -> FormResult[T]:
    """Validate raw form data against *schema* without raising."""
    try:
        return FormResult(value=schema.model_validate(dict(data)))
    except ValidationError as exc:
        errors = [
            FieldError(
                field=".".join(str(part) for part in error["loc"]) or "form",
                message=_describe(error),
            )
            for error in exc.errors()
        ]
        return FormResult(errors=errors)
