"""
Strict-mode validation helpers.

Translates pydantic validation failures into ``InvalidArgumentError`` so
callers only ever see the project's own exception types.
"""

from typing import TypeVar

from pydantic import BaseModel, ValidationError

from utils.errors import InvalidArgumentError

__all__ = ["validate_inputs", "describe_errors"]

InputT = TypeVar("InputT", bound=BaseModel)


def describe_errors(errors: list[dict]) -> str:
    """Render pydantic error dicts as 'field: message' pairs."""
    parts = []
    for error in errors:
        location = ".".join(str(part) for part in error.get("loc", ())) or "input"
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts)


def validate_inputs(schema: type[InputT], **values) -> InputT:
    try:
        return schema.model_validate(values)
    except ValidationError as exc:
        errors = exc.errors(include_url=False)
        raise InvalidArgumentError(describe_errors(errors), errors=errors) from exc
