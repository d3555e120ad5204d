"""
Payload validation.

Validation is declared on pydantic models (`min_length`, enum-typed
fields, required fields). This module runs a payload through such a model
and turns every violation into a `FieldError` with a readable reason, so
callers always see the complete list of problems in a single response.

The same conversion backs FastAPI's request validation handler, which means
a bad body rejected by the router and a bad mapping rejected by the pipeline
produce identical error envelopes.
"""
from typing import Any, Iterable, Mapping, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from agent_hub.api.schemas.errors import FieldError
from agent_hub.domain.exceptions import ValidationError

T = TypeVar("T", bound=BaseModel)

# Location prefixes added by FastAPI that are not part of the field path
_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}


def _field_path(loc: Iterable[Any]) -> str:
    parts = [str(part) for part in loc]
    if parts and parts[0] in _LOCATION_PREFIXES:
        parts = parts[1:]
    return ".".join(parts) or "body"


def _describe(error: Mapping[str, Any]) -> str:
    error_type = error.get("type", "")
    ctx = error.get("ctx") or {}

    if error_type == "missing":
        return "This field is required"
    if error_type == "string_too_short":
        min_length = ctx.get("min_length", 1)
        if min_length <= 1:
            return "Must not be empty"
        return f"Must be at least {min_length} characters"
    if error_type == "string_type":
        return "Must be a valid string"
    if error_type in ("enum", "literal_error"):
        return f"Must be one of {ctx.get('expected', 'the allowed values')}"
    if error_type in ("model_attributes_type", "dict_type", "json_invalid"):
        return "Request body must be a JSON object"
    return error.get("msg", "Validation error")


def field_errors_from_pydantic(errors: Iterable[Mapping[str, Any]]) -> list[FieldError]:
    """
    Convert pydantic error dicts into FieldError objects.

    Args:
        errors: Output of `ValidationError.errors()` (pydantic or FastAPI)

    Returns:
        One FieldError per violation, in the order pydantic reported them
    """
    field_errors = []
    for error in errors:
        error_type = error.get("type", "")
        value = error.get("input")
        if error_type == "missing" or isinstance(value, (dict, list)):
            value = None
        field_errors.append(
            FieldError(
                field=_field_path(error.get("loc", ())),
                message=_describe(error),
                code=error_type.upper().replace(".", "_") or None,
                value=value,
            )
        )
    return field_errors


def validate_payload(schema: type[T], payload: Any) -> T:
    """
    Validate a payload against a schema, collecting every violation.

    Already-validated instances of `schema` pass straight through.

    Args:
        schema: Pydantic model declaring the field rules
        payload: Mapping (or model instance) to validate

    Returns:
        Validated model instance

    Raises:
        ValidationError: If any field violates its rules
    """
    if isinstance(payload, schema):
        return payload
    try:
        return schema.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError(field_errors=field_errors_from_pydantic(exc.errors())) from exc
