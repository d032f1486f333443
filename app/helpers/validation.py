"""Request validation helpers."""

import logging
from typing import TypeVar

import bleach
import pydantic
from pydantic import BaseModel

from hrms.errors import ValidationError

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def format_validation_errors(error: pydantic.ValidationError) -> str:
    """Turn pydantic errors into one client-facing sentence.

    Parameters
    ----------
    error : pydantic.ValidationError
        The error raised by the schema

    Returns
    -------
    str
        e.g. ``"Validation failed: first_name: Field required; email: ..."``
    """
    parts = []
    for item in error.errors():
        field = ".".join(str(loc) for loc in item.get("loc", ())) or "body"
        message = item.get("msg", "Invalid value")
        if message.startswith("Value error, "):
            message = message[len("Value error, ") :]
        parts.append(f"{field}: {message}")
    return "Validation failed: " + "; ".join(parts)


def parse_payload(schema: type[SchemaT], payload) -> SchemaT:
    """Validate a JSON payload against a schema.

    Raises
    ------
    ValidationError
        If the payload is not an object or does not match the schema.
    """
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    try:
        return schema.model_validate(payload)
    except pydantic.ValidationError as e:
        message = format_validation_errors(e)
        logging.warning(f"Rejected {schema.__name__} payload - {message}")
        raise ValidationError(message) from e


def sanitize_param(param: str | None) -> str:
    """Sanitize a query string parameter using bleach."""
    if param is None:
        return ""
    return bleach.clean(str(param).strip(), tags=[], strip=True)


def parse_positive_int(param: str | None, name: str, default: int, maximum: int | None = None):
    """Parse a positive integer query parameter.

    Parameters
    ----------
    param : Optional[str]
        The raw value from the query string
    name : str
        Parameter name, used in the error message
    default : int
        Value to use when the parameter is absent or blank
    maximum : Optional[int]
        Upper bound; larger values are clamped to it

    Raises
    ------
    ValidationError
        If the value is not an integer greater than zero.
    """
    param = sanitize_param(param)
    if not param:
        return default
    try:
        value = int(param)
    except ValueError:
        raise ValidationError(f"{name} must be a positive integer") from None
    if value < 1:
        raise ValidationError(f"{name} must be a positive integer")
    if maximum is not None:
        value = min(value, maximum)
    return value
