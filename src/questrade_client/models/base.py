"""Shared model base and decoding policies."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Self

from pydantic import BaseModel, ValidationError

from questrade_client.exceptions import (
    QuestradeDecodeError,
    QuestradeInvalidTypeError,
    QuestradeMissingFieldError,
)

# pydantic error type (or its prefix) -> type name reported to callers
_EXPECTED_TYPES = {
    "bool": "bool",
    "int": "int",
    "float": "number",
    "decimal": "decimal",
    "string": "str",
    "datetime": "datetime",
    "enum": "enum",
    "list": "list",
    "model": "object",
    "dict": "object",
    "delay_flag": "bool",
    # only non-negative integer fields carry a lower bound
    "greater_than_equal": "int",
}


def _field_path(loc: tuple[int | str, ...]) -> str:
    return ".".join(str(part) for part in loc) or "<root>"


def _expected_type(error_type: str) -> str:
    if error_type in _EXPECTED_TYPES:
        return _EXPECTED_TYPES[error_type]
    prefix = error_type.split("_", 1)[0]
    return _EXPECTED_TYPES.get(prefix, error_type)


def decode_error(exc: ValidationError) -> QuestradeDecodeError:
    """Translate the first pydantic validation error into a decode error.

    Missing fields map to QuestradeMissingFieldError, everything else to
    QuestradeInvalidTypeError. The field is reported as a dotted path using
    wire (alias) names, e.g. ``orders.0.side``.
    """
    error = exc.errors()[0]
    field = _field_path(error["loc"])
    if error["type"] == "missing":
        return QuestradeMissingFieldError(field)
    return QuestradeInvalidTypeError(field, _expected_type(error["type"]))


def null_as_zero(value: Any) -> Any:
    """Decode a JSON null numeric as zero."""
    return Decimal(0) if value is None else value


def empty_as_none(value: Any) -> Any:
    """Decode an empty string as an absent value."""
    return None if value == "" else value


class QuestradeModel(BaseModel):
    """Immutable record decoded from a Questrade API payload."""

    model_config = {"populate_by_name": True, "frozen": True}

    @classmethod
    def from_api_response(cls, data: Any) -> Self:
        """Parse from raw API response.

        Raises:
            QuestradeMissingFieldError: A required field is absent
            QuestradeInvalidTypeError: A field has the wrong type or value
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise decode_error(e) from e

    def to_api_dict(self) -> dict[str, Any]:
        """Encode back into the API's JSON shape."""
        return self.model_dump(mode="json", by_alias=True)
