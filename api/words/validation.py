"""
Payload validation and normalisation for word writes.

The rules live on the pydantic request models in `schemas`; this module
turns their errors into the messages the API returns.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from pydantic import ValidationError

from .schemas import WordCreateRequest, WordUpdateRequest

WORD_FIELDS = ("word", "category", "numLetters", "numSyllables", "hint")


class WordValidationError(ValueError):
    pass


class MissingFieldError(WordValidationError):
    def __init__(self, fields: list[str]) -> None:
        super().__init__(f"Missing required fields: {', '.join(fields)}")
        self.fields = fields

    @property
    def field(self) -> str:
        return self.fields[0]


class TypeValidationError(WordValidationError):
    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"Invalid {field}: {message}")
        self.field = field


def _error_field(error: Mapping[str, Any]) -> str:
    loc = error.get("loc") or ()
    return str(loc[0]) if loc else "body"


def _type_error(exc: ValidationError) -> TypeValidationError:
    first = exc.errors()[0]
    return TypeValidationError(_error_field(first), first["msg"])


def validate_required_fields(data: Mapping[str, Any], required: Iterable[str]) -> None:
    """
    Raise MissingFieldError listing every absent field of `required`, in order.

    Null and blank strings count as absent.
    """
    required = list(required)
    try:
        WordCreateRequest.model_validate(data)
    except ValidationError as exc:
        absent = {_error_field(e) for e in exc.errors() if e["type"] == "missing"}
        missing = [field for field in required if field in absent]
        if missing:
            raise MissingFieldError(missing) from None


def validate_and_transform_word_data(data: Mapping[str, Any]) -> dict[str, Any]:
    """
    Normalise the word fields present in `data`.

    Absent (or null) fields are left out of the result so callers can use it
    for partial updates. Unknown keys are ignored.
    """
    try:
        payload = WordUpdateRequest.model_validate(data)
    except ValidationError as exc:
        raise _type_error(exc) from None
    return payload.model_dump(exclude_unset=True)
