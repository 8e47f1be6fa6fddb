"""
Word API schemas (request/response models).
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .filters import INT32_MAX


class _WordPayload(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    @model_validator(mode="before")
    @classmethod
    def drop_blank_values(cls, data: Any) -> Any:
        # null and blank strings count as "not supplied".
        if not isinstance(data, dict):
            return data
        return {
            key: value
            for key, value in data.items()
            if value is not None and not (isinstance(value, str) and not value.strip())
        }

    @field_validator("numLetters", "numSyllables", mode="before", check_fields=False)
    @classmethod
    def reject_booleans(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("must be a whole number")
        return value

    @field_validator("word", "category", check_fields=False)
    @classmethod
    def lowercase(cls, value: str | None) -> str | None:
        return value.lower() if value is not None else None


class WordCreateRequest(_WordPayload):
    word: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    numLetters: int = Field(..., ge=1, le=INT32_MAX)
    numSyllables: int = Field(..., ge=1, le=INT32_MAX)
    hint: str = Field(..., min_length=1)


class WordUpdateRequest(_WordPayload):
    word: str | None = Field(default=None, min_length=1)
    category: str | None = Field(default=None, min_length=1)
    numLetters: int | None = Field(default=None, ge=1, le=INT32_MAX)
    numSyllables: int | None = Field(default=None, ge=1, le=INT32_MAX)
    hint: str | None = Field(default=None, min_length=1)


class WordResponse(BaseModel):
    id: str
    word: str
    category: str
    numLetters: int
    numSyllables: int
    hint: str
    createdAt: datetime | None = None
    updatedAt: datetime | None = None


class PaginationResponse(BaseModel):
    total: int
    limit: int
    offset: int
    hasMore: bool


class WordPageResponse(BaseModel):
    words: list[WordResponse]
    pagination: PaginationResponse


class SearchResponse(WordPageResponse):
    query: str


class LegacySearchResponse(SearchResponse):
    type: str | None = None


class MessageResponse(BaseModel):
    message: str


class ConfigResponse(BaseModel):
    destructiveEndpointsEnabled: bool
