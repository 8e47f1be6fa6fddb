"""
Word business logic shared by every API version.

Routers only pick the response shape; filtering, validation, duplicate
checks and not-found handling all live here.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, Mapping

from fastapi import HTTPException, status

from core import config, db

from . import repository, schemas, validation
from .filters import WordFilter, apply_search_type
from .pagination import Pagination

logger = logging.getLogger(__name__)

WORD_NOT_FOUND = "Word not found."
WORD_EXISTS = "Word already exists."


def _to_word_response(row: Mapping[str, Any]) -> schemas.WordResponse:
    return schemas.WordResponse(
        id=str(row["id"]),
        word=str(row["word"]),
        category=str(row["category"]),
        numLetters=int(row["numLetters"]),
        numSyllables=int(row["numSyllables"]),
        hint=str(row["hint"]),
        createdAt=row.get("createdAt"),
        updatedAt=row.get("updatedAt"),
    )


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=WORD_NOT_FOUND)


def _conflict() -> HTTPException:
    return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=WORD_EXISTS)


def _bad_request(exc: validation.WordValidationError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


def normalize_word_id(word_id: str) -> str | None:
    """
    Canonical form of a word id, or None when it cannot be one.
    """
    try:
        return str(uuid.UUID((word_id or "").strip()))
    except ValueError:
        return None


async def list_words(word_filter: WordFilter) -> list[schemas.WordResponse]:
    rows = await repository.find_words(word_filter)
    return [_to_word_response(row) for row in rows]


async def list_words_page(word_filter: WordFilter, page: Pagination) -> schemas.WordPageResponse:
    rows = await repository.find_words(word_filter, limit=page.limit, offset=page.offset)
    total = await repository.count_words(word_filter)
    return schemas.WordPageResponse(
        words=[_to_word_response(row) for row in rows],
        pagination=schemas.PaginationResponse(**page.envelope(total)),
    )


async def get_word(word_id: str) -> schemas.WordResponse:
    normalized = normalize_word_id(word_id)
    if normalized is None:
        raise _not_found()

    row = await repository.get_word_by_id(normalized)
    if row is None:
        raise _not_found()
    return _to_word_response(row)


async def create_word(payload: Mapping[str, Any]) -> schemas.WordResponse:
    try:
        validation.validate_required_fields(payload, validation.WORD_FIELDS)
        data = validation.validate_and_transform_word_data(payload)
    except validation.WordValidationError as exc:
        raise _bad_request(exc) from exc

    existing = await repository.find_word_by_text(data["word"])
    if existing is not None:
        raise _conflict()

    try:
        row = await repository.insert_word(
            word=data["word"],
            category=data["category"],
            num_letters=data["numLetters"],
            num_syllables=data["numSyllables"],
            hint=data["hint"],
        )
    except db.ConstraintViolationError as exc:
        # Lost a race with a concurrent create of the same word.
        raise _conflict() from exc

    logger.info("word_created id=%s word=%s", row["id"], row["word"])
    return _to_word_response(row)


async def update_word(word_id: str, payload: Mapping[str, Any]) -> schemas.WordResponse:
    try:
        data = validation.validate_and_transform_word_data(payload)
    except validation.WordValidationError as exc:
        raise _bad_request(exc) from exc

    normalized = normalize_word_id(word_id)
    if normalized is None:
        raise _not_found()

    if not data:
        return await get_word(normalized)

    if "word" in data:
        existing = await repository.find_word_by_text(data["word"])
        if existing is not None and str(existing["id"]) != normalized:
            raise _conflict()

    try:
        row = await repository.update_word(normalized, data)
    except db.ConstraintViolationError as exc:
        raise _conflict() from exc

    if row is None:
        raise _not_found()

    logger.info("word_updated id=%s fields=%s", normalized, ",".join(sorted(data)))
    return _to_word_response(row)


async def delete_word(word_id: str) -> schemas.MessageResponse:
    normalized = normalize_word_id(word_id)
    if normalized is None:
        raise _not_found()

    deleted = await repository.delete_word(normalized)
    if not deleted:
        raise _not_found()

    logger.info("word_deleted id=%s", normalized)
    return schemas.MessageResponse(message="Word deleted successfully")


async def random_word(word_filter: WordFilter) -> schemas.WordResponse:
    rows = await repository.sample_words(word_filter, size=1)
    if not rows:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No words found matching criteria.",
        )
    return _to_word_response(rows[0])


async def search_words(
    query: str | None,
    word_filter: WordFilter,
    page: Pagination,
) -> schemas.SearchResponse:
    q = query or ""
    if not q:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail='Query parameter "q" is required.',
        )

    min_length = config.search_min_length()
    if len(q) < min_length:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Query must be at least {min_length} characters long.",
        )

    search_filter = word_filter.with_search(q)
    rows = await repository.find_words(
        search_filter,
        limit=page.limit,
        offset=page.offset,
        order_by="word",
    )
    total = await repository.count_words(search_filter)
    return schemas.SearchResponse(
        words=[_to_word_response(row) for row in rows],
        pagination=schemas.PaginationResponse(**page.envelope(total)),
        query=q,
    )


async def legacy_search_words(
    query: str | None,
    search_type: str | None,
    word_filter: WordFilter,
    page: Pagination,
) -> schemas.LegacySearchResponse:
    """
    v1 search: `type` narrows the letter range to a game preset and is echoed back.
    """
    result = await search_words(query, apply_search_type(word_filter, search_type), page)
    return schemas.LegacySearchResponse(
        words=result.words,
        pagination=result.pagination,
        query=result.query,
        type=search_type,
    )


async def list_categories() -> list[str]:
    return await repository.distinct_categories()


def api_config() -> schemas.ConfigResponse:
    return schemas.ConfigResponse(destructiveEndpointsEnabled=config.destructive_endpoints_enabled())
