"""
Legacy v1 API.

Keeps the legacy response shapes: `GET /words` returns a flat array with no
pagination envelope, and search takes a game `type` preset. CORS comes from
the global middleware.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response

from core import http
from words import router as words_router
from words import schemas, service
from words.dependencies import get_pagination, get_word_filter
from words.filters import WordFilter
from words.pagination import Pagination

router = APIRouter()


@router.get("/words", response_model=list[schemas.WordResponse])
async def list_words(
    response: Response,
    word_filter: WordFilter = Depends(get_word_filter),
) -> list[schemas.WordResponse]:
    words = await service.list_words(word_filter)
    http.set_cache(response, http.LIST_CACHE_SECONDS)
    return words


# Registered ahead of the shared /words/search.
@router.get("/words/search", response_model=schemas.LegacySearchResponse)
async def search_words(
    response: Response,
    q: str | None = Query(default=None),
    search_type: str | None = Query(default=None, alias="type"),
    word_filter: WordFilter = Depends(get_word_filter),
    page: Pagination = Depends(get_pagination),
) -> schemas.LegacySearchResponse:
    result = await service.legacy_search_words(q, search_type, word_filter, page)
    http.set_cache(response, http.LIST_CACHE_SECONDS)
    return result


router.include_router(words_router.router)
