"""
v2 API.

`GET /words` returns a pagination envelope, and every response (preflight
included) carries CORS headers set by this router.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from core import http
from words import router as words_router
from words import schemas, service
from words.dependencies import get_pagination, get_word_filter
from words.filters import WordFilter
from words.pagination import Pagination


async def add_cors_headers(response: Response) -> None:
    http.add_cors_headers(response)


router = APIRouter(dependencies=[Depends(add_cors_headers)])


@router.options("/{path:path}", include_in_schema=False)
async def preflight(path: str) -> Response:
    return http.add_cors_headers(Response(status_code=status.HTTP_200_OK))


@router.get("/words", response_model=schemas.WordPageResponse)
async def list_words(
    response: Response,
    word_filter: WordFilter = Depends(get_word_filter),
    page: Pagination = Depends(get_pagination),
) -> schemas.WordPageResponse:
    result = await service.list_words_page(word_filter, page)
    http.set_cache(response, http.LIST_CACHE_SECONDS)
    return result


router.include_router(words_router.router)
