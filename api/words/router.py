"""
Word endpoints whose response shape is the same in every API version.

Each versioned router includes this one and adds its own list endpoint
(v1 also its legacy search, registered first so it takes precedence).
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from core import http
from core.guards import require_destructive_endpoints

from . import schemas, service
from .dependencies import get_pagination, get_word_filter
from .filters import WordFilter
from .pagination import Pagination

router = APIRouter()

INVALID_PAYLOAD = "Invalid request payload."


async def read_word_payload(request: Request) -> dict[str, Any]:
    """
    Read the JSON object body of a write.

    Called from the handler so the destructive-endpoint gate runs first.
    """
    try:
        payload = await request.json()
    except ValueError:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_PAYLOAD) from None
    if not isinstance(payload, dict):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_PAYLOAD)
    return payload


@router.post(
    "/words",
    response_model=schemas.WordResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_destructive_endpoints)],
)
async def create_word(request: Request) -> schemas.WordResponse:
    payload = await read_word_payload(request)
    return await service.create_word(payload)


# /random and /search must be registered before /{word_id}.
@router.get("/words/random", response_model=schemas.WordResponse)
async def random_word(word_filter: WordFilter = Depends(get_word_filter)) -> schemas.WordResponse:
    return await service.random_word(word_filter)


@router.get("/words/search", response_model=schemas.SearchResponse)
async def search_words(
    response: Response,
    q: str | None = Query(default=None),
    word_filter: WordFilter = Depends(get_word_filter),
    page: Pagination = Depends(get_pagination),
) -> schemas.SearchResponse:
    result = await service.search_words(q, word_filter, page)
    http.set_cache(response, http.LIST_CACHE_SECONDS)
    return result


@router.get("/words/{word_id}", response_model=schemas.WordResponse)
async def get_word(word_id: str, response: Response) -> schemas.WordResponse:
    word = await service.get_word(word_id)
    http.set_cache(response, http.WORD_CACHE_SECONDS)
    return word


@router.put(
    "/words/{word_id}",
    response_model=schemas.WordResponse,
    dependencies=[Depends(require_destructive_endpoints)],
)
async def update_word(word_id: str, request: Request) -> schemas.WordResponse:
    payload = await read_word_payload(request)
    return await service.update_word(word_id, payload)


@router.delete(
    "/words/{word_id}",
    response_model=schemas.MessageResponse,
    dependencies=[Depends(require_destructive_endpoints)],
)
async def delete_word(word_id: str) -> schemas.MessageResponse:
    return await service.delete_word(word_id)


@router.get("/categories", response_model=list[str])
async def list_categories(response: Response) -> list[str]:
    categories = await service.list_categories()
    http.set_cache(response, http.CATEGORIES_CACHE_SECONDS)
    return categories


@router.get("/config", response_model=schemas.ConfigResponse)
async def get_config() -> schemas.ConfigResponse:
    return service.api_config()
