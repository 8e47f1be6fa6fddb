"""
Query-parameter dependencies shared by the versioned routers.

Parameters are taken as raw strings so malformed numbers fall back to "no
constraint" / defaults instead of failing request validation.
"""

from __future__ import annotations

from fastapi import Query

from .filters import WordFilter, build_filter
from .pagination import Pagination, extract_pagination


async def get_word_filter(
    category: str | None = Query(default=None),
    min_letters: str | None = Query(default=None, alias="minLetters"),
    max_letters: str | None = Query(default=None, alias="maxLetters"),
    min_syllables: str | None = Query(default=None, alias="minSyllables"),
    max_syllables: str | None = Query(default=None, alias="maxSyllables"),
) -> WordFilter:
    return build_filter(
        {
            "category": category,
            "minLetters": min_letters,
            "maxLetters": max_letters,
            "minSyllables": min_syllables,
            "maxSyllables": max_syllables,
        }
    )


async def get_pagination(
    limit: str | None = Query(default=None),
    offset: str | None = Query(default=None),
) -> Pagination:
    return extract_pagination({"limit": limit, "offset": offset})
