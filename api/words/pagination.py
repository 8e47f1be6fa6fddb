"""
Limit/offset extraction and the pagination envelope.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from core import config

from .filters import BIGINT_MAX, parse_int


@dataclass(frozen=True)
class Pagination:
    limit: int = config.DEFAULT_PAGE_LIMIT
    offset: int = 0

    def has_more(self, total: int) -> bool:
        return has_more(total, limit=self.limit, offset=self.offset)

    def envelope(self, total: int) -> dict[str, Any]:
        return {
            "total": total,
            "limit": self.limit,
            "offset": self.offset,
            "hasMore": self.has_more(total),
        }


def has_more(total: int, *, limit: int, offset: int) -> bool:
    return offset + limit < total


def extract_pagination(params: Mapping[str, Any]) -> Pagination:
    limit = parse_int(params.get("limit"), maximum=BIGINT_MAX)
    if limit is None or limit < 1:
        limit = config.DEFAULT_PAGE_LIMIT
    limit = min(limit, config.max_page_limit())

    offset = parse_int(params.get("offset"), maximum=BIGINT_MAX)
    if offset is None or offset < 0:
        offset = 0

    return Pagination(limit=limit, offset=offset)
