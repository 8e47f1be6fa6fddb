"""
Async database access helpers (raw SQL) using asyncpg.

This module owns the connection pool. The pool is created on first use and
reused for the life of the process; FastAPI closes it on shutdown (see
`api/main.py`).

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import asyncio
import logging
import os
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg

from . import config

logger = logging.getLogger(__name__)

_pool: asyncpg.Pool | None = None
_pool_lock = asyncio.Lock()


class StoreError(RuntimeError):
    pass


class StoreUnavailableError(StoreError):
    pass


class MalformedQueryError(StoreError):
    pass


class ConstraintViolationError(StoreError):
    def __init__(self, message: str, *, constraint: str | None = None) -> None:
        super().__init__(message)
        self.constraint = constraint


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url() -> str:
    url = os.environ.get("DATABASE_URL", "").strip()
    if not url:
        raise StoreUnavailableError("DATABASE_URL is not set.")
    return _sanitize_database_url(url)


async def get_pool() -> asyncpg.Pool:
    """
    Return the process-wide pool, creating it on first call.

    Concurrent first callers wait on the same creation. A failed creation
    leaves nothing cached, so the next call tries again.
    """
    global _pool
    if _pool is not None:
        return _pool

    async with _pool_lock:
        if _pool is not None:
            return _pool

        min_size = max(0, config.env_int("DB_POOL_MIN_SIZE", 1))
        max_size = max(1, min_size, config.env_int("DB_POOL_MAX_SIZE", 10))
        try:
            _pool = await asyncpg.create_pool(
                dsn=database_url(),
                min_size=min_size,
                max_size=max_size,
                command_timeout=config.env_int("DB_COMMAND_TIMEOUT", 30),
            )
        except (OSError, asyncio.TimeoutError, asyncpg.PostgresError, asyncpg.InterfaceError) as exc:
            raise StoreUnavailableError("Could not connect to the word store.") from exc

        logger.info("db_pool_ready min_size=%s max_size=%s", min_size, max_size)
        return _pool


async def close_pool() -> None:
    global _pool
    if _pool is None:
        return None
    await _pool.close()
    _pool = None


@asynccontextmanager
async def _translate_errors() -> AsyncIterator[None]:
    try:
        yield
    except asyncpg.UniqueViolationError as exc:
        raise ConstraintViolationError(str(exc), constraint=exc.constraint_name) from exc
    except (
        asyncpg.PostgresConnectionError,
        asyncpg.InterfaceError,
        OSError,
        asyncio.TimeoutError,
    ) as exc:
        raise StoreUnavailableError("Word store is unavailable.") from exc
    except asyncpg.PostgresError as exc:
        raise MalformedQueryError(f"Word store rejected the query: {exc}") from exc


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


async def fetch_one(sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    pool = await get_pool()
    async with _translate_errors():
        row = await pool.fetchrow(sql, *args)
    return _record_to_dict(row) if row is not None else None


async def fetch_all(sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    pool = await get_pool()
    async with _translate_errors():
        rows = await pool.fetch(sql, *args)
    return [_record_to_dict(r) for r in rows]

