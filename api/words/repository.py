"""
Word persistence (raw SQL).

Rows come back with the API's field names (camelCase) and the id as text,
so callers never see column names.
"""

from __future__ import annotations

from typing import Any

from core import db

from .filters import WordFilter

WORD_COLUMNS = """
    id::text AS id,
    word,
    category,
    num_letters AS "numLetters",
    num_syllables AS "numSyllables",
    hint,
    created_at AS "createdAt",
    updated_at AS "updatedAt"
"""

# API field -> column, for partial updates.
UPDATABLE_COLUMNS = {
    "word": "word",
    "category": "category",
    "numLetters": "num_letters",
    "numSyllables": "num_syllables",
    "hint": "hint",
}

ORDER_BY = {
    "newest": "created_at DESC, id DESC",
    "word": "word ASC",
}


async def find_words(
    word_filter: WordFilter,
    *,
    limit: int | None = None,
    offset: int = 0,
    order_by: str = "newest",
) -> list[dict[str, Any]]:
    """
    List words matching `word_filter`. `limit=None` returns every match.
    """
    where, args = word_filter.to_sql()
    sql = f"""
        SELECT {WORD_COLUMNS}
        FROM words
        WHERE {where}
        ORDER BY {ORDER_BY[order_by]}
        OFFSET ${len(args) + 1}
    """
    args.append(offset)
    if limit is not None:
        sql += f"LIMIT ${len(args) + 1}\n"
        args.append(limit)
    return await db.fetch_all(sql, *args)


async def count_words(word_filter: WordFilter) -> int:
    where, args = word_filter.to_sql()
    row = await db.fetch_one(f"SELECT count(*) AS n FROM words WHERE {where}", *args)
    return int((row or {}).get("n", 0))


async def sample_words(word_filter: WordFilter, *, size: int = 1) -> list[dict[str, Any]]:
    """
    Uniform random sample of matching words.
    """
    where, args = word_filter.to_sql()
    return await db.fetch_all(
        f"""
        SELECT {WORD_COLUMNS}
        FROM words
        WHERE {where}
        ORDER BY random()
        LIMIT ${len(args) + 1}
        """,
        *args,
        size,
    )


async def distinct_categories() -> list[str]:
    rows = await db.fetch_all(
        """
        SELECT DISTINCT category
        FROM words
        ORDER BY category
        """
    )
    return [str(row["category"]) for row in rows]


async def get_word_by_id(word_id: str) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT {WORD_COLUMNS}
        FROM words
        WHERE id = $1::uuid
        """,
        word_id,
    )


async def find_word_by_text(word: str) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT {WORD_COLUMNS}
        FROM words
        WHERE word = $1
        LIMIT 1
        """,
        word,
    )


async def insert_word(
    *,
    word: str,
    category: str,
    num_letters: int,
    num_syllables: int,
    hint: str,
) -> dict[str, Any]:
    row = await db.fetch_one(
        f"""
        INSERT INTO words (word, category, num_letters, num_syllables, hint)
        VALUES ($1, $2, $3, $4, $5)
        RETURNING {WORD_COLUMNS}
        """,
        word,
        category,
        num_letters,
        num_syllables,
        hint,
    )
    if row is None:
        raise RuntimeError("Failed to insert word.")
    return row


async def update_word(word_id: str, fields: dict[str, Any]) -> dict[str, Any] | None:
    """
    Apply a partial update and return the updated row, or None when the id
    does not exist. Only keys in UPDATABLE_COLUMNS are written.
    """
    assignments: list[str] = []
    args: list[Any] = [word_id]
    for key, column in UPDATABLE_COLUMNS.items():
        if key in fields:
            args.append(fields[key])
            assignments.append(f"{column} = ${len(args)}")
    assignments.append("updated_at = now()")

    return await db.fetch_one(
        f"""
        UPDATE words
        SET {", ".join(assignments)}
        WHERE id = $1::uuid
        RETURNING {WORD_COLUMNS}
        """,
        *args,
    )


async def delete_word(word_id: str) -> bool:
    row = await db.fetch_one(
        """
        DELETE FROM words
        WHERE id = $1::uuid
        RETURNING id
        """,
        word_id,
    )
    return row is not None
