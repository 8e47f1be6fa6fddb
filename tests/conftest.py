"""
Shared fixtures: an in-memory word store swapped in for `words.repository`.
"""

from __future__ import annotations

import random
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any

import pytest
from fastapi.testclient import TestClient

import main
from core import db
from words import repository
from words.filters import WordFilter

REPOSITORY_FUNCTIONS = (
    "find_words",
    "count_words",
    "sample_words",
    "distinct_categories",
    "get_word_by_id",
    "find_word_by_text",
    "insert_word",
    "update_word",
    "delete_word",
)

UPDATABLE_FIELDS = ("word", "category", "numLetters", "numSyllables", "hint")


def _matches(word_filter: WordFilter, row: dict[str, Any]) -> bool:
    """
    In-memory equivalent of `WordFilter.to_sql`.
    """
    if word_filter.category is not None and row["category"] != word_filter.category:
        return False
    if word_filter.min_letters is not None and row["numLetters"] < word_filter.min_letters:
        return False
    if word_filter.max_letters is not None and row["numLetters"] > word_filter.max_letters:
        return False
    if word_filter.min_syllables is not None and row["numSyllables"] < word_filter.min_syllables:
        return False
    if word_filter.max_syllables is not None and row["numSyllables"] > word_filter.max_syllables:
        return False
    if word_filter.word_contains is not None:
        return word_filter.word_contains in row["word"].lower()
    return True


class FakeWordStore:
    def __init__(self) -> None:
        self.rows: dict[str, dict[str, Any]] = {}
        self.calls: list[str] = []
        self._clock = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def _now(self) -> datetime:
        self._clock += timedelta(seconds=1)
        return self._clock

    def add(
        self,
        word: str,
        category: str = "animals",
        num_letters: int | None = None,
        num_syllables: int = 1,
        hint: str = "A hint",
    ) -> dict[str, Any]:
        now = self._now()
        row = {
            "id": str(uuid.uuid4()),
            "word": word,
            "category": category,
            "numLetters": num_letters if num_letters is not None else len(word),
            "numSyllables": num_syllables,
            "hint": hint,
            "createdAt": now,
            "updatedAt": now,
        }
        self.rows[row["id"]] = row
        return dict(row)

    async def find_words(
        self,
        word_filter: WordFilter,
        *,
        limit: int | None = None,
        offset: int = 0,
        order_by: str = "newest",
    ) -> list[dict[str, Any]]:
        self.calls.append("find_words")
        rows = [dict(row) for row in self.rows.values() if _matches(word_filter, row)]
        if order_by == "word":
            rows.sort(key=lambda row: row["word"])
        else:
            rows.sort(key=lambda row: row["createdAt"], reverse=True)
        rows = rows[offset:]
        if limit is not None:
            rows = rows[:limit]
        return rows

    async def count_words(self, word_filter: WordFilter) -> int:
        self.calls.append("count_words")
        return sum(1 for row in self.rows.values() if _matches(word_filter, row))

    async def sample_words(self, word_filter: WordFilter, *, size: int = 1) -> list[dict[str, Any]]:
        self.calls.append("sample_words")
        rows = [dict(row) for row in self.rows.values() if _matches(word_filter, row)]
        return random.sample(rows, min(size, len(rows)))

    async def distinct_categories(self) -> list[str]:
        self.calls.append("distinct_categories")
        return sorted({row["category"] for row in self.rows.values()})

    async def get_word_by_id(self, word_id: str) -> dict[str, Any] | None:
        self.calls.append("get_word_by_id")
        row = self.rows.get(word_id)
        return dict(row) if row is not None else None

    async def find_word_by_text(self, word: str) -> dict[str, Any] | None:
        self.calls.append("find_word_by_text")
        for row in self.rows.values():
            if row["word"] == word:
                return dict(row)
        return None

    async def insert_word(
        self,
        *,
        word: str,
        category: str,
        num_letters: int,
        num_syllables: int,
        hint: str,
    ) -> dict[str, Any]:
        self.calls.append("insert_word")
        if any(row["word"] == word for row in self.rows.values()):
            raise db.ConstraintViolationError("duplicate key", constraint="words_word_key")
        return self.add(word, category, num_letters, num_syllables, hint)

    async def update_word(self, word_id: str, fields: dict[str, Any]) -> dict[str, Any] | None:
        self.calls.append("update_word")
        row = self.rows.get(word_id)
        if row is None:
            return None
        for key in UPDATABLE_FIELDS:
            if key in fields:
                row[key] = fields[key]
        row["updatedAt"] = self._now()
        return dict(row)

    async def delete_word(self, word_id: str) -> bool:
        self.calls.append("delete_word")
        return self.rows.pop(word_id, None) is not None


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("ENABLE_DESTRUCTIVE_ENDPOINTS", "SEARCH_MIN_LENGTH", "MAX_PAGE_LIMIT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def store(monkeypatch: pytest.MonkeyPatch) -> FakeWordStore:
    fake = FakeWordStore()
    for name in REPOSITORY_FUNCTIONS:
        monkeypatch.setattr(repository, name, getattr(fake, name))
    return fake


@pytest.fixture
def destructive_enabled(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENABLE_DESTRUCTIVE_ENDPOINTS", "true")


@pytest.fixture
def client(store: FakeWordStore) -> TestClient:
    return TestClient(main.app)


@pytest.fixture
def new_word() -> dict[str, Any]:
    return {
        "word": "  Elephant ",
        "category": "Animals",
        "numLetters": "8",
        "numSyllables": 3,
        "hint": "Large mammal with a Trunk",
    }
