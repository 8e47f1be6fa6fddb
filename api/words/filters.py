"""
Word filter builder.

Turns query parameters into a `WordFilter`, which compiles into a SQL WHERE
clause for the repository.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Mapping

# Largest values the `integer` and `bigint` columns / parameters accept.
INT32_MAX = 2147483647
BIGINT_MAX = 9223372036854775807

# Letter-count presets for the legacy search `type` parameter.
SEARCH_TYPE_LETTER_RANGES: dict[str, tuple[int, int]] = {
    "crossword": (3, 15),
    "scrabble": (2, 7),
    "wordsearch": (4, 12),
}


def parse_int(raw: Any, *, maximum: int = INT32_MAX) -> int | None:
    """
    Lenient integer parsing for read paths.

    Anything non-numeric, or outside `-maximum..maximum`, is None.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        number = raw
    else:
        text = str(raw).strip()
        if not text:
            return None
        try:
            number = int(text)
        except ValueError:
            return None
    if abs(number) > maximum:
        return None
    return number


def escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


@dataclass(frozen=True)
class WordFilter:
    category: str | None = None
    min_letters: int | None = None
    max_letters: int | None = None
    min_syllables: int | None = None
    max_syllables: int | None = None
    word_contains: str | None = None

    def with_search(self, query: str) -> "WordFilter":
        return replace(self, word_contains=query.lower() or None)

    def with_letter_range(self, minimum: int, maximum: int) -> "WordFilter":
        return replace(self, min_letters=minimum, max_letters=maximum)

    def to_sql(self, *, start: int = 1) -> tuple[str, list[Any]]:
        """
        Compile into `(where_clause, args)` using $n placeholders from `start`.

        An empty filter compiles to `TRUE`.
        """
        clauses: list[str] = []
        args: list[Any] = []

        def add(template: str, value: Any) -> None:
            args.append(value)
            clauses.append(template.format(p=f"${start + len(args) - 1}"))

        if self.category is not None:
            add("category = {p}", self.category)
        if self.min_letters is not None:
            add("num_letters >= {p}", self.min_letters)
        if self.max_letters is not None:
            add("num_letters <= {p}", self.max_letters)
        if self.min_syllables is not None:
            add("num_syllables >= {p}", self.min_syllables)
        if self.max_syllables is not None:
            add("num_syllables <= {p}", self.max_syllables)
        if self.word_contains is not None:
            add("word ILIKE '%' || {p} || '%' ESCAPE '\\'", escape_like(self.word_contains))

        if not clauses:
            return "TRUE", args
        return " AND ".join(clauses), args


def apply_search_type(word_filter: WordFilter, search_type: str | None) -> WordFilter:
    """
    Narrow the letter range to a game preset. Unknown types change nothing.
    """
    letter_range = SEARCH_TYPE_LETTER_RANGES.get(search_type or "")
    if letter_range is None:
        return word_filter
    return word_filter.with_letter_range(*letter_range)


def build_filter(params: Mapping[str, Any]) -> WordFilter:
    category = str(params.get("category") or "").strip().lower()
    return WordFilter(
        category=category or None,
        min_letters=parse_int(params.get("minLetters")),
        max_letters=parse_int(params.get("maxLetters")),
        min_syllables=parse_int(params.get("minSyllables")),
        max_syllables=parse_int(params.get("maxSyllables")),
    )
