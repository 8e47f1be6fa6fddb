"""
Shared, cross-cutting code for the API.

`core/` should contain small building blocks that multiple features use
(DB wiring, settings, error handling, response headers). Keep word-specific
SQL and business logic in `words/`.
"""
