"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks several features use (DB pool,
environment config, the Trello HTTP client). Feature-specific SQL and
formatting stay in their own package (e.g. `boards/`, `applications/`).
"""
