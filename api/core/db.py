"""
Async Postgres access (raw SQL) over an asyncpg pool.

The pool is opened by the FastAPI lifespan in `main.py` and closed on
shutdown. Feature repositories call the helpers below; they never touch
the pool directly.

asyncpg placeholders are positional: $1, $2, ...
"""

from __future__ import annotations

import logging
from typing import Any

import asyncpg

from . import config

logger = logging.getLogger(__name__)

_pool: asyncpg.Pool | None = None


class DatabaseError(RuntimeError):
    pass


def database_url() -> str:
    url = config.env_str("DATABASE_URL")
    if not url:
        raise DatabaseError("DATABASE_URL is not set.")
    return url


async def init_pool() -> None:
    global _pool
    if _pool is not None:
        return None
    _pool = await asyncpg.create_pool(
        dsn=database_url(),
        min_size=1,
        max_size=config.env_int("DB_POOL_MAX_SIZE", 5),
        command_timeout=30,
    )
    logger.info("db_pool_opened")


async def close_pool() -> None:
    global _pool
    if _pool is None:
        return None
    await _pool.close()
    _pool = None
    logger.info("db_pool_closed")


def pool() -> asyncpg.Pool:
    if _pool is None:
        raise DatabaseError("DB pool is not initialized. Call init_pool() on startup.")
    return _pool


async def fetch_one(sql: str, *args: Any) -> dict[str, Any] | None:
    row = await pool().fetchrow(sql, *args)
    return dict(row) if row is not None else None


async def fetch_all(sql: str, *args: Any) -> list[dict[str, Any]]:
    rows = await pool().fetch(sql, *args)
    return [dict(r) for r in rows]


async def fetch_value(sql: str, *args: Any) -> Any:
    """
    First column of the first row (e.g. a COUNT).
    """
    return await pool().fetchval(sql, *args)
