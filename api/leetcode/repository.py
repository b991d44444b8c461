"""
Coding-practice persistence (raw SQL).

`topics` is stored as a JSON array in a TEXT column.
"""

from __future__ import annotations

import json

from core import db

_COLUMNS = """
    id, problem_name, problem_number, difficulty::text AS difficulty, topics,
    solved_date, time_minutes, notes, solution_approach
"""


def _decode_topics(row: dict) -> dict:
    raw = row.get("topics")
    if not raw:
        row["topics"] = []
        return row
    try:
        topics = json.loads(raw)
    except ValueError:
        # Legacy rows may hold a plain comma separated string.
        topics = [part.strip() for part in str(raw).split(",") if part.strip()]
    row["topics"] = topics if isinstance(topics, list) else [str(topics)]
    return row


async def log_problem(
    *,
    problem_name: str,
    problem_number: int | None,
    difficulty: str | None,
    topics: list[str] | None,
    time_minutes: int | None,
    notes: str | None,
    solution_approach: str | None,
) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO leetcode
            (problem_name, problem_number, difficulty, topics, time_minutes, notes, solution_approach)
        VALUES ($1, $2, $3::leetcode_difficulty, $4, $5, $6, $7)
        RETURNING id
        """,
        problem_name,
        problem_number,
        difficulty,
        json.dumps(topics) if topics is not None else None,
        time_minutes,
        notes,
        solution_approach,
    )
    if row is None:
        raise RuntimeError("Failed to log problem.")
    return row


async def list_problems(*, difficulty: str | None = None, limit: int = 50) -> list[dict]:
    rows = await db.fetch_all(
        f"""
        SELECT {_COLUMNS}
        FROM leetcode
        WHERE ($1::text IS NULL OR difficulty::text = $1)
        ORDER BY solved_date DESC NULLS LAST, id DESC
        LIMIT $2
        """,
        difficulty,
        limit,
    )
    return [_decode_topics(row) for row in rows]


async def count_problems() -> int:
    return int(await db.fetch_value("SELECT count(*) FROM leetcode"))


async def count_by_difficulty() -> list[dict]:
    return await db.fetch_all(
        """
        SELECT difficulty::text AS difficulty, count(*) AS count
        FROM leetcode
        GROUP BY difficulty
        """
    )
