"""
Coding-practice API endpoints.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Query, status

from . import repository, schemas

router = APIRouter()

logger = logging.getLogger(__name__)


@router.post("/leetcode", status_code=status.HTTP_201_CREATED)
async def log_problem(request: schemas.LogProblemRequest) -> dict:
    row = await repository.log_problem(**request.model_dump())
    logger.info("problem_logged id=%s name=%s", row["id"], request.problem_name)
    return {"message": "Problem logged", "id": int(row["id"])}


@router.get("/leetcode")
async def list_problems(
    difficulty: str | None = Query(default=None),
    limit: int = Query(50, ge=1, le=500),
) -> list[dict]:
    if difficulty not in schemas.DIFFICULTIES:
        difficulty = None
    return await repository.list_problems(difficulty=difficulty, limit=limit)


@router.get("/leetcode/stats/summary")
async def problem_stats() -> dict:
    total = await repository.count_problems()
    rows = await repository.count_by_difficulty()
    return {
        "total": total,
        # NULL difficulty groups under "unknown".
        "by_difficulty": {(row["difficulty"] or "unknown"): int(row["count"]) for row in rows},
    }
