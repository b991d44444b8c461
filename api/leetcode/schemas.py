"""
Coding-practice log schemas.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

Difficulty = Literal["easy", "medium", "hard"]

DIFFICULTIES: tuple[str, ...] = ("easy", "medium", "hard")


class LogProblemRequest(BaseModel):
    problem_name: str = Field(..., min_length=1, max_length=255)
    problem_number: int | None = None
    difficulty: Difficulty | None = None
    topics: list[str] | None = None
    time_minutes: int | None = Field(default=None, ge=0)
    notes: str | None = None
    solution_approach: str | None = None
