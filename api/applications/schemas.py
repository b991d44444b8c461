"""
Application API schemas (request models).
"""

from __future__ import annotations

from datetime import date
from typing import Literal

from pydantic import AnyHttpUrl, BaseModel, Field

ApplicationStatus = Literal["applied", "interviewing", "rejected", "offer", "accepted"]

APPLICATION_STATUSES: tuple[str, ...] = ("applied", "interviewing", "rejected", "offer", "accepted")


class CreateApplicationRequest(BaseModel):
    company: str = Field(..., min_length=1, max_length=255)
    role: str = Field(..., min_length=1, max_length=255)
    url: AnyHttpUrl | None = None
    status: ApplicationStatus = "applied"
    salary_range: str | None = Field(default=None, max_length=100)
    location: str | None = Field(default=None, max_length=255)
    notes: str | None = None


class UpdateApplicationRequest(BaseModel):
    # Only fields that were sent are written.
    status: ApplicationStatus | None = None
    last_contact: date | None = None
    notes: str | None = None
    salary_range: str | None = Field(default=None, max_length=100)
