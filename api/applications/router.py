"""
Job-application API endpoints.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query, status

from . import repository, schemas

router = APIRouter()

logger = logging.getLogger(__name__)


@router.post("/applications", status_code=status.HTTP_201_CREATED)
async def create_application(request: schemas.CreateApplicationRequest) -> dict:
    row = await repository.create_application(
        company=request.company,
        role=request.role,
        url=str(request.url) if request.url is not None else None,
        status=request.status,
        salary_range=request.salary_range,
        location=request.location,
        notes=request.notes,
    )
    logger.info("application_created id=%s company=%s", row["id"], request.company)
    return {"message": "Application added", "id": int(row["id"])}


@router.get("/applications")
async def list_applications(
    status_filter: str | None = Query(default=None, alias="status"),
    limit: int = Query(50, ge=1, le=500),
) -> list[dict]:
    """
    Most recently applied first. An unknown `status` is ignored rather than
    rejected.
    """
    if status_filter not in schemas.APPLICATION_STATUSES:
        status_filter = None
    return await repository.list_applications(status=status_filter, limit=limit)


@router.get("/applications/stats/summary")
async def application_stats() -> dict:
    total = await repository.count_applications()
    rows = await repository.count_by_status()
    return {
        "total": total,
        "by_status": {(row["status"] or "unknown"): int(row["count"]) for row in rows},
    }


@router.get("/applications/{application_id}")
async def get_application(application_id: int) -> dict:
    row = await repository.get_application(application_id)
    if row is None:
        raise HTTPException(status_code=404, detail="Application not found.")
    return row


@router.patch("/applications/{application_id}")
async def update_application(
    application_id: int,
    request: schemas.UpdateApplicationRequest,
) -> dict:
    changes = request.model_dump(exclude_unset=True)
    row = await repository.update_application(application_id, changes)
    if row is None:
        raise HTTPException(status_code=404, detail="Application not found.")
    logger.info("application_updated id=%s fields=%s", application_id, sorted(changes))
    return {"message": "Updated", "application": row}
