"""
Application persistence helpers.
"""

from __future__ import annotations

from typing import Any

from core import db

_COLUMNS = """
    id, company, role, url, status::text AS status, applied_date, last_contact,
    notes, salary_range, location, created_at, updated_at
"""

# Whitelist of columns PATCH may touch.
UPDATABLE_COLUMNS = ("status", "last_contact", "notes", "salary_range")


async def create_application(
    *,
    company: str,
    role: str,
    url: str | None,
    status: str,
    salary_range: str | None,
    location: str | None,
    notes: str | None,
) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO applications (company, role, url, status, salary_range, location, notes)
        VALUES ($1, $2, $3, $4::application_status, $5, $6, $7)
        RETURNING id
        """,
        company,
        role,
        url,
        status,
        salary_range,
        location,
        notes,
    )
    if row is None:
        raise RuntimeError("Failed to create application.")
    return row


async def list_applications(*, status: str | None = None, limit: int = 50) -> list[dict]:
    return await db.fetch_all(
        f"""
        SELECT {_COLUMNS}
        FROM applications
        WHERE ($1::text IS NULL OR status::text = $1)
        ORDER BY applied_date DESC NULLS LAST, id DESC
        LIMIT $2
        """,
        status,
        limit,
    )


async def get_application(application_id: int) -> dict | None:
    return await db.fetch_one(
        f"""
        SELECT {_COLUMNS}
        FROM applications
        WHERE id = $1
        """,
        application_id,
    )


async def update_application(application_id: int, changes: dict[str, Any]) -> dict | None:
    assignments = ["updated_at = now()"]
    args: list[Any] = [application_id]
    for column in UPDATABLE_COLUMNS:
        if column not in changes:
            continue
        args.append(changes[column])
        cast = "::application_status" if column == "status" else ""
        assignments.append(f"{column} = ${len(args)}{cast}")

    return await db.fetch_one(
        f"""
        UPDATE applications
        SET {", ".join(assignments)}
        WHERE id = $1
        RETURNING {_COLUMNS}
        """,
        *args,
    )


async def count_applications() -> int:
    return int(await db.fetch_value("SELECT count(*) FROM applications"))


async def count_by_status() -> list[dict]:
    return await db.fetch_all(
        """
        SELECT status::text AS status, count(*) AS count
        FROM applications
        GROUP BY status
        """
    )
