"""Job data access: raw parameterized SQL over the jobs table."""

import logging
from decimal import Decimal
from typing import Any, Mapping

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from jobly.errors import ErrorKind, JoblyError
from jobly.helpers.sql import WhereClause, bind_params, like_contains, placeholder, sql_for_partial_update

logger = logging.getLogger(__name__)

JOB_COLUMNS = 'id, title, salary, equity, company_handle AS "companyHandle"'

# No job field is stored under a different column name
COLUMN_OVERRIDES: dict[str, str] = {}

UPDATABLE_FIELDS = {"title", "salary", "equity"}
IMMUTABLE_FIELDS = {"id", "company_handle", "companyHandle"}


def _equity_text(value) -> str | None:
    if value is None:
        return None
    # SQLite hands NUMERIC back as float; str() first keeps 0.1 from becoming 0.1000000000000000055
    return str(Decimal(str(value)))


def job_record(row: Mapping[str, Any]) -> dict[str, Any]:
    """Row mapping -> job dict with equity as a decimal string."""
    job = dict(row)
    job["equity"] = _equity_text(job.get("equity"))
    return job


async def create(db: AsyncSession, data: dict[str, Any]) -> dict[str, Any]:
    """Create a job and return it with its generated id.

    data should be { title, salary, equity, company_handle }. The insert
    selects from companies, so an unknown company inserts nothing and raises a
    validation error.
    """
    company_handle = data["company_handle"]
    result = await db.execute(
        text(f"""INSERT INTO jobs (title, salary, equity, company_handle)
                 SELECT CAST(:p1 AS TEXT), CAST(:p2 AS INTEGER), CAST(:p3 AS NUMERIC), handle
                 FROM companies
                 WHERE handle = :p4
                 RETURNING {JOB_COLUMNS}"""),
        bind_params([
            data["title"],
            data.get("salary"),
            data.get("equity"),
            company_handle,
        ]),
    )
    row = result.mappings().first()
    if not row:
        raise JoblyError(ErrorKind.VALIDATION, f"No company: {company_handle}")

    job = job_record(row)
    logger.info("Created job %s for %s", job["id"], company_handle)
    return job


def build_filter_query(filters: dict[str, Any] | None) -> tuple[str, list[Any]]:
    """Build the listing query for the given filters.

    filters may contain title (substring), minSalary and hasEquity.
    """
    filters = filters or {}
    where = WhereClause()

    if filters.get("title"):
        where.add("title LIKE {} ESCAPE '\\'", like_contains(filters["title"]))
    if filters.get("minSalary") is not None:
        where.add("salary >= {}", filters["minSalary"])
    if filters.get("hasEquity"):
        where.add("equity IS NOT NULL")

    query = f"SELECT {JOB_COLUMNS} FROM jobs{where.sql} ORDER BY title"
    return query, where.values


async def find_all(db: AsyncSession, filters: dict[str, Any] | None = None) -> list[dict[str, Any]]:
    """Return jobs matching filters, ordered by title."""
    query, values = build_filter_query(filters)
    logger.debug("Job listing query: %s values=%s", query, values)
    result = await db.execute(text(query), bind_params(values))
    return [job_record(row) for row in result.mappings()]


async def get(db: AsyncSession, job_id: int) -> dict[str, Any]:
    result = await db.execute(
        text(f"SELECT {JOB_COLUMNS} FROM jobs WHERE id = :p1"),
        bind_params([job_id]),
    )
    row = result.mappings().first()
    if not row:
        raise JoblyError(ErrorKind.NOT_FOUND, f"No job: {job_id}")
    return job_record(row)


async def update(db: AsyncSession, job_id: int, data: dict[str, Any]) -> dict[str, Any]:
    """Partially update a job; only the supplied fields change.

    data can include { title, salary, equity }. The id and the owning company
    never change.
    """
    if IMMUTABLE_FIELDS & set(data):
        raise JoblyError(ErrorKind.VALIDATION, "Cannot update company_handle or job id")
    unknown = sorted(set(data) - UPDATABLE_FIELDS)
    if unknown:
        raise JoblyError(ErrorKind.VALIDATION, f"Cannot update fields: {', '.join(unknown)}")

    set_cols, values = sql_for_partial_update(data, COLUMN_OVERRIDES)
    id_idx = placeholder(len(values) + 1)

    query = f"""UPDATE jobs
                SET {set_cols}
                WHERE id = {id_idx}
                RETURNING {JOB_COLUMNS}"""
    result = await db.execute(text(query), bind_params([*values, job_id]))
    row = result.mappings().first()
    if not row:
        raise JoblyError(ErrorKind.NOT_FOUND, f"No job: {job_id}")

    logger.info("Updated job %s: %s", job_id, sorted(data))
    return job_record(row)


async def remove(db: AsyncSession, job_id: int) -> None:
    result = await db.execute(
        text("DELETE FROM jobs WHERE id = :p1 RETURNING id"),
        bind_params([job_id]),
    )
    if not result.first():
        raise JoblyError(ErrorKind.NOT_FOUND, f"No job: {job_id}")
    logger.info("Removed job %s", job_id)
