"""Company data access: raw parameterized SQL over the companies table."""

import logging
from typing import Any

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from jobly.errors import ErrorKind, JoblyError
from jobly.helpers.sql import WhereClause, bind_params, like_contains, placeholder, sql_for_partial_update
from jobly.services.job_service import job_record

logger = logging.getLogger(__name__)

COMPANY_COLUMNS = 'handle, name, description, num_employees AS "numEmployees", logo_url AS "logoUrl"'

# Logical field name -> storage column, for partial updates
COLUMN_OVERRIDES = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}

UPDATABLE_FIELDS = {"name", "description", "numEmployees", "logoUrl"}


async def create(db: AsyncSession, data: dict[str, Any]) -> dict[str, Any]:
    """Create a company and return it.

    data should be { handle, name, description, numEmployees, logoUrl }.
    Raises a conflict error if the handle is already taken.
    """
    handle = data["handle"]
    duplicate_check = await db.execute(
        text("SELECT handle FROM companies WHERE handle = :p1"),
        bind_params([handle]),
    )
    if duplicate_check.first():
        raise JoblyError(ErrorKind.CONFLICT, f"Duplicate company: {handle}")

    result = await db.execute(
        text(f"""INSERT INTO companies
                 (handle, name, description, num_employees, logo_url)
                 VALUES (:p1, :p2, :p3, :p4, :p5)
                 RETURNING {COMPANY_COLUMNS}"""),
        bind_params([
            handle,
            data["name"],
            data.get("description"),
            data.get("numEmployees"),
            data.get("logoUrl"),
        ]),
    )
    company = dict(result.mappings().one())
    logger.info("Created company %s", handle)
    return company


async def _max_employees(db: AsyncSession) -> int | None:
    result = await db.execute(
        text("SELECT MAX(num_employees) FROM companies WHERE num_employees IS NOT NULL")
    )
    return result.scalar()


async def build_filter_query(db: AsyncSession, filters: dict[str, Any] | None) -> tuple[str, list[Any]]:
    """Build the listing query for the given filters.

    filters may contain name, minEmployees and maxEmployees. A missing lower
    bound defaults to 0 and a missing upper bound to the largest employee count
    currently stored, which costs one extra read.
    """
    filters = filters or {}
    name = filters.get("name")
    min_employees = filters.get("minEmployees")
    max_employees = filters.get("maxEmployees")

    if min_employees is not None and max_employees is not None and min_employees > max_employees:
        raise JoblyError(ErrorKind.VALIDATION, "minEmployees cannot be greater than maxEmployees")

    where = WhereClause()
    if name:
        where.add("(handle LIKE {0} ESCAPE '\\' OR name LIKE {0} ESCAPE '\\')", like_contains(name))

    if min_employees is not None or max_employees is not None:
        low = min_employees if min_employees is not None else 0
        high = max_employees if max_employees is not None else await _max_employees(db)
        if high is None:
            where.add("num_employees >= {}", low)
        elif low > high:
            raise JoblyError(ErrorKind.VALIDATION, "minEmployees cannot be greater than maxEmployees")
        else:
            where.add("num_employees BETWEEN {} AND {}", low, high)

    query = f"SELECT {COMPANY_COLUMNS} FROM companies{where.sql} ORDER BY name"
    return query, where.values


async def find_all(db: AsyncSession, filters: dict[str, Any] | None = None) -> list[dict[str, Any]]:
    """Return companies matching filters, ordered by name."""
    query, values = await build_filter_query(db, filters)
    logger.debug("Company listing query: %s values=%s", query, values)
    result = await db.execute(text(query), bind_params(values))
    return [dict(row) for row in result.mappings()]


async def get(db: AsyncSession, handle: str) -> dict[str, Any]:
    """Return a company with its jobs attached.

    Raises a not-found error if there is no such company.
    """
    company_res = await db.execute(
        text(f"SELECT {COMPANY_COLUMNS} FROM companies WHERE handle = :p1"),
        bind_params([handle]),
    )
    row = company_res.mappings().first()
    if not row:
        raise JoblyError(ErrorKind.NOT_FOUND, f"No company: {handle}")

    jobs_res = await db.execute(
        text("""SELECT id,
                       title,
                       salary,
                       equity,
                       company_handle AS "companyHandle"
                FROM jobs
                WHERE company_handle = :p1
                ORDER BY id"""),
        bind_params([handle]),
    )
    company = dict(row)
    company["jobs"] = [job_record(job) for job in jobs_res.mappings()]
    return company


async def update(db: AsyncSession, handle: str, data: dict[str, Any]) -> dict[str, Any]:
    """Partially update a company; only the supplied fields change.

    data can include { name, description, numEmployees, logoUrl }.
    Raises a validation error for the handle or unknown fields and a not-found
    error if there is no such company.
    """
    if "handle" in data:
        raise JoblyError(ErrorKind.VALIDATION, "Cannot update company handle")
    unknown = sorted(set(data) - UPDATABLE_FIELDS)
    if unknown:
        raise JoblyError(ErrorKind.VALIDATION, f"Cannot update fields: {', '.join(unknown)}")

    set_cols, values = sql_for_partial_update(data, COLUMN_OVERRIDES)
    handle_idx = placeholder(len(values) + 1)

    query = f"""UPDATE companies
                SET {set_cols}
                WHERE handle = {handle_idx}
                RETURNING {COMPANY_COLUMNS}"""
    result = await db.execute(text(query), bind_params([*values, handle]))
    row = result.mappings().first()
    if not row:
        raise JoblyError(ErrorKind.NOT_FOUND, f"No company: {handle}")

    logger.info("Updated company %s: %s", handle, sorted(data))
    return dict(row)


async def remove(db: AsyncSession, handle: str) -> None:
    """Delete a company. Raises a not-found error if there is no such company."""
    result = await db.execute(
        text("DELETE FROM companies WHERE handle = :p1 RETURNING handle"),
        bind_params([handle]),
    )
    if not result.first():
        raise JoblyError(ErrorKind.NOT_FOUND, f"No company: {handle}")
    logger.info("Removed company %s", handle)
