"""Job API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from jobly.dependencies.auth import CurrentUser, require_admin
from jobly.models.base import get_db
from jobly.schemas.common import DeletedResponse
from jobly.schemas.job import (
    JobCreate,
    JobUpdate,
    JobFilter,
    JobEnvelope,
    JobListEnvelope,
)
from jobly.services import job_service

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.post("", response_model=JobEnvelope, status_code=201)
async def create_job(
    payload: JobCreate,
    db: AsyncSession = Depends(get_db),
    admin: CurrentUser = Depends(require_admin),
):
    """Create a job. Admin only."""
    job = await job_service.create(db, payload.model_dump())
    return {"job": job}


@router.get("", response_model=JobListEnvelope)
async def list_jobs(
    filters: Annotated[JobFilter, Query()],
    db: AsyncSession = Depends(get_db),
):
    """List jobs, optionally filtered by title, minimum salary and equity."""
    jobs = await job_service.find_all(db, filters.model_dump(by_alias=True, exclude_none=True))
    return {"jobs": jobs}


@router.get("/{job_id}", response_model=JobEnvelope)
async def get_job(
    job_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Get a single job by id."""
    job = await job_service.get(db, job_id)
    return {"job": job}


@router.patch("/{job_id}", response_model=JobEnvelope)
async def update_job(
    job_id: int,
    payload: JobUpdate,
    db: AsyncSession = Depends(get_db),
    admin: CurrentUser = Depends(require_admin),
):
    """Partially update a job. Admin only."""
    job = await job_service.update(db, job_id, payload.model_dump(exclude_unset=True))
    return {"job": job}


@router.delete("/{job_id}", response_model=DeletedResponse)
async def delete_job(
    job_id: int,
    db: AsyncSession = Depends(get_db),
    admin: CurrentUser = Depends(require_admin),
):
    """Delete a job. Admin only."""
    await job_service.remove(db, job_id)
    return {"deleted": str(job_id)}
