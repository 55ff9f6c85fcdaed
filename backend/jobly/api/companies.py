"""Company API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from jobly.dependencies.auth import CurrentUser, require_admin
from jobly.models.base import get_db
from jobly.schemas.common import DeletedResponse
from jobly.schemas.company import (
    CompanyCreate,
    CompanyUpdate,
    CompanyFilter,
    CompanyEnvelope,
    CompanyDetailEnvelope,
    CompanyListEnvelope,
)
from jobly.services import company_service

router = APIRouter(prefix="/companies", tags=["companies"])


@router.post("", response_model=CompanyEnvelope, status_code=201)
async def create_company(
    payload: CompanyCreate,
    db: AsyncSession = Depends(get_db),
    admin: CurrentUser = Depends(require_admin),
):
    """Create a company. Admin only."""
    company = await company_service.create(db, payload.model_dump(by_alias=True))
    return {"company": company}


@router.get("", response_model=CompanyListEnvelope)
async def list_companies(
    filters: Annotated[CompanyFilter, Query()],
    db: AsyncSession = Depends(get_db),
):
    """List companies, optionally filtered by name and employee count range."""
    companies = await company_service.find_all(db, filters.model_dump(by_alias=True, exclude_none=True))
    return {"companies": companies}


@router.get("/{handle}", response_model=CompanyDetailEnvelope)
async def get_company(
    handle: str,
    db: AsyncSession = Depends(get_db),
):
    """Get a company with its jobs."""
    company = await company_service.get(db, handle)
    return {"company": company}


@router.patch("/{handle}", response_model=CompanyEnvelope)
async def update_company(
    handle: str,
    payload: CompanyUpdate,
    db: AsyncSession = Depends(get_db),
    admin: CurrentUser = Depends(require_admin),
):
    """Partially update a company. Admin only."""
    company = await company_service.update(db, handle, payload.model_dump(by_alias=True, exclude_unset=True))
    return {"company": company}


@router.delete("/{handle}", response_model=DeletedResponse)
async def delete_company(
    handle: str,
    db: AsyncSession = Depends(get_db),
    admin: CurrentUser = Depends(require_admin),
):
    """Delete a company and its jobs. Admin only."""
    await company_service.remove(db, handle)
    return {"deleted": handle}
