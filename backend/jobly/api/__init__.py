"""API router aggregation."""

from fastapi import APIRouter

from jobly.api.auth import router as auth_router
from jobly.api.companies import router as companies_router
from jobly.api.jobs import router as jobs_router

router = APIRouter()

router.include_router(auth_router)
router.include_router(companies_router)
router.include_router(jobs_router)
