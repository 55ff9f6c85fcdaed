"""Pydantic schemas package."""

from jobly.schemas.common import CamelModel, DeletedResponse
from jobly.schemas.job import (
    JobCreate,
    JobUpdate,
    JobFilter,
    JobRead,
    JobEnvelope,
    JobListEnvelope,
)
from jobly.schemas.company import (
    CompanyCreate,
    CompanyUpdate,
    CompanyFilter,
    CompanyRead,
    CompanyWithJobs,
    CompanyEnvelope,
    CompanyDetailEnvelope,
    CompanyListEnvelope,
)
from jobly.schemas.user import (
    UserRegister,
    TokenRequest,
    TokenResponse,
)

__all__ = [
    "CamelModel",
    "DeletedResponse",
    # Job
    "JobCreate",
    "JobUpdate",
    "JobFilter",
    "JobRead",
    "JobEnvelope",
    "JobListEnvelope",
    # Company
    "CompanyCreate",
    "CompanyUpdate",
    "CompanyFilter",
    "CompanyRead",
    "CompanyWithJobs",
    "CompanyEnvelope",
    "CompanyDetailEnvelope",
    "CompanyListEnvelope",
    # Auth
    "UserRegister",
    "TokenRequest",
    "TokenResponse",
]
