"""Pydantic schemas for Company."""

from pydantic import Field

from jobly.schemas.common import CamelModel
from jobly.schemas.job import JobRead


class CompanyCreate(CamelModel):
    """Fields for creating a company."""

    handle: str = Field(min_length=1, max_length=25)
    name: str = Field(min_length=1)
    description: str | None = None
    num_employees: int | None = Field(default=None, ge=0)
    logo_url: str | None = None


class CompanyUpdate(CamelModel):
    """Mutable company fields; the handle never changes."""

    # null is rejected; omitting the field leaves the name unchanged
    name: str = Field(default=None, min_length=1)
    description: str | None = None
    num_employees: int | None = Field(default=None, ge=0)
    logo_url: str | None = None


class CompanyFilter(CamelModel):
    """Query-string filters for listing companies."""

    name: str | None = Field(default=None, min_length=1, description="Substring of handle or name")
    min_employees: int | None = Field(default=None, ge=0)
    max_employees: int | None = Field(default=None, ge=0)


class CompanyRead(CamelModel):
    handle: str
    name: str
    description: str | None = None
    num_employees: int | None = None
    logo_url: str | None = None


class CompanyWithJobs(CompanyRead):
    """Company detail with the jobs it has posted."""

    jobs: list[JobRead] = []


class CompanyEnvelope(CamelModel):
    company: CompanyRead


class CompanyDetailEnvelope(CamelModel):
    company: CompanyWithJobs


class CompanyListEnvelope(CamelModel):
    companies: list[CompanyRead]
