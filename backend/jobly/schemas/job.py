"""Pydantic schemas for Job."""

from decimal import Decimal
from typing import Annotated

from pydantic import BeforeValidator, Field

from jobly.schemas.common import CamelModel


def _float_as_text(value):
    # 0.45 must become Decimal("0.45"), not the binary expansion of the float
    if isinstance(value, float):
        return str(value)
    return value


Equity = Annotated[Decimal, BeforeValidator(_float_as_text)]
EquityInput = Annotated[Decimal, BeforeValidator(_float_as_text), Field(ge=0, le=1)]


class JobCreate(CamelModel):
    """Fields for creating a job. Accepts company_handle or companyHandle."""

    title: str = Field(min_length=1)
    salary: int | None = Field(default=None, ge=0)
    equity: EquityInput | None = None
    company_handle: str = Field(min_length=1, max_length=25)


class JobUpdate(CamelModel):
    """Mutable job fields; id and company never change."""

    title: str = Field(default=None, min_length=1)
    salary: int | None = Field(default=None, ge=0)
    equity: EquityInput | None = None


class JobFilter(CamelModel):
    """Query-string filters for listing jobs."""

    title: str | None = Field(default=None, min_length=1, description="Substring of title")
    min_salary: int | None = Field(default=None, ge=0)
    has_equity: bool = Field(default=False, description="Only jobs with equity")


class JobRead(CamelModel):
    id: int
    title: str
    salary: int | None = None
    equity: Equity | None = None
    company_handle: str


class JobEnvelope(CamelModel):
    job: JobRead


class JobListEnvelope(CamelModel):
    jobs: list[JobRead]
