"""Job model: openings belonging to a company."""

from sqlalchemy import Column, String, Integer, Numeric, Text, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship

from jobly.models.base import Base


class Job(Base):
    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    salary = Column(Integer)
    equity = Column(Numeric)
    company_handle = Column(
        String(25), ForeignKey("companies.handle", ondelete="CASCADE"), nullable=False, index=True,
    )

    company = relationship("Company", back_populates="jobs")

    __table_args__ = (
        CheckConstraint("salary >= 0", name="ck_job_salary"),
        CheckConstraint("equity <= 1.0", name="ck_job_equity"),
    )
