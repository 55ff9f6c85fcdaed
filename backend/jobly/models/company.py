"""Company model: employers that post jobs."""

from sqlalchemy import Column, String, Integer, Text, CheckConstraint
from sqlalchemy.orm import relationship

from jobly.models.base import Base


class Company(Base):
    __tablename__ = "companies"

    handle = Column(String(25), primary_key=True)
    name = Column(Text, nullable=False)
    num_employees = Column(Integer)
    description = Column(Text)
    logo_url = Column(Text)

    jobs = relationship("Job", back_populates="company", cascade="all, delete-orphan", passive_deletes=True)

    __table_args__ = (
        CheckConstraint("num_employees >= 0", name="ck_company_num_employees"),
    )
