"""Seed a development database with demo companies, jobs and users.

Creates the tables if needed, then adds anything from the lists below that is
not already present. The admin account is created with the password given by
--admin-password.

Usage:
    python scripts/seed.py --admin-password secret123
"""

import argparse
from decimal import Decimal

from jobly.config import get_settings
from jobly.models.base import Base, build_sync_engine, build_sync_sessionmaker
from jobly.models.company import Company
from jobly.models.job import Job
from jobly.models.user import User
from jobly.services.auth_service import hash_password

settings = get_settings()

COMPANIES = [
    {
        "handle": "anderson-arias-morrow",
        "name": "Anderson, Arias and Morrow",
        "num_employees": 245,
        "description": "Somebody program how I. Face give away discussion view act inside.",
        "logo_url": "/logos/logo3.png",
    },
    {
        "handle": "arnold-berger-townsend",
        "name": "Arnold, Berger and Townsend",
        "num_employees": 795,
        "description": "Much mention both center customer difficult.",
        "logo_url": None,
    },
    {
        "handle": "bauer-gallagher",
        "name": "Bauer-Gallagher",
        "num_employees": 862,
        "description": "Difficult ready trip question produce produce someone.",
        "logo_url": None,
    },
    {
        "handle": "watson-davis",
        "name": "Watson-Davis",
        "num_employees": 819,
        "description": "Year join loss.",
        "logo_url": "/logos/logo3.png",
    },
]

JOBS = [
    {"title": "Conservator, furniture", "salary": 110000, "equity": Decimal("0"), "company_handle": "watson-davis"},
    {"title": "Information officer", "salary": 200000, "equity": None, "company_handle": "anderson-arias-morrow"},
    {"title": "Consulting civil engineer", "salary": 60000, "equity": Decimal("0"), "company_handle": "bauer-gallagher"},
    {"title": "Early years teacher", "salary": 55000, "equity": Decimal("0.045"), "company_handle": "arnold-berger-townsend"},
    {"title": "Intelligence analyst", "salary": 77000, "equity": Decimal("0.12"), "company_handle": "watson-davis"},
]


def seed(admin_password: str):
    engine = build_sync_engine(settings.database_url)
    Base.metadata.create_all(engine)
    db = build_sync_sessionmaker(engine)()
    try:
        companies_created = 0
        jobs_created = 0

        for company_data in COMPANIES:
            if db.get(Company, company_data["handle"]):
                print(f"  Skipped: {company_data['handle']} already exists")
                continue
            db.add(Company(**company_data))
            companies_created += 1
            print(f"  Created company: {company_data['name']}")
        db.flush()

        for job_data in JOBS:
            existing = db.query(Job).filter(
                Job.title == job_data["title"],
                Job.company_handle == job_data["company_handle"],
            ).first()
            if existing:
                continue
            db.add(Job(**job_data))
            jobs_created += 1

        if not db.get(User, "admin"):
            db.add(User(
                username="admin",
                password=hash_password(admin_password, settings.bcrypt_work_factor),
                first_name="Admin",
                last_name="User",
                email="admin@example.com",
                is_admin=True,
            ))
            print("  Created user: admin")

        db.commit()
        print(f"\nDone: {companies_created} companies, {jobs_created} jobs created")
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
        engine.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed demo data")
    parser.add_argument("--admin-password", required=True)
    args = parser.parse_args()
    seed(args.admin_password)
