"""Pytest configuration and shared fixtures.

Every test gets its own SQLite file seeded through a sync engine: three
companies (c1..c3), one job per company (j1..j3) and two users, u1 (admin)
and u2 (regular, password "password2").
"""

from decimal import Decimal
from pathlib import Path

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from jobly.config import Settings
from jobly.main import create_app
from jobly.models.base import Base, build_async_engine, build_sessionmaker, build_sync_engine, build_sync_sessionmaker
from jobly.models.company import Company
from jobly.models.job import Job
from jobly.models.user import User
from jobly.services.auth_service import create_token, hash_password


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        app_name="Jobly Test",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'jobly.sqlite3'}",
        secret_key="test-secret",
        bcrypt_work_factor=4,
    )


@pytest.fixture
def sync_engine(settings: Settings):
    engine = build_sync_engine(settings.database_url)
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def job_ids(sync_engine, settings: Settings) -> list[int]:
    """Seed the database and return the ids of j1, j2, j3."""
    db = build_sync_sessionmaker(sync_engine)()
    try:
        for n in (1, 2, 3):
            db.add(Company(
                handle=f"c{n}",
                name=f"C{n}",
                num_employees=n,
                description=f"Desc{n}",
                logo_url=f"http://c{n}.img",
            ))
        db.flush()

        jobs = [
            Job(title=f"j{n}", salary=111 * n, equity=Decimal(f"0.{n}"), company_handle=f"c{n}")
            for n in (1, 2, 3)
        ]
        db.add_all(jobs)

        db.add_all([
            User(
                username="u1",
                password=hash_password("password1", settings.bcrypt_work_factor),
                first_name="U1F",
                last_name="U1L",
                email="user1@user.com",
                is_admin=True,
            ),
            User(
                username="u2",
                password=hash_password("password2", settings.bcrypt_work_factor),
                first_name="U2F",
                last_name="U2L",
                email="user2@user.com",
                is_admin=False,
            ),
        ])
        db.commit()
        return [job.id for job in jobs]
    finally:
        db.close()


@pytest_asyncio.fixture
async def db(settings: Settings, job_ids):
    """Async session on the seeded database, for service tests."""
    engine = build_async_engine(settings.database_url)
    async with build_sessionmaker(engine)() as session:
        yield session
    await engine.dispose()


@pytest.fixture
def client(settings: Settings, job_ids):
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_token(settings: Settings) -> str:
    return create_token({"username": "u1", "isAdmin": True}, settings)


@pytest.fixture
def user_token(settings: Settings) -> str:
    return create_token({"username": "u2", "isAdmin": False}, settings)


@pytest.fixture
def admin_headers(admin_token: str) -> dict[str, str]:
    return {"authorization": f"Bearer {admin_token}"}


@pytest.fixture
def user_headers(user_token: str) -> dict[str, str]:
    return {"authorization": f"Bearer {user_token}"}
