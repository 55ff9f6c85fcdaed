"""Base database configuration and session dependency."""

import sqlite3
from decimal import Decimal
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase, declared_attr, sessionmaker


class Base(DeclarativeBase):
    @declared_attr
    def __tablename__(cls) -> str:
        return cls.__name__.lower() + "s"


def _is_sqlite(url: str) -> bool:
    return url.startswith("sqlite")


def _register_sqlite_adapters():
    # Raw text() queries bind equity as Decimal; sqlite3 has no adapter for it
    sqlite3.register_adapter(Decimal, str)


def _sqlite_pragmas(dbapi_connection, connection_record):
    # LIKE must be case-sensitive as it is on PostgreSQL; cascades need FK enforcement
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA case_sensitive_like = ON")
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.close()


def build_async_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Async engine for the API."""
    if _is_sqlite(database_url):
        _register_sqlite_adapters()
        engine = create_async_engine(database_url, echo=echo)
        event.listen(engine.sync_engine, "connect", _sqlite_pragmas)
        return engine

    return create_async_engine(
        database_url,
        echo=echo,
        pool_size=10,
        max_overflow=20,
        pool_timeout=30,
    )


def build_sync_engine(database_url: str, echo: bool = False) -> Engine:
    """Sync engine for scripts and test seeding."""
    sync_url = (
        database_url
        .replace("postgresql+asyncpg://", "postgresql://")
        .replace("sqlite+aiosqlite://", "sqlite://")
    )
    if _is_sqlite(sync_url):
        _register_sqlite_adapters()
        engine = create_engine(sync_url, echo=echo)
        event.listen(engine, "connect", _sqlite_pragmas)
        return engine

    return create_engine(
        sync_url,
        echo=echo,
        pool_size=5,
        max_overflow=10,
        pool_timeout=30,
    )


def build_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


def build_sync_sessionmaker(engine: Engine) -> sessionmaker:
    return sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
    )


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    async with request.app.state.sessionmaker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
