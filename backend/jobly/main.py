"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text

from jobly.config import Settings, get_settings
from jobly.errors import register_error_handlers
from jobly.models.base import Base, build_async_engine, build_sessionmaker
from jobly.api import router as api_router

# Register tables on Base.metadata
from jobly.models.company import Company  # noqa: F401
from jobly.models.job import Job  # noqa: F401
from jobly.models.user import User  # noqa: F401

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown."""
    settings = app.state.settings
    logger.info("Starting %s...", settings.app_name)
    engine = build_async_engine(settings.database_url, echo=settings.debug)
    app.state.engine = engine
    app.state.sessionmaker = build_sessionmaker(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables verified")
    yield
    logger.info("Shutting down...")
    await engine.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Companies and jobs REST API",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(api_router)

    @app.get("/health")
    async def health_check():
        checks = {}
        try:
            async with app.state.sessionmaker() as session:
                await session.execute(text("SELECT 1"))
            checks["database"] = {"ok": True}
        except Exception as e:
            checks["database"] = {"ok": False, "message": str(e)}

        status = "healthy" if all(check["ok"] for check in checks.values()) else "degraded"
        return {"status": status, "app": settings.app_name, "checks": checks}

    return app


app = create_app()
