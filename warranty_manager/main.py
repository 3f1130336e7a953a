"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from warranty_manager.config import get_settings
from warranty_manager.domain.exceptions import DanglingReferenceError
from warranty_manager.infrastructure.database import Base, engine
from warranty_manager.infrastructure.database.seed import seed_brands
from warranty_manager.infrastructure.database.session import async_session_factory
from warranty_manager.infrastructure.logging.log_config import setup_logging
from warranty_manager.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


async def _seed_default_brands() -> None:
    """Insert the default brand catalogue on first start."""
    async with async_session_factory() as session:
        try:
            await seed_brands(session)
            await session.commit()
        except Exception:
            await session.rollback()
            logger.exception("Could not seed default brands")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging, create tables, seed brands."""
    settings = get_settings()
    setup_logging()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    if settings.seed_brands:
        await _seed_default_brands()

    logger.info("%s %s started (%s)", settings.app_title, settings.app_version, settings.app_env)
    yield

    await engine.dispose()


async def _dangling_reference_handler(request: Request, exc: DanglingReferenceError) -> JSONResponse:
    # Only raised when Settings.strict_references is on
    return JSONResponse(status_code=422, content={"detail": str(exc)})


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(DanglingReferenceError, _dangling_reference_handler)

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "warranty_manager.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
