"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from edustocks.config.settings import get_settings
from edustocks.config.logging_config import setup_logging
from edustocks.api import deps
from edustocks.repositories.sqlalchemy.database import init_db, reset_database
from edustocks.api.routers import (
    auth_router,
    stocks_router,
    portfolio_router,
    progress_router,
    lessons_router,
    ai_trainer_router,
)
from edustocks.core.exceptions import AppError


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    setup_logging()
    if get_settings().storage_backend == "sqlite":
        init_db()
    yield
    deps.close_clients()
    reset_database()


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Educational stock-trading simulator with lessons and progress tracking",
    version=settings.app_version,
    lifespan=lifespan,
)

app.include_router(auth_router)
app.include_router(stocks_router)
app.include_router(portfolio_router)
app.include_router(progress_router)
app.include_router(lessons_router)
app.include_router(ai_trainer_router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.code, "message": exc.message},
    )


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with API info."""
    return {
        "app": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }
