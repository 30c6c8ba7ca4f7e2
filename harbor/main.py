"""Harbor - internal CRM FastAPI application."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from harbor.config import get_settings
from harbor.api import dashboard, engagements
from harbor.services.database import init_db, close_db

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    await init_db()
    yield
    await close_db()


app = FastAPI(
    title=settings.app_name,
    description="Internal CRM for leads, deals and accounts",
    version=settings.app_version,
    lifespan=lifespan,
)

# Include routers
app.include_router(engagements.router, prefix="/api/v1/engagements", tags=["Engagements"])
app.include_router(dashboard.router, prefix="/api/v1/dashboard", tags=["Dashboard"])


@app.get("/health")
async def health_check() -> dict:
    """Health check endpoint."""
    return {
        "status": "healthy",
        "app": settings.app_name,
        "version": settings.app_version,
    }


@app.get("/")
async def root() -> dict:
    """Root endpoint."""
    return {
        "message": f"Welcome to {settings.app_name}",
        "docs": "/docs",
        "health": "/health",
    }
