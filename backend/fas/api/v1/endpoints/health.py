"""Liveness and database readiness endpoint."""

import logging

from fastapi import APIRouter
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from fas import __version__
from fas.config import settings
from fas.deps import SessionDep

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health", summary="Service health")
async def health_check(db: SessionDep) -> dict:
    """Report API status and whether the database answers a trivial query."""
    database = "healthy"
    try:
        await db.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        logger.warning(f"Database health check failed: {e}")
        database = "unhealthy"

    return {
        "status": "healthy" if database == "healthy" else "degraded",
        "api": "healthy",
        "database": database,
        "environment": settings.ENVIRONMENT,
        "version": __version__,
    }
