"""
Health Router

Liveness and database reachability.
"""

import logging

from fastapi import APIRouter
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from storefront.core.database import DbSession
from storefront.models.contracts.health import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health(db: DbSession) -> HealthResponse:
    """Always 200 while the process is up; reports degraded if the database is unreachable."""
    try:
        await db.execute(text("SELECT 1"))
    except (SQLAlchemyError, OSError) as e:
        logger.warning(f"Health check database ping failed: {e}")
        return HealthResponse(status="degraded", database="unavailable")

    return HealthResponse(status="healthy", database="ok")
