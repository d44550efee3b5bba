"""
Health check contract models.
"""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Liveness plus database reachability"""
    status: Literal["healthy", "degraded"] = Field(..., description="Overall status")
    database: Literal["ok", "unavailable"] = Field(..., description="Result of a SELECT 1 against the database")
