"""Liveness endpoint."""

from __future__ import annotations

import datetime as dt

from fastapi import APIRouter

from offer_relay.schemas import HealthResponse
from offer_relay.utils.logging import get_logger

router = APIRouter(prefix="/api", tags=["health"])

logger = get_logger("endpoints.health")


def _utcnow_iso() -> str:
    now = dt.datetime.now(dt.timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    """Simple health-check endpoint used for monitoring."""
    logger.debug("Health check endpoint called")
    return HealthResponse(status="ok", timestamp=_utcnow_iso())


__all__ = ["router"]
