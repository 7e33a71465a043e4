"""
Health check endpoints.
"""
from fastapi import APIRouter

from hunting_engine.utils.datetime_helpers import utc_now

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check():
    """Basic health check."""
    return {"status": "ok", "timestamp": utc_now().isoformat()}
