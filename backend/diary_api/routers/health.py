"""
Health check router for liveness and readiness probes.
"""
import logging

from fastapi import APIRouter, status

from diary_api.database.connections import get_mongo_client

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    summary="Basic health check",
)
async def health_check():
    """
    Basic health check endpoint.
    Returns 200 if the API is running.
    """
    return {"status": "healthy"}


@router.get(
    "/health/ready",
    status_code=status.HTTP_200_OK,
    summary="Readiness check with dependencies",
)
async def readiness_check():
    """
    Readiness check that verifies the MongoDB connection.
    """
    checks = {
        "api": "healthy",
        "mongodb": "unknown",
    }

    try:
        client = await get_mongo_client()
        await client.admin.command("ping")
        checks["mongodb"] = "healthy"
    except Exception:
        # Driver messages can contain hostnames, keep them in the log only
        logger.exception("MongoDB readiness check failed")
        checks["mongodb"] = "unhealthy"

    all_healthy = all(v == "healthy" for v in checks.values())

    return {
        "status": "healthy" if all_healthy else "degraded",
        "checks": checks,
    }
