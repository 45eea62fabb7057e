# 📄 File: app/api/v1/health.py
# 🧭 Purpose (Layman Explanation):
# Health check endpoints that tell us whether the care app and its database are working,
# like a quick checkup for the system.
# 🧪 Purpose (Technical Summary):
# Health, liveness and readiness endpoints backed by the database connection manager's
# health check.
# 🔗 Dependencies:
# FastAPI, app.shared.infrastructure.database.connection
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, monitoring systems, load balancers

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Response
from fastapi.responses import JSONResponse

from app.shared.config.settings import get_settings
from app.shared.infrastructure.database.connection import database_health_check as db_health_check

logger = logging.getLogger(__name__)

health_router = APIRouter()


@health_router.get(
    "/health",
    summary="Health Check",
    description="Service status plus database connectivity",
)
async def health_check() -> JSONResponse:
    """
    Health check endpoint.

    Always answers 200 while the process is up; ``status`` is ``degraded`` when the
    database check fails.
    """
    settings = get_settings()
    db_health = await db_health_check()

    return JSONResponse(
        status_code=200,
        content={
            "status": "healthy" if db_health["status"] == "healthy" else "degraded",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "service": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "environment": settings.ENVIRONMENT,
            "components": {"database": db_health},
        }
    )


@health_router.get("/health/live", summary="Liveness Probe")
async def liveness_probe() -> Response:
    return Response(status_code=200, content="OK")


@health_router.get("/health/ready", summary="Readiness Probe")
async def readiness_probe() -> JSONResponse:
    """
    Readiness probe.

    Returns 200 if the database answers, 503 otherwise.
    """
    db_health = await db_health_check()

    if db_health["status"] == "healthy":
        return JSONResponse(
            status_code=200,
            content={"status": "ready", "timestamp": datetime.now(timezone.utc).isoformat()}
        )

    logger.warning(f"Readiness probe failed: {db_health.get('error')}")
    return JSONResponse(
        status_code=503,
        content={
            "status": "not_ready",
            "reason": "database_unhealthy",
            "timestamp": datetime.now(timezone.utc).isoformat()
        }
    )
