"""
Health check and monitoring endpoints.
"""
import time
import logging
from fastapi import APIRouter
from app.store import check_store_health
from app.core.settings import settings

logger = logging.getLogger("app.health")
router = APIRouter()

@router.get("")
async def health_check():
    """Basic health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": time.time(),
        "environment": settings.environment,
        "version": "1.0.0"
    }

@router.get("/detailed")
async def detailed_health_check():
    """Detailed health check with service status."""
    start_time = time.time()

    health_status = {
        "status": "healthy",
        "timestamp": time.time(),
        "environment": settings.environment,
        "services": {}
    }

    store_health = await check_store_health()
    health_status["services"]["redis"] = store_health
    if store_health["status"] != "healthy":
        health_status["status"] = "degraded"

    response_time = (time.time() - start_time) * 1000
    health_status["response_time_ms"] = round(response_time, 2)

    return health_status

@router.get("/ready")
async def readiness_check():
    """Kubernetes-style readiness probe."""
    store_health = await check_store_health()
    if store_health["status"] != "healthy":
        return {"status": "not_ready", "reason": "redis_unavailable"}
    return {"status": "ready"}

@router.get("/live")
async def liveness_check():
    """Kubernetes-style liveness probe."""
    return {"status": "alive", "timestamp": time.time()}
