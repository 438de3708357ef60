"""
Health check endpoints for the application.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import Response

from src.config.logging import get_logger
from src.config.settings import settings
from src.infrastructure.monitoring.metrics import get_metrics, get_metrics_content_type

logger = get_logger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("")
async def health_check() -> Dict[str, Any]:
    """Basic health check endpoint.

    The gateway holds no state; it is healthy when it can reach HubSpot, which
    requires an access token.
    """
    crm_configured = bool(settings.HUBSPOT_ACCESS_TOKEN)

    return {
        "status": "healthy" if crm_configured else "degraded",
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "crm_configured": crm_configured,
        "timestamp": _now(),
    }


@router.get("/live")
async def liveness_check() -> Dict[str, Any]:
    """Liveness check for Kubernetes."""
    return {"status": "alive", "timestamp": _now()}


@router.get("/metrics")
async def prometheus_metrics() -> Response:
    """Prometheus metrics endpoint."""
    if not settings.ENABLE_METRICS:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Metrics are disabled"
        )

    logger.debug("Prometheus metrics requested")
    return Response(content=get_metrics(), media_type=get_metrics_content_type())
