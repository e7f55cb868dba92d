"""Health check endpoints."""

from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Depends

from api.config import Settings, get_settings
from api.dependencies import get_event_service
from barprep.services import EventService

router = APIRouter()


@router.get("/health")
async def health_check() -> Dict[str, Any]:
    """
    Basic liveness check.

    Returns 200 if the service is running.
    """
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
    }


@router.get("/health/ready")
def readiness_check(
    settings: Settings = Depends(get_settings),
    service: EventService = Depends(get_event_service),
) -> Dict[str, Any]:
    """
    Readiness check.

    Checks:
    - Recipe catalog loaded (sheet or bundled defaults)
    - Google Sheets configured (optional, falls back to defaults)
    """
    checks: Dict[str, Dict[str, Any]] = {}

    try:
        recipes = service.list_recipes()
        checks["recipe_catalog"] = {
            "status": "ok" if recipes else "empty",
            "recipes": len(recipes),
        }
    except Exception as e:
        checks["recipe_catalog"] = {"status": "error", "message": str(e)}

    checks["google_sheets"] = {
        "status": "configured" if settings.sheets_enabled else "not_configured"
    }

    all_ok = all(
        c.get("status") in ("ok", "configured", "not_configured")
        for c in checks.values()
    )

    return {
        "status": "ready" if all_ok else "degraded",
        "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        "version": settings.app_version,
        "checks": checks
    }


@router.get("/health/info")
async def service_info(
    settings: Settings = Depends(get_settings)
) -> Dict[str, Any]:
    """Return service information."""
    return {
        "service": settings.app_name,
        "version": settings.app_version,
        "environment": "development" if settings.debug else "production",
    }
