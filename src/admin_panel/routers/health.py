from datetime import UTC, datetime

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.orm import Session

from admin_panel import __version__
from admin_panel.db import get_db
from admin_panel.panel import AdminPanel, get_admin_panel

router = APIRouter(tags=["Health"])

db_dep = Depends(get_db)
panel_dep = Depends(get_admin_panel)


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check(db: Session = db_dep, panel: AdminPanel = panel_dep):
    """
    Health check endpoint for monitoring and load balancers.

    Returns:
        - status: overall health status
        - timestamp: current server time
        - database: database connection status
        - main_menu: whether a main-menu builder is registered
        - user_menu: whether a user-menu callback is registered
        - dashboards: number of registered dashboards
    """
    health_status = {
        "status": "healthy",
        "timestamp": datetime.now(UTC).isoformat(),
        "service": "admin-panel",
        "version": __version__,
        "main_menu": panel.has_main_menu(),
        "user_menu": panel.has_user_menu(),
        "dashboards": len(panel.dashboard_registry),
        "menu_auth_cache": panel.auth_cache.get_stats() if panel.auth_cache is not None else {"enabled": False},
    }

    try:
        db.execute(text("SELECT 1"))
        health_status["database"] = "connected"
    except Exception as e:
        health_status["database"] = "disconnected"
        health_status["status"] = "unhealthy"
        health_status["error"] = str(e)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=health_status,
        )

    return health_status


@router.get("/readiness", status_code=status.HTTP_200_OK)
async def readiness_check():
    """
    Readiness check for Kubernetes/Docker orchestration.
    Returns 200 if the service is ready to accept traffic.
    """
    return {"ready": True}


@router.get("/liveness", status_code=status.HTTP_200_OK)
async def liveness_check():
    """
    Liveness check for Kubernetes/Docker orchestration.
    Returns 200 if the service is alive.
    """
    return {"alive": True}
