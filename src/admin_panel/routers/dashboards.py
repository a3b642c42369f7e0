"""
Router for admin panel dashboards.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from admin_panel.context import PanelContext
from admin_panel.dependencies.authz import get_panel_context
from admin_panel.exceptions import DashboardForbiddenError, DashboardNotFoundError
from admin_panel.panel import AdminPanel, get_admin_panel
from admin_panel.schemas.dashboard_schemas import DashboardDetailSchema, DashboardListResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin-panel/dashboards", tags=["Dashboards"])

panel_dep = Depends(get_admin_panel)
context_dep = Depends(get_panel_context)


@router.get(
    "",
    response_model=DashboardListResponse,
    summary="List dashboards",
    description="Dashboards the caller is authorized to see, in registration order",
)
async def list_dashboards(
    context: PanelContext = context_dep,
    panel: AdminPanel = panel_dep,
):
    try:
        dashboards = [dashboard.serialize() for dashboard in panel.get_navigation_dashboards(context)]
        return DashboardListResponse(dashboards=dashboards)
    except Exception as e:
        logger.error(f"Error listing dashboards: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list dashboards",
        ) from e


@router.get(
    "/{uri_key}",
    response_model=DashboardDetailSchema,
    summary="Get a dashboard",
    description="One dashboard with the cards the caller may see",
)
async def get_dashboard(
    uri_key: str,
    context: PanelContext = context_dep,
    panel: AdminPanel = panel_dep,
):
    try:
        dashboard = panel.find_dashboard(uri_key, context)
    except DashboardNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except DashboardForbiddenError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e)) from e

    try:
        return DashboardDetailSchema(**dashboard.serialize_with_cards(context))
    except Exception as e:
        logger.error(f"Error resolving dashboard '{uri_key}': {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to resolve dashboard",
        ) from e
