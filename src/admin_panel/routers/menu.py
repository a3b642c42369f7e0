"""
Router for the admin panel main menu.

Resolves the registered main-menu builder and user-menu callback for the
calling principal and returns the serialized trees. Without a builder the menu falls back to the
navigation derived from registered dashboards.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from admin_panel.context import PanelContext
from admin_panel.dependencies.authz import get_panel_context, require_admin
from admin_panel.menu.builder import build_default_menu
from admin_panel.models.user import User
from admin_panel.panel import AdminPanel, get_admin_panel
from admin_panel.schemas.menu_schemas import AuthCacheFlushResponse, MainMenuResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin-panel", tags=["Menu"])

panel_dep = Depends(get_admin_panel)
context_dep = Depends(get_panel_context)
admin_dep = Depends(require_admin)


@router.get(
    "/menu",
    response_model=MainMenuResponse,
    summary="Get the main menu",
    description="Main menu with every node the caller may not see already removed",
)
async def get_main_menu(
    context: PanelContext = context_dep,
    panel: AdminPanel = panel_dep,
):
    try:
        if panel.has_main_menu():
            source = "custom"
            nodes = panel.resolve_main_menu(context)
        else:
            source = "dashboards"
            nodes = panel.authorize_nodes(build_default_menu(panel, context), context)

        return MainMenuResponse(
            source=source,
            menu=panel.serialize_main_menu(nodes, context),
            user_menu=panel.serialize_user_menu(panel.resolve_user_menu(context)),
        )

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error resolving main menu: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to resolve main menu",
        ) from e


@router.delete(
    "/menu/auth-cache",
    response_model=AuthCacheFlushResponse,
    summary="Flush cached menu authorization",
    description="Drop cached authorization results and badge values (Admin only)",
)
async def flush_menu_auth_cache(
    current_user: User = admin_dep,
    panel: AdminPanel = panel_dep,
):
    if panel.auth_cache is None:
        return AuthCacheFlushResponse(message="Menu authorization cache is not configured", keys_deleted=0)

    deleted = panel.auth_cache.flush()
    logger.info(f"Menu authorization cache flushed by {current_user.username}: {deleted} keys")
    return AuthCacheFlushResponse(message=f"Flushed {deleted} cached menu entries", keys_deleted=deleted)
