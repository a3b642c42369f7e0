"""
Default navigation built from the registered dashboards.

Used when the application registers dashboards but no main-menu builder.
"""

import logging
from collections.abc import Callable, Iterable
from typing import Any

from admin_panel.context import PanelContext
from admin_panel.dashboards.dashboard import Dashboard, resolve_dashboard
from admin_panel.menu.item import MenuItem
from admin_panel.menu.section import MenuSection

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "General"

CATEGORY_ICONS = {
    "Analytics": "chart-bar",
    "Reports": "document-text",
    "Overview": "home",
    "General": "view-grid",
    "Business": "briefcase",
    "Financial": "currency-dollar",
    "Users": "users",
    "Content": "document-duplicate",
    "System": "cog",
    "Monitoring": "eye",
    "Security": "shield-check",
    "Marketing": "megaphone",
    "Sales": "trending-up",
    "Support": "support",
    "Admin": "user-circle",
}


def category_icon(category: str) -> str:
    return CATEGORY_ICONS.get(category, "view-grid")


def build_dashboard_menu_item(dashboard: Dashboard) -> MenuItem | None:
    try:
        item = MenuItem.dashboard(dashboard)
        return item.with_icon(dashboard.icon() or "chart-bar").with_meta(
            dashboard_name=dashboard.name(),
            dashboard_description=dashboard.description(),
            dashboard_category=dashboard.category(),
        )
    except Exception as e:
        logger.warning(f"Failed to build menu item for dashboard {type(dashboard).__name__}: {e}")
        return None


def build_dashboard_menu_items(panel, context: PanelContext | None) -> list[MenuItem]:
    items = (build_dashboard_menu_item(d) for d in panel.get_navigation_dashboards(context))
    return [item for item in items if item is not None]


def build_dashboard_menu_sections(panel, context: PanelContext | None) -> list[MenuSection]:
    """One section per dashboard category, in the order categories are first seen."""
    grouped: dict[str, list[MenuItem]] = {}
    for dashboard in panel.get_navigation_dashboards(context):
        item = build_dashboard_menu_item(dashboard)
        if item is not None:
            grouped.setdefault(dashboard.category() or DEFAULT_CATEGORY, []).append(item)

    return [
        MenuSection.make(category, items)
        .with_icon(category_icon(category))
        .with_meta(dashboard_category=True, category_name=category)
        for category, items in grouped.items()
    ]


def build_dashboard_menu_section(
    title: str,
    refs: Iterable[Any],
    icon: str | None = None,
    collapsible: bool = False,
    badge: dict | None = None,
    can_see: Callable[[PanelContext | None], bool] | None = None,
) -> MenuSection | None:
    items = [build_dashboard_menu_item(resolve_dashboard(ref)) for ref in refs]
    items = [item for item in items if item is not None]
    if not items:
        return None

    section = MenuSection.make(title, items)
    if icon:
        section.with_icon(icon)
    if collapsible:
        section.collapsible()
    if badge:
        section.with_badge(badge["value"], badge.get("type", "primary"))
    if can_see:
        section.can_see(can_see)
    return section.with_meta(dashboard_section=True)


def build_main_dashboard_menu_item(panel, context: PanelContext | None) -> MenuItem | None:
    main = next((d for d in panel.get_dashboard_instances() if d.uri_key() == "main"), None)
    if main is None or not main.authorized_to_see(context):
        return None

    item = MenuItem.dashboard(main).with_icon(main.icon() or "home")
    return item.with_meta(main_dashboard=True)


def build_default_menu(panel, context: PanelContext | None, group_by_category: bool = True) -> list:
    """Main dashboard first, then the remaining dashboards by category or in one collapsible section."""
    menu: list = []

    main_item = build_main_dashboard_menu_item(panel, context)
    if main_item is not None:
        menu.append(main_item)

    if group_by_category:
        sections = build_dashboard_menu_sections(panel, context)
        for section in sections:
            section.items = [i for i in section.items if i.meta.get("dashboard_uri_key") != "main"]
        menu.extend(section for section in sections if section.items)
    else:
        items = [i for i in build_dashboard_menu_items(panel, context) if i.meta.get("dashboard_uri_key") != "main"]
        if items:
            menu.append(MenuSection.make("Dashboards", items).with_icon("view-grid").collapsible())

    return menu
