"""Admin panel navigation: authorized main menu and dashboards served over FastAPI."""

from .context import PanelContext
from .dashboards import Card, Dashboard, DashboardRegistry
from .menu import Menu, MenuGroup, MenuItem, MenuSection
from .panel import AdminPanel, get_admin_panel

__version__ = "0.1.0"

__all__ = [
    "AdminPanel",
    "Card",
    "Dashboard",
    "DashboardRegistry",
    "Menu",
    "MenuGroup",
    "MenuItem",
    "MenuSection",
    "PanelContext",
    "get_admin_panel",
]
