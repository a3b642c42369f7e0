from .card import Card
from .dashboard import Dashboard, resolve_dashboard
from .registry import DashboardRegistry

__all__ = [
    "Card",
    "Dashboard",
    "DashboardRegistry",
    "resolve_dashboard",
]
