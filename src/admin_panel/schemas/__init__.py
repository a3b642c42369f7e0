from .dashboard_schemas import CardSchema, DashboardDetailSchema, DashboardListResponse, DashboardSchema
from .menu_schemas import MainMenuResponse

__all__ = [
    "CardSchema",
    "DashboardDetailSchema",
    "DashboardListResponse",
    "DashboardSchema",
    "MainMenuResponse",
]
