class AdminPanelError(Exception):
    """Base error for admin panel navigation and dashboards."""


class MenuConfigurationError(AdminPanelError, ValueError):
    """Raised when a menu builder combines incompatible options."""


class DashboardNotFoundError(AdminPanelError, LookupError):
    def __init__(self, uri_key: str):
        super().__init__(f"Dashboard '{uri_key}' not found")
        self.uri_key = uri_key


class DashboardForbiddenError(AdminPanelError, PermissionError):
    def __init__(self, uri_key: str):
        super().__init__(f"Not authorized to view dashboard '{uri_key}'")
        self.uri_key = uri_key
