from typing import Any

from admin_panel.dashboards.dashboard import resolve_dashboard
from admin_panel.exceptions import MenuConfigurationError
from admin_panel.menu.container import MenuContainer
from admin_panel.menu.urls import dashboard_url, resource_label, resource_url
from admin_panel.services.auth_cache_service import MenuAuthorizationCache


class MenuSection(MenuContainer):
    """Top-level navigation section holding items and groups."""

    kind = "section"
    state_prefix = "menu_section"

    def __init__(self, name: str, items=None):
        super().__init__(name, items)
        self.path: str | None = None

    @classmethod
    def dashboard(cls, dashboard: Any) -> "MenuSection":
        instance = resolve_dashboard(dashboard)
        section = cls(instance.name()).with_path(dashboard_url(instance.uri_key()))
        section.with_icon(instance.icon() or "chart-bar")
        section.with_meta(dashboard=True, dashboard_uri_key=instance.uri_key())
        return section.can_see(instance.authorized_to_see)

    @classmethod
    def resource(cls, resource: Any) -> "MenuSection":
        return cls(resource_label(resource)).with_path(resource_url(resource))

    def collapsible(self, flag: bool = True) -> "MenuSection":
        if flag and self.path is not None:
            raise MenuConfigurationError("Sections with a path cannot be collapsible")
        return super().collapsible(flag)

    def with_path(self, path: str) -> "MenuSection":
        if self.is_collapsible:
            raise MenuConfigurationError("Collapsible sections cannot have a direct path")
        self.path = path
        return self

    def identity(self) -> str:
        return f"{self.name}:{self.path or ''}"

    def to_dict(self, cache: MenuAuthorizationCache | None = None) -> dict[str, Any]:
        payload = {
            "name": self.name,
            "icon": self.icon,
            "badge": self.resolve_badge(cache),
            "badgeType": self.badge_type,
            "collapsible": self.is_collapsible,
            "collapsed": self.is_collapsed,
            "stateId": self.state_id,
            "items": self.serialized_items(cache),
        }
        if self.path is not None:
            payload["path"] = self.path
        if self.meta:
            payload["meta"] = self.serialized_meta()
        return payload
