"""
Menu items: the leaves of the navigation tree.

Items are built by the main-menu callback on every request and are not
mutated once handed to the resolver.
"""

from typing import Any

from admin_panel.dashboards.dashboard import resolve_dashboard
from admin_panel.exceptions import MenuConfigurationError
from admin_panel.menu.node import MenuNode
from admin_panel.menu.urls import (
    dashboard_url,
    filtered_url,
    resource_identifier,
    resource_label,
    resource_url,
)
from admin_panel.services.auth_cache_service import MenuAuthorizationCache
from admin_panel.utils.helpers import class_basename, headline, kebab_case

HTTP_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE")


class MenuItem(MenuNode):
    kind = "item"

    def __init__(self, label: str, url: str | None = None):
        super().__init__()
        self.label = label
        self.url = url
        self.icon: str | None = None
        self._base_url = url
        self._filterable = False

    @classmethod
    def make(cls, label: str, url: str | None = None) -> "MenuItem":
        return cls(label, url)

    @classmethod
    def link(cls, label: str, url: str) -> "MenuItem":
        return cls(label, url)

    @classmethod
    def resource(cls, resource: Any) -> "MenuItem":
        """Link to a resource index. ``resource`` is an identifier like 'UserResource' or a class."""
        item = cls(resource_label(resource), resource_url(resource))
        return item.with_meta(type="resource", resource=resource_identifier(resource))

    @classmethod
    def filter(cls, label: str, resource: Any) -> "MenuItem":
        """Link to a resource index with filters pre-applied through ``applies``."""
        item = cls(label, resource_url(resource))
        item._filterable = True
        return item.with_meta(type="filter", resource=resource_identifier(resource), filters=[])

    @classmethod
    def lens(cls, resource: Any, lens: str, label: str | None = None) -> "MenuItem":
        item = cls(label or headline(lens), f"{resource_url(resource)}/lens/{kebab_case(lens)}")
        return item.with_meta(type="lens", resource=resource_identifier(resource), lens=lens)

    @classmethod
    def dashboard(cls, dashboard: Any) -> "MenuItem":
        """Link to a dashboard; visibility follows the dashboard's own authorization."""
        instance = resolve_dashboard(dashboard)
        item = cls(instance.name(), dashboard_url(instance.uri_key()))
        item.icon = instance.icon()
        item.with_meta(dashboard=True, dashboard_uri_key=instance.uri_key())
        return item.can_see(instance.authorized_to_see)

    @classmethod
    def external_link(cls, label: str, url: str) -> "MenuItem":
        item = cls(label, url)
        return item.with_meta(type="external", external=True, openInNewTab=False)

    def with_icon(self, icon: str) -> "MenuItem":
        self.icon = icon
        return self

    def open_in_new_tab(self, flag: bool = True) -> "MenuItem":
        self.meta["openInNewTab"] = flag
        return self

    def method(self, verb: str, data: dict | None = None, headers: dict | None = None) -> "MenuItem":
        verb = verb.upper()
        if verb not in HTTP_METHODS:
            raise MenuConfigurationError(f"Unsupported HTTP method '{verb}' for menu item '{self.label}'")
        self.meta["method"] = verb
        self.meta["data"] = dict(data or {})
        self.meta["headers"] = dict(headers or {})
        return self

    def applies(self, filter_name: Any, value: Any, parameters: dict | None = None) -> "MenuItem":
        """
        Record a filter on the item.

        The filter always lands in ``meta['filters']``; only items created with
        :meth:`filter` rebuild their url from it.
        """
        filters = self.meta.setdefault("filters", [])
        name = filter_name if isinstance(filter_name, str) else class_basename(filter_name)
        filters.append({"filter": name, "value": value, "parameters": dict(parameters or {})})

        if self._filterable:
            self.url = filtered_url(self._base_url, filters)
        return self

    @property
    def filters(self) -> list[dict[str, Any]]:
        return list(self.meta.get("filters", []))

    def identity(self) -> str:
        return f"{self.label}:{self.url or ''}"

    def to_dict(self, cache: MenuAuthorizationCache | None = None) -> dict[str, Any]:
        return {
            "label": self.label,
            "url": self.url,
            "icon": self.icon,
            "badge": self.resolve_badge(cache),
            "badgeType": self.badge_type,
            "visible": True,
            "meta": self.serialized_meta(),
        }

    def __repr__(self) -> str:
        return f"MenuItem(label={self.label!r}, url={self.url!r})"
