"""
Process-wide admin panel state: the main- and user-menu callbacks and dashboard
registrations.

All are set while the application boots and only read while serving
requests. ``resolve_main_menu`` prunes the builder's tree for one request
context and ``serialize_main_menu`` turns the result into plain mappings
for the frontend.
"""

from collections.abc import Callable, Iterable
from functools import lru_cache
from typing import Any

from admin_panel.context import PanelContext
from admin_panel.dashboards.dashboard import Dashboard
from admin_panel.dashboards.registry import DashboardRegistry
from admin_panel.exceptions import DashboardForbiddenError, DashboardNotFoundError, MenuConfigurationError
from admin_panel.menu.container import MenuContainer
from admin_panel.menu.node import MenuNode
from admin_panel.menu.user_menu import Menu
from admin_panel.services.auth_cache_service import MenuAuthorizationCache

MenuBuilder = Callable[[PanelContext | None], Iterable[MenuNode | None]]
UserMenuBuilder = Callable[[PanelContext | None, Menu], Menu | None]


class AdminPanel:
    def __init__(self, auth_cache: MenuAuthorizationCache | None = None):
        self._main_menu: MenuBuilder | None = None
        self._user_menu: UserMenuBuilder | None = None
        self._dashboards = DashboardRegistry()
        self.auth_cache = auth_cache

    # ------------------------------------------------------------------
    # Main menu
    # ------------------------------------------------------------------

    def main_menu(self, builder: MenuBuilder) -> "AdminPanel":
        """Register the main-menu builder, replacing any previous one."""
        self._main_menu = builder
        return self

    def clear_main_menu(self) -> "AdminPanel":
        self._main_menu = None
        return self

    def has_main_menu(self) -> bool:
        return self._main_menu is not None

    def set_authorization_cache(self, cache: MenuAuthorizationCache | None) -> "AdminPanel":
        self.auth_cache = cache
        return self

    def resolve_main_menu(self, context: PanelContext | None) -> list[MenuNode]:
        """
        Build the main menu for ``context`` and drop every node it may not see.

        Returns an empty list when no builder is registered. Containers are
        authorized before their children; a collapsible container left
        without children is dropped, other containers are kept even when
        empty. Sibling order is preserved.
        """
        if self._main_menu is None:
            return []

        return self.authorize_nodes(self._main_menu(context), context)

    def authorize_nodes(
        self,
        nodes: Iterable[MenuNode | None],
        context: PanelContext | None,
        scope: str = "",
    ) -> list[MenuNode]:
        """Prune ``nodes`` for ``context``; ``scope`` is the path of enclosing containers, used in cache keys."""
        visible = []
        for node in nodes:
            if node is None:
                continue
            if not isinstance(node, MenuNode):
                raise MenuConfigurationError(f"Main menu entries must be menu nodes, got {type(node).__name__}")

            if not node.is_visible(context, self.auth_cache, scope):
                continue

            if isinstance(node, MenuContainer):
                children = self.authorize_nodes(node.items, context, f"{scope}/{node.identity()}")
                if node.is_collapsible and not children:
                    continue
                node = node.with_resolved_items(children)

            visible.append(node)
        return visible

    def serialize_main_menu(self, nodes: Iterable[MenuNode], context: PanelContext | None = None) -> list[dict[str, Any]]:
        """Plain mappings for already-resolved nodes; badges are evaluated once per call."""
        return [node.to_dict(self.auth_cache) for node in nodes]

    # ------------------------------------------------------------------
    # User menu
    # ------------------------------------------------------------------

    def user_menu(self, builder: UserMenuBuilder) -> "AdminPanel":
        """Register the user-menu callback; it fills the ``Menu`` it is given and may return it."""
        self._user_menu = builder
        return self

    def clear_user_menu(self) -> "AdminPanel":
        self._user_menu = None
        return self

    def has_user_menu(self) -> bool:
        return self._user_menu is not None

    def resolve_user_menu(self, context: PanelContext | None) -> Menu | None:
        """
        Build the user menu for ``context``.

        ``None`` when no callback is registered. Only plain menu items are
        accepted; unauthorized items are dropped like in the main menu and the
        default sign-out link stays last.
        """
        if self._user_menu is None:
            return None

        menu = Menu()
        result = self._user_menu(context, menu)
        if result is not None:
            if not isinstance(result, Menu):
                raise MenuConfigurationError(f"User menu callback must return a Menu or None, got {type(result).__name__}")
            menu = result

        menu = menu.validate().with_default_logout()
        return Menu(self.authorize_nodes(menu.items, context, "user-menu"))

    def serialize_user_menu(self, menu: Menu | None) -> list[dict[str, Any]] | None:
        if menu is None:
            return None
        return [item.to_dict(self.auth_cache) for item in menu]

    # ------------------------------------------------------------------
    # Dashboards
    # ------------------------------------------------------------------

    def dashboards(self, refs: Iterable[Any]) -> "AdminPanel":
        """Append dashboard references to the registry."""
        self._dashboards.register_many(refs)
        return self

    @property
    def dashboard_registry(self) -> DashboardRegistry:
        return self._dashboards

    def get_dashboards(self) -> list[Any]:
        return self._dashboards.list()

    def get_dashboard_instances(self) -> list[Dashboard]:
        return self._dashboards.instances()

    def get_navigation_dashboards(self, context: PanelContext | None) -> list[Dashboard]:
        return self._dashboards.authorized(context)

    def find_dashboard(self, uri_key: str, context: PanelContext | None) -> Dashboard:
        dashboard = self._dashboards.find(uri_key)
        if dashboard is None:
            raise DashboardNotFoundError(uri_key)
        if not dashboard.authorized_to_see(context):
            raise DashboardForbiddenError(uri_key)
        return dashboard

    def resolve_dashboards(self, context: PanelContext | None) -> list[dict[str, Any]]:
        return self._dashboards.resolve(context)

    def reset(self) -> "AdminPanel":
        self._main_menu = None
        self._user_menu = None
        self._dashboards.clear()
        return self


@lru_cache
def get_admin_panel() -> AdminPanel:
    """The process-wide panel that boot code registers menus and dashboards on."""
    return AdminPanel()
