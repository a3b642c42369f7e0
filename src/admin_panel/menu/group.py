from typing import Any

from admin_panel.menu.container import MenuContainer
from admin_panel.services.auth_cache_service import MenuAuthorizationCache


class MenuGroup(MenuContainer):
    """Named, optionally collapsible group of menu items inside a section."""

    kind = "group"
    state_prefix = "menu_group"

    def to_dict(self, cache: MenuAuthorizationCache | None = None) -> dict[str, Any]:
        return {
            "name": self.name,
            "icon": self.icon,
            "collapsible": self.is_collapsible,
            "collapsed": self.is_collapsed,
            "stateId": self.state_id,
            "items": self.serialized_items(cache),
        }
