import copy
from collections.abc import Iterable
from typing import Any

from admin_panel.menu.node import MenuNode
from admin_panel.utils.helpers import slugify


class MenuContainer(MenuNode):
    """A named node holding an ordered list of child nodes."""

    state_prefix = "menu_container"

    def __init__(self, name: str, items: Iterable[MenuNode] | None = None):
        super().__init__()
        self.name = name
        self.items: list[MenuNode] = list(items or [])
        self.icon: str | None = None
        self.is_collapsible = False
        self.is_collapsed = False
        self._state_id: str | None = None

    @classmethod
    def make(cls, name: str, items: Iterable[MenuNode] | None = None):
        return cls(name, items)

    def with_icon(self, icon: str):
        self.icon = icon
        return self

    def add(self, item: MenuNode):
        self.items.append(item)
        return self

    def collapsible(self, flag: bool = True):
        self.is_collapsible = flag
        return self

    def collapsed(self, flag: bool = True):
        self.is_collapsed = flag
        return self

    def with_state_id(self, state_id: str):
        self._state_id = state_id
        return self

    @property
    def state_id(self) -> str:
        """Key the frontend uses to persist the collapsed state."""
        if self._state_id is not None:
            return self._state_id
        return f"{self.state_prefix}_{slugify(self.name, '_')}"

    def with_resolved_items(self, items: Iterable[MenuNode]):
        """Copy of this container holding ``items``; the original is left untouched."""
        clone = copy.copy(self)
        clone.items = list(items)
        return clone

    def identity(self) -> str:
        return self.name

    def serialized_items(self, cache=None) -> list[dict[str, Any]]:
        return [item.to_dict(cache) for item in self.items]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, items={len(self.items)})"
