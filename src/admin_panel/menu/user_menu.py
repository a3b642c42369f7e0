"""
The user menu: a flat list of items shown under the signed-in user's name.

The registered callback receives the request context and a ``Menu`` to fill
with ``append``/``prepend``. Sections and groups are rejected, and a default
"Sign out" link is kept at the end unless the callback supplies its own
item marked ``meta(default=True)``.
"""

from collections.abc import Iterable, Iterator

from admin_panel.exceptions import MenuConfigurationError
from admin_panel.menu.item import MenuItem
from admin_panel.menu.urls import panel_path


def default_logout_item() -> MenuItem:
    return (
        MenuItem.make("Sign out", f"{panel_path()}/logout")
        .with_icon("arrow-right-on-rectangle")
        .with_meta(method="post", default=True)
    )


class Menu:
    def __init__(self, items: Iterable[MenuItem] | None = None):
        self.items: list[MenuItem] = list(items or [])

    def append(self, item: MenuItem) -> "Menu":
        self.items.append(item)
        return self

    def prepend(self, item: MenuItem) -> "Menu":
        self.items.insert(0, item)
        return self

    def validate(self) -> "Menu":
        for item in self.items:
            if not isinstance(item, MenuItem):
                raise MenuConfigurationError(f"User menu only supports MenuItem objects, got {type(item).__name__}")
        return self

    def has_default_item(self) -> bool:
        return any(item.meta.get("default") for item in self.items)

    def with_default_logout(self) -> "Menu":
        """Copy of this menu ending with the default sign-out link when none is marked default."""
        if self.has_default_item():
            return Menu(self.items)
        return Menu([*self.items, default_logout_item()])

    def __iter__(self) -> Iterator[MenuItem]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __repr__(self) -> str:
        return f"Menu(items={len(self.items)})"
