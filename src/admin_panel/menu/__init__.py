from .badge import Badge, ComputedBadge, LiteralBadge, make_badge
from .group import MenuGroup
from .item import MenuItem
from .node import MenuNode
from .section import MenuSection
from .user_menu import Menu

__all__ = [
    "Badge",
    "Menu",
    "ComputedBadge",
    "LiteralBadge",
    "MenuGroup",
    "MenuItem",
    "MenuNode",
    "MenuSection",
    "make_badge",
]
