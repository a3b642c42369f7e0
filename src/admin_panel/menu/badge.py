from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from admin_panel.exceptions import MenuConfigurationError

BADGE_TYPES = ("primary", "secondary", "success", "warning", "danger", "info")


@dataclass(frozen=True)
class LiteralBadge:
    value: Any
    badge_type: str = "primary"

    def resolve(self) -> Any:
        return self.value


@dataclass(frozen=True)
class ComputedBadge:
    """Badge whose value comes from a zero-argument callable, evaluated on every serialization pass."""

    thunk: Callable[[], Any]
    badge_type: str = "primary"

    def resolve(self) -> Any:
        return self.thunk()


Badge = LiteralBadge | ComputedBadge


def make_badge(value: Any, badge_type: str = "primary") -> Badge:
    if isinstance(value, LiteralBadge | ComputedBadge):
        return value
    if badge_type not in BADGE_TYPES:
        raise MenuConfigurationError(f"Unknown badge type '{badge_type}', expected one of {', '.join(BADGE_TYPES)}")
    if callable(value):
        return ComputedBadge(value, badge_type)
    return LiteralBadge(value, badge_type)
