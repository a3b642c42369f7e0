"""
Dashboard base class.

Dashboards are registered by reference (class or zero-argument factory) and
instantiated fresh for every resolution.
"""

import logging
from collections.abc import Callable
from typing import Any

from admin_panel.context import PanelContext
from admin_panel.dashboards.card import Card
from admin_panel.exceptions import MenuConfigurationError
from admin_panel.utils.helpers import class_basename, headline, kebab_case, strip_suffix

logger = logging.getLogger(__name__)


class Dashboard:
    label: str | None = None
    show_refresh_button: bool = False

    def __init__(self):
        self._can_see: Callable[[PanelContext | None], bool] | None = None

    @classmethod
    def make(cls) -> "Dashboard":
        return cls()

    def name(self) -> str:
        return self.label or headline(strip_suffix(class_basename(self), "Dashboard"))

    def uri_key(self) -> str:
        return kebab_case(strip_suffix(class_basename(self), "Dashboard"))

    def description(self) -> str | None:
        return None

    def icon(self) -> str | None:
        return None

    def category(self) -> str | None:
        return None

    def cards(self) -> list[Card]:
        return []

    def can_see(self, predicate: Callable[[PanelContext | None], bool]) -> "Dashboard":
        self._can_see = predicate
        return self

    def authorized_to_see(self, context: PanelContext | None) -> bool:
        if self._can_see is None:
            return True
        return bool(self._can_see(context))

    def resolve_cards(self, context: PanelContext | None) -> list[dict[str, Any]]:
        """Serialize the cards the context may see; a card whose data fails is left out."""
        resolved = []
        for card in self.cards():
            if not card.authorized_to_see(context):
                continue
            try:
                resolved.append(card.serialize(context))
            except Exception:
                logger.warning(
                    "Dropping card '%s' from dashboard '%s': data computation failed",
                    card.uri_key(),
                    self.uri_key(),
                    exc_info=True,
                )
        return resolved

    def serialize(self) -> dict[str, Any]:
        return {
            "name": self.name(),
            "uriKey": self.uri_key(),
            "showRefreshButton": bool(self.show_refresh_button),
            "description": self.description(),
            "icon": self.icon(),
            "category": self.category(),
        }

    def serialize_with_cards(self, context: PanelContext | None) -> dict[str, Any]:
        payload = self.serialize()
        payload["cards"] = self.resolve_cards(context)
        return payload

    def __repr__(self) -> str:
        return f"{type(self).__name__}(uri_key={self.uri_key()!r})"


def resolve_dashboard(ref: Any) -> Dashboard:
    """Instantiate a dashboard reference (class or factory); instances pass through."""
    if isinstance(ref, Dashboard):
        return ref
    if not callable(ref):
        raise MenuConfigurationError(f"Cannot resolve dashboard from {ref!r}")
    instance = ref()
    if not isinstance(instance, Dashboard):
        raise MenuConfigurationError(f"Dashboard reference {ref!r} produced {type(instance).__name__}, not a Dashboard")
    return instance
