from collections.abc import Callable
from typing import Any

from admin_panel.context import PanelContext
from admin_panel.utils.helpers import class_basename, headline, kebab_case, slugify, strip_suffix


class Card:
    """
    A dashboard card.

    Subclasses override :meth:`data` (and usually ``component``); simple
    cards can pass ``data`` as a value or a callable taking the context.
    """

    component = "card"
    width = "1/3"

    def __init__(self, title: str | None = None, data: Any = None, component: str | None = None):
        self.title = title or headline(strip_suffix(class_basename(self), "Card"))
        self._data = data
        if component is not None:
            self.component = component
        self._can_see: Callable[[PanelContext | None], bool] | None = None

    @classmethod
    def make(cls, *args, **kwargs) -> "Card":
        return cls(*args, **kwargs)

    def uri_key(self) -> str:
        # plain cards built with make() are told apart by title
        if type(self) is Card:
            return slugify(self.title)
        return kebab_case(strip_suffix(class_basename(self), "Card"))

    def with_width(self, width: str) -> "Card":
        self.width = width
        return self

    def data(self, context: PanelContext | None) -> Any:
        if callable(self._data):
            return self._data(context)
        return self._data if self._data is not None else {}

    def can_see(self, predicate: Callable[[PanelContext | None], bool]) -> "Card":
        self._can_see = predicate
        return self

    def authorized_to_see(self, context: PanelContext | None) -> bool:
        if self._can_see is None:
            return True
        return bool(self._can_see(context))

    def serialize(self, context: PanelContext | None) -> dict[str, Any]:
        return {
            "component": self.component,
            "title": self.title,
            "uriKey": self.uri_key(),
            "width": self.width,
            "data": self.data(context),
        }
