from collections.abc import Iterable, Iterator
from typing import Any

from admin_panel.context import PanelContext
from admin_panel.dashboards.dashboard import Dashboard, resolve_dashboard


class DashboardRegistry:
    """
    Ordered, process-wide list of dashboard references.

    Populated at boot; duplicates are kept and reads hand out copies.
    """

    def __init__(self, refs: Iterable[Any] | None = None):
        self._refs: list[Any] = list(refs or [])

    def register(self, ref: Any) -> "DashboardRegistry":
        self._refs.append(ref)
        return self

    def register_many(self, refs: Iterable[Any]) -> "DashboardRegistry":
        self._refs.extend(refs)
        return self

    def clear(self) -> "DashboardRegistry":
        self._refs.clear()
        return self

    def instances(self) -> list[Dashboard]:
        return [resolve_dashboard(ref) for ref in self._refs]

    def authorized(self, context: PanelContext | None) -> list[Dashboard]:
        return [dashboard for dashboard in self.instances() if dashboard.authorized_to_see(context)]

    def find(self, uri_key: str) -> Dashboard | None:
        for dashboard in self.instances():
            if dashboard.uri_key() == uri_key:
                return dashboard
        return None

    def resolve(self, context: PanelContext | None) -> list[dict[str, Any]]:
        return [dashboard.serialize_with_cards(context) for dashboard in self.authorized(context)]

    def __len__(self) -> int:
        return len(self._refs)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._refs))

    def list(self) -> list[Any]:
        return list(self._refs)
