"""
Per-request context handed to every menu, dashboard and card predicate.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from starlette.requests import Request


@dataclass(frozen=True)
class PanelContext:
    """Wraps the current principal (``None`` for guests) and the inbound request."""

    user: Any = None
    request: Request | None = None
    query: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_request(cls, request: Request | None, user: Any = None) -> "PanelContext":
        query = dict(request.query_params) if request is not None else {}
        return cls(user=user, request=request, query=query)

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    @property
    def is_admin(self) -> bool:
        return bool(getattr(self.user, "is_admin", False))

    def has_role(self, name: str) -> bool:
        if self.user is None:
            return False
        checker = getattr(self.user, "has_role", None)
        if callable(checker):
            return bool(checker(name))
        wanted = name.lower()
        return any((getattr(r, "name", "") or "").lower() == wanted for r in getattr(self.user, "roles", None) or [])

    def can(self, permission: str) -> bool:
        if self.user is None:
            return False
        checker = getattr(self.user, "can", None)
        if callable(checker):
            return bool(checker(permission))
        return self.is_admin

    def query_param(self, name: str, default: str | None = None) -> str | None:
        return self.query.get(name, default)


def default_context_key(context: PanelContext | None) -> str:
    """Authorization cache partition for a context: the principal's id, or 'guest'."""
    user = getattr(context, "user", None)
    if user is None:
        return "guest"
    identity = getattr(user, "id", None)
    if identity is None:
        identity = getattr(user, "username", None)
    return f"user:{identity}"
