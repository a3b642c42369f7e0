"""
Authorization, badge and metadata behaviour shared by menu items, groups and sections.
"""

import hashlib
from collections.abc import Callable
from typing import Any

from admin_panel.context import PanelContext
from admin_panel.exceptions import MenuConfigurationError
from admin_panel.menu.badge import Badge, ComputedBadge, make_badge
from admin_panel.services.auth_cache_service import AUTH_KEY_PREFIX, BADGE_KEY_PREFIX, MenuAuthorizationCache

Predicate = Callable[[PanelContext | None], bool]

_SCALARS = (str, int, float, bool, type(None))


def _stable_repr(value: Any, depth: int = 0) -> str:
    """A repr that is identical for equal values across requests (no memory addresses)."""
    if isinstance(value, _SCALARS):
        return repr(value)
    if depth > 3:
        return type(value).__qualname__
    if isinstance(value, list | tuple):
        return f"{type(value).__name__}({','.join(_stable_repr(v, depth + 1) for v in value)})"
    if isinstance(value, set | frozenset):
        return f"{type(value).__name__}({','.join(sorted(_stable_repr(v, depth + 1) for v in value))})"
    if isinstance(value, dict):
        pairs = sorted(f"{_stable_repr(k, depth + 1)}:{_stable_repr(v, depth + 1)}" for k, v in value.items())
        return f"dict({','.join(pairs)})"
    if callable(value) and hasattr(getattr(value, "__func__", value), "__code__"):
        return _callable_signature(value, depth + 1)

    text = repr(value)
    if " at 0x" in text:
        return type(value).__qualname__
    return text


def _callable_signature(fn: Callable | None, depth: int = 0) -> str:
    """
    Identify a predicate by where it is defined and what it captured.

    Builders recreate closures on every request, so the definition site keeps
    the key stable while captured values (``requires("sales")`` vs
    ``requires("hr")``) keep sibling predicates from one factory apart.
    """
    if fn is None:
        return "none"

    bound_to = getattr(fn, "__self__", None)
    fn = getattr(fn, "__func__", fn)
    code = getattr(fn, "__code__", None)
    qualname = getattr(fn, "__qualname__", type(fn).__qualname__)
    module = getattr(fn, "__module__", type(fn).__module__)
    line = code.co_firstlineno if code is not None else 0
    signature = f"{module}.{qualname}:{line}"

    if bound_to is not None:
        signature += f"@{_stable_repr(bound_to, depth + 1)}"

    captured = []
    for cell in getattr(fn, "__closure__", None) or ():
        try:
            captured.append(_stable_repr(cell.cell_contents, depth + 1))
        except ValueError:
            # cell not filled yet
            captured.append("<empty>")
    defaults = getattr(fn, "__defaults__", None) or ()
    if captured or defaults:
        signature += f"[{','.join(captured)}|{','.join(_stable_repr(d, depth + 1) for d in defaults)}]"
    return signature


class MenuNode:
    kind = "node"

    def __init__(self):
        self._can_see: Predicate | None = None
        self.auth_cache_ttl: int | None = None
        self.badge: Badge | None = None
        self.badge_cache_ttl: int | None = None
        self.meta: dict[str, Any] = {}

    # -- authorization ---------------------------------------------------

    def can_see(self, predicate: Predicate):
        self._can_see = predicate
        return self

    def cache_auth(self, ttl: int):
        if ttl <= 0:
            raise MenuConfigurationError("Authorization cache TTL must be positive")
        self.auth_cache_ttl = ttl
        return self

    def identity(self) -> str:
        raise NotImplementedError

    def auth_cache_key(self, context_key: str = "guest", scope: str = "") -> str:
        """
        Cache key for this node's authorization result.

        ``scope`` is the path of the enclosing containers (``Sales/Reports``),
        so same-named nodes under different parents never share an entry.
        """
        raw = f"{self.kind}:{scope}/{self.identity()}:{_callable_signature(self._can_see)}"
        digest = hashlib.md5(raw.encode("utf-8")).hexdigest()
        return f"{AUTH_KEY_PREFIX}{digest}:{context_key}"

    def is_visible(
        self,
        context: PanelContext | None = None,
        cache: MenuAuthorizationCache | None = None,
        scope: str = "",
    ) -> bool:
        if self._can_see is None:
            return True

        if self.auth_cache_ttl is not None and cache is not None:
            key = self.auth_cache_key(cache.key_for(context), scope)
            return bool(cache.remember(key, self.auth_cache_ttl, lambda: bool(self._can_see(context))))

        return bool(self._can_see(context))

    def clear_auth_cache(self, cache: MenuAuthorizationCache, context: PanelContext | None = None, scope: str = ""):
        if self.auth_cache_ttl is not None:
            cache.forget(self.auth_cache_key(cache.key_for(context), scope))
        return self

    # -- badges ----------------------------------------------------------

    def with_badge(self, badge: Any, badge_type: str = "primary"):
        self.badge = make_badge(badge, badge_type)
        return self

    def with_badge_if(self, badge: Any, badge_type: str, condition: Callable[[], bool]):
        if condition():
            return self.with_badge(badge, badge_type)
        return self

    def cache_badge(self, ttl: int):
        if ttl <= 0:
            raise MenuConfigurationError("Badge cache TTL must be positive")
        self.badge_cache_ttl = ttl
        return self

    def badge_cache_key(self) -> str:
        thunk = getattr(self.badge, "thunk", None)
        digest = hashlib.md5(f"{self.kind}:{self.identity()}:{_callable_signature(thunk)}".encode()).hexdigest()
        return f"{BADGE_KEY_PREFIX}{digest}"

    def resolve_badge(self, cache: MenuAuthorizationCache | None = None) -> Any:
        if self.badge is None:
            return None
        if isinstance(self.badge, ComputedBadge) and self.badge_cache_ttl is not None and cache is not None:
            return cache.remember(self.badge_cache_key(), self.badge_cache_ttl, self.badge.resolve)
        return self.badge.resolve()

    @property
    def badge_type(self) -> str | None:
        return self.badge.badge_type if self.badge is not None else None

    # -- metadata --------------------------------------------------------

    def with_meta(self, values: dict[str, Any] | None = None, **extra: Any):
        """Merge metadata; later keys overwrite earlier ones, insertion order is kept."""
        self.meta.update(values or {})
        self.meta.update(extra)
        return self

    def serialized_meta(self) -> dict[str, Any]:
        meta = dict(self.meta)
        if "filters" in meta:
            meta["filters"] = [dict(entry) for entry in meta["filters"]]
        return meta

    def to_dict(self, cache: MenuAuthorizationCache | None = None) -> dict[str, Any]:
        raise NotImplementedError
