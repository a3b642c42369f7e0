import fnmatch
import os
import time
from types import SimpleNamespace

import pytest

# Force the SQLite test database before anything imports admin_panel.db
os.environ["DATABASE_URL"] = "sqlite:///./test_admin_panel.db"
os.environ.setdefault("JWT_SECRET", "test-secret")

from admin_panel.panel import AdminPanel  # noqa: E402
from admin_panel.services.auth_cache_service import MenuAuthorizationCache  # noqa: E402


class FakeRedis:
    """In-memory stand-in for the few redis.Redis calls the authorization cache makes."""

    def __init__(self):
        self.store: dict[str, tuple[bytes, float]] = {}
        self.now = time.monotonic()
        self.hits = 0
        self.misses = 0

    def advance(self, seconds: float):
        self.now += seconds

    def ping(self):
        return True

    def get(self, key):
        entry = self.store.get(key)
        if entry is None or entry[1] <= self.now:
            self.store.pop(key, None)
            self.misses += 1
            return None
        self.hits += 1
        return entry[0]

    def setex(self, key, ttl, value):
        self.store[key] = (value, self.now + ttl)
        return True

    def delete(self, *keys):
        return sum(1 for key in keys if self.store.pop(key, None) is not None)

    def scan_iter(self, match="*", count=None):
        return [key for key in list(self.store) if fnmatch.fnmatch(key, match)]

    def info(self, section=None):
        return {"keyspace_hits": self.hits, "keyspace_misses": self.misses}


@pytest.fixture
def fake_redis():
    return FakeRedis()


@pytest.fixture
def auth_cache(fake_redis):
    return MenuAuthorizationCache(redis_client=fake_redis, default_ttl=60)


@pytest.fixture
def panel():
    """A fresh panel per test so main-menu and dashboard registrations never leak."""
    return AdminPanel()


@pytest.fixture
def cached_panel(auth_cache):
    return AdminPanel(auth_cache=auth_cache)


@pytest.fixture
def guest():
    from admin_panel.context import PanelContext

    return PanelContext()


@pytest.fixture
def make_context():
    from admin_panel.context import PanelContext

    def _make(user_id=1, is_admin=False, permissions=(), roles=(), **query):
        user = SimpleNamespace(
            id=user_id,
            username=f"user{user_id}",
            is_admin=is_admin,
            roles=[SimpleNamespace(name=r) for r in roles],
            can=lambda perm: is_admin or perm in permissions,
        )
        return PanelContext(user=user, query=query)

    return _make
