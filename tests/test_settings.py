import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from admin_panel.dependencies import panel as panel_deps
from admin_panel.dependencies.panel import Settings


@pytest.fixture
def redis_settings(monkeypatch):
    def _use(url):
        monkeypatch.setattr(panel_deps, "get_settings", lambda: Settings(redis_url=url))
        panel_deps.get_redis_client.cache_clear()

    yield _use
    panel_deps.get_redis_client.cache_clear()


class UnreachableRedis:
    @classmethod
    def from_url(cls, url, **kwargs):
        return cls()

    def ping(self):
        raise RedisConnectionError("connection refused")


def test_settings_normalize_debug_and_panel_path():
    settings = Settings(debug="warning", panel_path="backoffice/")

    assert settings.debug is False
    assert settings.panel_path == "/backoffice"
    assert Settings(panel_path="/").panel_path == ""


def test_malformed_redis_url_disables_cache(redis_settings):
    redis_settings("not-a-redis-url")

    assert panel_deps.get_redis_client() is None


def test_unreachable_redis_disables_cache(redis_settings, monkeypatch):
    monkeypatch.setattr(panel_deps, "Redis", UnreachableRedis)
    redis_settings("redis://cache.internal:6379/0")

    assert panel_deps.get_redis_client() is None


def test_missing_redis_url_disables_cache(redis_settings):
    redis_settings(None)

    assert panel_deps.get_redis_client() is None
