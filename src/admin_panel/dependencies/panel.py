import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from redis import Redis
from redis.exceptions import RedisError

from admin_panel.services.auth_cache_service import MenuAuthorizationCache

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    app_name: str = "Admin Panel"
    debug: bool = False
    panel_path: str = "/admin"
    redis_url: str | None = None
    enable_menu_auth_cache: bool = True
    menu_auth_cache_ttl: int = 300  # 5 minutes default
    cors_origins: str = "http://localhost:3000,http://127.0.0.1:3000,http://localhost:5173,http://127.0.0.1:5173"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    @field_validator("debug", mode="before")
    @classmethod
    def _coerce_debug(cls, value):
        if isinstance(value, bool) or value is None:
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            if normalized in {"1", "true", "yes", "on"}:
                return True
            if normalized in {"0", "false", "no", "off"}:
                return False
            # Treat common logging level strings as non-debug defaults instead of erroring.
            if normalized in {"warn", "warning", "info", "error", "critical"}:
                return False
        return value

    @field_validator("panel_path", mode="before")
    @classmethod
    def _normalize_panel_path(cls, value):
        if not isinstance(value, str):
            return value
        value = "/" + value.strip().strip("/")
        return value if value != "/" else ""

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()


@lru_cache
def get_redis_client() -> Redis | None:
    """Get cached Redis client instance."""
    settings = get_settings()

    if not settings.redis_url:
        logger.warning("REDIS_URL not configured, menu authorization caching disabled")
        return None

    try:
        client = Redis.from_url(
            settings.redis_url,
            encoding="utf-8",
            decode_responses=False,  # We handle encoding with orjson
            socket_timeout=2,
            socket_connect_timeout=2,
        )
        client.ping()
        logger.info("Redis client connected successfully")
        return client
    except (RedisError, ValueError) as exc:
        logger.warning("Failed to connect to Redis: %s", exc)
        return None


@lru_cache
def get_auth_cache() -> MenuAuthorizationCache:
    """Get cached MenuAuthorizationCache instance."""
    settings = get_settings()
    redis_client = get_redis_client()

    return MenuAuthorizationCache(
        redis_client=redis_client,
        default_ttl=settings.menu_auth_cache_ttl,
        enabled=settings.enable_menu_auth_cache,
    )
