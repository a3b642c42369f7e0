from typing import Any, Literal

from pydantic import BaseModel, Field


class MainMenuResponse(BaseModel):
    source: Literal["custom", "dashboards"] = Field(..., description="'custom' when a main-menu builder is registered")
    menu: list[dict[str, Any]] = Field(default_factory=list, description="Serialized sections, groups and items")
    user_menu: list[dict[str, Any]] | None = Field(None, description="Serialized user-menu items; null when no user menu is registered")


class AuthCacheFlushResponse(BaseModel):
    message: str
    keys_deleted: int
