from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CardSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    component: str
    title: str | None = None
    uri_key: str = Field(..., alias="uriKey")
    width: str = "1/3"
    data: Any = None


class DashboardSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    uri_key: str = Field(..., alias="uriKey")
    show_refresh_button: bool = Field(False, alias="showRefreshButton")
    description: str | None = None
    icon: str | None = None
    category: str | None = None


class DashboardDetailSchema(DashboardSchema):
    cards: list[CardSchema] = Field(default_factory=list)


class DashboardListResponse(BaseModel):
    dashboards: list[DashboardSchema]
