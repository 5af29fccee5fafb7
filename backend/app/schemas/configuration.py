"""Merged configuration returned to the mobile client."""

import uuid
from datetime import datetime

from pydantic import Field

from app.schemas.common import CamelModel
from app.schemas.theme_configuration import ThemeConfigurationResponse


class ExpandedCollection(CamelModel):
    # Wire key is "list" but the value is a single collection reference.
    # Mobile clients read it under that name, so it stays.
    collection: str | None = Field(None, alias="list")
    sort_key: str | None = None
    reverse: bool | None = None


class HomePageSection(CamelModel):
    hero_banners: list[str] = Field(default_factory=list)
    top_collections: list[str] = Field(default_factory=list)
    primary_product_list: ExpandedCollection = Field(default_factory=ExpandedCollection)
    secondary_product_list: ExpandedCollection = Field(default_factory=ExpandedCollection)


class MergedConfigurationResponse(CamelModel):
    id: uuid.UUID
    shop_name: str
    company_name: str
    customer_email: str
    customer_phone_number_country_code: str | None = None
    customer_phone_number: str
    app_name: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
    theme_configurations: ThemeConfigurationResponse | None = None
    home_page_configuration: HomePageSection = Field(default_factory=HomePageSection)
