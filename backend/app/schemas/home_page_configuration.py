"""Home page configuration request/response schemas."""

import uuid
from datetime import datetime
from enum import Enum

from pydantic import Field

from app.schemas.common import CamelModel

MAX_HERO_BANNERS = 4
MAX_TOP_COLLECTIONS = 10


class ProductSortKey(str, Enum):
    BEST_SELLING = "BEST_SELLING"
    PRICE = "PRICE"
    RELEVANCE = "RELEVANCE"
    TITLE = "TITLE"


class HomePageConfigurationIn(CamelModel):
    """Form-layer input. List caps are enforced here, not in storage."""

    hero_banners: list[str] | None = Field(None, max_length=MAX_HERO_BANNERS)
    top_collections: list[str] = Field(..., max_length=MAX_TOP_COLLECTIONS)
    primary_product_list: str = Field(..., min_length=1)
    primary_product_list_sort_key: ProductSortKey
    primary_product_list_sort_key_reverse: bool = False
    secondary_product_list: str = Field(..., min_length=1)
    secondary_product_list_sort_key: ProductSortKey
    secondary_product_list_sort_key_reverse: bool = False


class HomePageConfigurationResponse(CamelModel):
    id: uuid.UUID
    shop_name: str
    hero_banners: list[str]
    top_collections: list[str]
    primary_product_list: str
    primary_product_list_sort_key: str
    primary_product_list_sort_key_reverse: bool
    secondary_product_list: str
    secondary_product_list_sort_key: str
    secondary_product_list_sort_key_reverse: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None
