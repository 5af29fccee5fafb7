"""Admin home page form endpoints (GET / POST). Both require a completed setup.

``heroBanners`` and ``topCollections`` arrive as JSON-encoded arrays. Banner
URLs are already hosted; uploading the images is the client's business.
"""

from fastapi import APIRouter, Depends, Form
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.parsing import parse_json_list, validate_form
from app.core.dependencies import get_current_shop, get_db
from app.schemas.common import SaveResponse
from app.schemas.home_page_configuration import (
    HomePageConfigurationIn,
    HomePageConfigurationResponse,
)
from app.services.configuration_store import (
    get_home_page_configuration,
    require_customer_setup,
    save_home_page_configuration,
)

router = APIRouter()


@router.get("", response_model=HomePageConfigurationResponse | None)
async def read_home_page(
    shop: str = Depends(get_current_shop),
    db: AsyncSession = Depends(get_db),
):
    await require_customer_setup(db, shop)
    return await get_home_page_configuration(db, shop)


@router.post("", response_model=SaveResponse[HomePageConfigurationResponse])
async def submit_home_page(
    hero_banners: str | None = Form(None, alias="heroBanners"),
    top_collections: str | None = Form(None, alias="topCollections"),
    primary_product_list: str = Form("", alias="primaryProductList"),
    primary_sort_key: str = Form("", alias="primaryProductListSortKey"),
    primary_reverse: str = Form("false", alias="primaryProductListSortKeyReverse"),
    secondary_product_list: str = Form("", alias="secondaryProductList"),
    secondary_sort_key: str = Form("", alias="secondaryProductListSortKey"),
    secondary_reverse: str = Form("false", alias="secondaryProductListSortKeyReverse"),
    shop: str = Depends(get_current_shop),
    db: AsyncSession = Depends(get_db),
):
    body = validate_form(
        HomePageConfigurationIn,
        {
            "hero_banners": parse_json_list(hero_banners, "heroBanners"),
            "top_collections": parse_json_list(top_collections, "topCollections"),
            "primary_product_list": primary_product_list,
            "primary_product_list_sort_key": primary_sort_key,
            "primary_product_list_sort_key_reverse": primary_reverse == "true",
            "secondary_product_list": secondary_product_list,
            "secondary_product_list_sort_key": secondary_sort_key,
            "secondary_product_list_sort_key_reverse": secondary_reverse == "true",
        },
    )
    config, _created = await save_home_page_configuration(db, shop, body)
    return SaveResponse[HomePageConfigurationResponse](
        message="Home page configuration saved successfully!",
        record=HomePageConfigurationResponse.model_validate(config),
    )
