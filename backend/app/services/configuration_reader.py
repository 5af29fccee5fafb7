"""Assemble a shop's setup, theme and home page into the mobile client payload."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.exceptions import ConfigurationNotFoundError
from app.models.customer_setup import CustomerSetup
from app.models.home_page_configuration import HomePageConfiguration
from app.schemas.configuration import (
    ExpandedCollection,
    HomePageSection,
    MergedConfigurationResponse,
)
from app.schemas.theme_configuration import ThemeConfigurationResponse


def _home_page_section(config: HomePageConfiguration | None) -> HomePageSection:
    if config is None:
        return HomePageSection()
    return HomePageSection(
        hero_banners=config.hero_banners,
        top_collections=config.top_collections,
        primary_product_list=ExpandedCollection(
            collection=config.primary_product_list,
            sort_key=config.primary_product_list_sort_key,
            reverse=config.primary_product_list_sort_key_reverse,
        ),
        secondary_product_list=ExpandedCollection(
            collection=config.secondary_product_list,
            sort_key=config.secondary_product_list_sort_key,
            reverse=config.secondary_product_list_sort_key_reverse,
        ),
    )


async def get_configuration(db: AsyncSession, shop_name: str) -> MergedConfigurationResponse:
    """Load the setup with its children. Raises ConfigurationNotFoundError without a setup."""
    result = await db.execute(
        select(CustomerSetup)
        .where(CustomerSetup.shop_name == shop_name)
        .options(
            selectinload(CustomerSetup.theme_configurations),
            selectinload(CustomerSetup.home_page_configuration),
        )
    )
    setup = result.scalar_one_or_none()
    if setup is None:
        raise ConfigurationNotFoundError(shop_name)

    # At most one theme per shop today; take the first if that ever changes.
    theme = setup.theme_configurations[0] if setup.theme_configurations else None

    return MergedConfigurationResponse(
        id=setup.id,
        shop_name=setup.shop_name,
        company_name=setup.company_name,
        customer_email=setup.customer_email,
        customer_phone_number_country_code=setup.customer_phone_number_country_code,
        customer_phone_number=setup.customer_phone_number,
        app_name=setup.app_name,
        created_at=setup.created_at,
        updated_at=setup.updated_at,
        theme_configurations=(
            ThemeConfigurationResponse.model_validate(theme) if theme is not None else None
        ),
        home_page_configuration=_home_page_section(setup.home_page_configuration),
    )
