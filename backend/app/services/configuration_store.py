"""Per-kind save/get actions for setup, theme and home page records."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import SetupRequiredError
from app.models.customer_setup import CustomerSetup
from app.models.home_page_configuration import HomePageConfiguration
from app.models.theme_configuration import ThemeConfiguration
from app.schemas.customer_setup import CustomerSetupIn
from app.schemas.home_page_configuration import HomePageConfigurationIn
from app.schemas.theme_configuration import ThemeConfigurationIn
from app.services.upsert import upsert_by_shop


async def get_customer_setup(db: AsyncSession, shop_name: str) -> CustomerSetup | None:
    result = await db.execute(select(CustomerSetup).where(CustomerSetup.shop_name == shop_name))
    return result.scalar_one_or_none()


async def get_theme_configuration(db: AsyncSession, shop_name: str) -> ThemeConfiguration | None:
    result = await db.execute(
        select(ThemeConfiguration).where(ThemeConfiguration.shop_name == shop_name)
    )
    return result.scalar_one_or_none()


async def get_home_page_configuration(
    db: AsyncSession, shop_name: str
) -> HomePageConfiguration | None:
    result = await db.execute(
        select(HomePageConfiguration).where(HomePageConfiguration.shop_name == shop_name)
    )
    return result.scalar_one_or_none()


async def require_customer_setup(db: AsyncSession, shop_name: str) -> CustomerSetup:
    """Theme and home page records hang off the setup row; it must exist first."""
    setup = await get_customer_setup(db, shop_name)
    if setup is None:
        raise SetupRequiredError(shop_name)
    return setup


async def save_customer_setup(
    db: AsyncSession, shop_name: str, body: CustomerSetupIn
) -> tuple[CustomerSetup, bool]:
    return await upsert_by_shop(db, CustomerSetup, shop_name, body.model_dump(mode="json"))


async def save_theme_configuration(
    db: AsyncSession, shop_name: str, body: ThemeConfigurationIn
) -> tuple[ThemeConfiguration, bool]:
    await require_customer_setup(db, shop_name)
    return await upsert_by_shop(db, ThemeConfiguration, shop_name, body.model_dump(mode="json"))


async def save_home_page_configuration(
    db: AsyncSession, shop_name: str, body: HomePageConfigurationIn
) -> tuple[HomePageConfiguration, bool]:
    """Save the home page. Omitted hero banners keep whatever is stored."""
    await require_customer_setup(db, shop_name)

    fields = body.model_dump(mode="json")
    if fields["hero_banners"] is None:
        existing = await get_home_page_configuration(db, shop_name)
        fields["hero_banners"] = existing.hero_banners if existing else []

    return await upsert_by_shop(db, HomePageConfiguration, shop_name, fields)
