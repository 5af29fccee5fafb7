"""Upsert and storage tests for setup, theme and home page records."""

import pytest
from sqlalchemy import func, select, text
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import SetupRequiredError
from app.db.types import JSONEncodedList
from app.models.customer_setup import CustomerSetup
from app.models.home_page_configuration import HomePageConfiguration
from app.services.configuration_store import (
    get_home_page_configuration,
    save_customer_setup,
    save_home_page_configuration,
    save_theme_configuration,
)
from tests.helpers import home_page_in, setup_in, theme_in


async def _setup_count(db: AsyncSession, shop_name: str) -> int:
    result = await db.execute(
        select(func.count()).select_from(CustomerSetup).where(CustomerSetup.shop_name == shop_name)
    )
    return result.scalar_one()


async def test_first_save_creates_second_updates_same_row(db: AsyncSession):
    first, created = await save_customer_setup(db, "shop-a", setup_in())
    assert created is True
    assert first.company_name == "Acme"

    second, created = await save_customer_setup(db, "shop-a", setup_in(company_name="Acme 2"))
    assert created is False
    assert second.id == first.id
    assert second.company_name == "Acme 2"
    assert await _setup_count(db, "shop-a") == 1


async def test_shops_are_isolated(db: AsyncSession):
    await save_customer_setup(db, "shop-a", setup_in())
    await save_customer_setup(db, "shop-b", setup_in(company_name="Other"))
    assert await _setup_count(db, "shop-a") == 1
    assert await _setup_count(db, "shop-b") == 1


async def test_theme_requires_setup(db: AsyncSession):
    with pytest.raises(SetupRequiredError):
        await save_theme_configuration(db, "no-setup", theme_in())


async def test_home_page_requires_setup(db: AsyncSession):
    with pytest.raises(SetupRequiredError):
        await save_home_page_configuration(db, "no-setup", home_page_in())


async def test_theme_upsert_updates_in_place(db: AsyncSession):
    await save_customer_setup(db, "shop-a", setup_in())
    theme, created = await save_theme_configuration(db, "shop-a", theme_in())
    assert created is True

    updated, created = await save_theme_configuration(
        db, "shop-a", theme_in(theme_code="light", primary_color="#FFFFFF")
    )
    assert created is False
    assert updated.id == theme.id
    assert updated.theme_code == "light"
    assert updated.primary_color == "#FFFFFF"


async def test_hero_banners_are_stored_as_json_text(db: AsyncSession):
    await save_customer_setup(db, "shop-a", setup_in())
    banners = [f"https://cdn.test/banner-{i}.png" for i in range(4)]
    await save_home_page_configuration(db, "shop-a", home_page_in(hero_banners=banners))
    await db.commit()

    raw = await db.execute(
        text("SELECT hero_banners FROM home_page_configurations WHERE shop_name = 'shop-a'")
    )
    assert raw.scalar_one() == (
        '["https://cdn.test/banner-0.png", "https://cdn.test/banner-1.png", '
        '"https://cdn.test/banner-2.png", "https://cdn.test/banner-3.png"]'
    )

    db.expire_all()
    config = await get_home_page_configuration(db, "shop-a")
    assert config.hero_banners == banners


async def test_empty_hero_banners_read_back_empty(db: AsyncSession):
    await save_customer_setup(db, "shop-a", setup_in())
    await save_home_page_configuration(db, "shop-a", home_page_in(hero_banners=[]))
    await db.commit()
    db.expire_all()

    config = await get_home_page_configuration(db, "shop-a")
    assert config.hero_banners == []


async def test_ten_top_collections_round_trip(db: AsyncSession):
    await save_customer_setup(db, "shop-a", setup_in())
    collections = [f"gid://shopify/Collection/{i}" for i in range(10)]
    await save_home_page_configuration(db, "shop-a", home_page_in(top_collections=collections))
    await db.commit()
    db.expire_all()

    config = await get_home_page_configuration(db, "shop-a")
    assert config.top_collections == collections


async def test_omitted_hero_banners_keep_stored_ones(db: AsyncSession):
    await save_customer_setup(db, "shop-a", setup_in())
    await save_home_page_configuration(
        db, "shop-a", home_page_in(hero_banners=["https://x/a.png", "https://x/b.png"])
    )

    config, created = await save_home_page_configuration(
        db, "shop-a", home_page_in(hero_banners=None, primary_product_list="gid://9")
    )
    assert created is False
    assert config.hero_banners == ["https://x/a.png", "https://x/b.png"]
    assert config.primary_product_list == "gid://9"


async def test_omitted_hero_banners_default_to_empty(db: AsyncSession):
    await save_customer_setup(db, "shop-a", setup_in())
    config, _ = await save_home_page_configuration(db, "shop-a", home_page_in(hero_banners=None))
    assert config.hero_banners == []


async def test_null_list_column_reads_as_empty(db: AsyncSession):
    await save_customer_setup(db, "shop-a", setup_in())
    await db.commit()
    await db.execute(
        text(
            "INSERT INTO home_page_configurations (id, shop_name, hero_banners, top_collections, "
            "primary_product_list, primary_product_list_sort_key, "
            "primary_product_list_sort_key_reverse, secondary_product_list, "
            "secondary_product_list_sort_key, secondary_product_list_sort_key_reverse) "
            "VALUES ('0123456789abcdef0123456789abcdef', 'shop-a', '', '', 'gid://1', 'TITLE', 0, "
            "'gid://2', 'PRICE', 1)"
        )
    )
    await db.commit()

    result = await db.execute(
        select(HomePageConfiguration).where(HomePageConfiguration.shop_name == "shop-a")
    )
    config = result.scalar_one()
    assert config.hero_banners == []
    assert config.top_collections == []


def test_list_column_rejects_non_list_values():
    with pytest.raises(TypeError):
        JSONEncodedList().process_bind_param("https://x/a.png", None)
