"""Form payloads and seeding helpers shared by the tests."""

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.security import create_session_token
from app.schemas.customer_setup import CustomerSetupIn
from app.schemas.home_page_configuration import HomePageConfigurationIn
from app.schemas.theme_configuration import ThemeConfigurationIn
from app.services.configuration_store import (
    save_customer_setup,
    save_home_page_configuration,
    save_theme_configuration,
)

ACTIVE_API_KEY = "mob_auth_test_active"
INACTIVE_API_KEY = "mob_auth_test_revoked"
STOREFRONT_DOMAIN = "mobile-app-connector.myshopify.com"
STOREFRONT_TOKEN = "storefront-test-token"


def api_headers(key: str = ACTIVE_API_KEY) -> dict:
    """Headers for the external (mobile client) API."""
    return {"X-API-Key": key}


def admin_headers(shop: str) -> dict:
    """Authorization headers carrying a host platform session token for ``shop``."""
    return {"Authorization": f"Bearer {create_session_token(shop)}"}


SETUP_FORM = {
    "companyName": "Acme",
    "customerEmail": "owner@acme.com",
    "countryCode": "+1",
    "customerPhone": "5551234567",
    "appName": "Acme Mobile",
}

THEME_FORM = {
    "themeCode": "dark",
    "primaryColor": "#112233",
    "secondaryColor": "#445566",
    "backgroundColor": "#000000",
    "buttonColor": "#FFFFFF",
    "appBarBackgroundColor": "#101010",
    "buttonRadius": "12px",
    "edgePadding": "16px",
    "splashScreenWidth": "50%",
}

HOME_PAGE_FORM = {
    "heroBanners": '["https://x/a.png"]',
    "topCollections": '["gid://1"]',
    "primaryProductList": "gid://1",
    "primaryProductListSortKey": "TITLE",
    "primaryProductListSortKeyReverse": "false",
    "secondaryProductList": "gid://2",
    "secondaryProductListSortKey": "BEST_SELLING",
    "secondaryProductListSortKeyReverse": "true",
}


def setup_in(**overrides) -> CustomerSetupIn:
    fields = {
        "company_name": "Acme",
        "customer_email": "owner@acme.com",
        "customer_phone_number_country_code": "+1",
        "customer_phone_number": "5551234567",
        "app_name": "Acme Mobile",
    }
    fields.update(overrides)
    return CustomerSetupIn(**fields)


def theme_in(**overrides) -> ThemeConfigurationIn:
    fields = {
        "theme_code": "dark",
        "primary_color": "#112233",
        "secondary_color": "#445566",
        "background_color": "#000000",
        "button_color": "#FFFFFF",
        "app_bar_background_color": "#101010",
        "button_radius": "12px",
        "edge_padding": "16px",
        "splash_screen_width": "50%",
    }
    fields.update(overrides)
    return ThemeConfigurationIn(**fields)


def home_page_in(**overrides) -> HomePageConfigurationIn:
    fields = {
        "hero_banners": ["https://x/a.png"],
        "top_collections": ["gid://1"],
        "primary_product_list": "gid://1",
        "primary_product_list_sort_key": "TITLE",
        "primary_product_list_sort_key_reverse": False,
        "secondary_product_list": "gid://2",
        "secondary_product_list_sort_key": "BEST_SELLING",
        "secondary_product_list_sort_key_reverse": True,
    }
    fields.update(overrides)
    return HomePageConfigurationIn(**fields)


async def seed_shop(
    db: AsyncSession,
    shop_name: str,
    *,
    theme: bool = True,
    home_page: bool = True,
) -> None:
    """Save a setup (and optionally theme / home page) and commit."""
    await save_customer_setup(db, shop_name, setup_in())
    if theme:
        await save_theme_configuration(db, shop_name, theme_in())
    if home_page:
        await save_home_page_configuration(db, shop_name, home_page_in())
    await db.commit()
