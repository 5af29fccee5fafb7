"""Admin theme form endpoints (GET / POST). Both require a completed setup."""

from fastapi import APIRouter, Depends, Form
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.parsing import validate_form
from app.core.dependencies import get_current_shop, get_db
from app.schemas.common import SaveResponse
from app.schemas.theme_configuration import ThemeConfigurationIn, ThemeConfigurationResponse
from app.services.configuration_store import (
    get_theme_configuration,
    require_customer_setup,
    save_theme_configuration,
)

router = APIRouter()


@router.get("", response_model=ThemeConfigurationResponse | None)
async def read_theme(
    shop: str = Depends(get_current_shop),
    db: AsyncSession = Depends(get_db),
):
    await require_customer_setup(db, shop)
    return await get_theme_configuration(db, shop)


@router.post("", response_model=SaveResponse[ThemeConfigurationResponse])
async def submit_theme(
    theme_code: str = Form("", alias="themeCode"),
    primary_color: str = Form("", alias="primaryColor"),
    secondary_color: str = Form("", alias="secondaryColor"),
    background_color: str = Form("", alias="backgroundColor"),
    button_color: str = Form("", alias="buttonColor"),
    app_bar_background_color: str = Form("", alias="appBarBackgroundColor"),
    button_radius: str = Form("", alias="buttonRadius"),
    edge_padding: str = Form("", alias="edgePadding"),
    splash_screen_width: str = Form("", alias="splashScreenWidth"),
    shop: str = Depends(get_current_shop),
    db: AsyncSession = Depends(get_db),
):
    body = validate_form(
        ThemeConfigurationIn,
        {
            "theme_code": theme_code,
            "primary_color": primary_color,
            "secondary_color": secondary_color,
            "background_color": background_color,
            "button_color": button_color,
            "app_bar_background_color": app_bar_background_color,
            "button_radius": button_radius,
            "edge_padding": edge_padding,
            "splash_screen_width": splash_screen_width,
        },
    )
    theme, created = await save_theme_configuration(db, shop, body)
    verb = "saved" if created else "updated"
    return SaveResponse[ThemeConfigurationResponse](
        message=f"Theme configuration {verb} successfully!",
        record=ThemeConfigurationResponse.model_validate(theme),
    )
