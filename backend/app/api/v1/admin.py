"""Admin dashboard status and home page form helpers."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.dependencies import get_current_shop, get_db, get_storefront_client
from app.schemas.dashboard import CollectionOption, DashboardStatusResponse
from app.services.configuration_store import (
    get_customer_setup,
    get_home_page_configuration,
    get_theme_configuration,
)
from app.services.storefront import StorefrontClient, StorefrontError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/status", response_model=DashboardStatusResponse)
async def get_dashboard_status(
    shop: str = Depends(get_current_shop),
    db: AsyncSession = Depends(get_db),
):
    """Which configuration steps the shop has completed, and where to go next."""
    setup_complete = await get_customer_setup(db, shop) is not None
    theme_configured = await get_theme_configuration(db, shop) is not None
    home_page_configured = await get_home_page_configuration(db, shop) is not None

    if not setup_complete:
        next_step = "/api/v1/admin/setup"
    elif not theme_configured:
        next_step = "/api/v1/admin/theme"
    elif not home_page_configured:
        next_step = "/api/v1/admin/home-page"
    else:
        next_step = None

    return DashboardStatusResponse(
        shop_name=shop,
        setup_complete=setup_complete,
        theme_configured=theme_configured,
        home_page_configured=home_page_configured,
        next_step=next_step,
    )


@router.get("/collections", response_model=list[CollectionOption])
async def list_collection_options(
    shop: str = Depends(get_current_shop),
    client: StorefrontClient = Depends(get_storefront_client),
):
    """Collections to pick from for top collections and expanded product lists."""
    try:
        options = await client.list_collections()
    except StorefrontError as exc:
        logger.warning("Could not load collections for %s: %s", shop, exc)
        raise HTTPException(status_code=502, detail="Could not load collections") from exc
    return [CollectionOption(**option) for option in options]
