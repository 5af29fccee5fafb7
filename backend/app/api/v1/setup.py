"""Admin setup form endpoints (GET / POST), session-token authenticated."""

from fastapi import APIRouter, Depends, Form
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.parsing import validate_form
from app.core.dependencies import get_current_shop, get_db
from app.schemas.common import SaveResponse
from app.schemas.customer_setup import CustomerSetupIn, CustomerSetupResponse
from app.services.configuration_store import get_customer_setup, save_customer_setup

router = APIRouter()


@router.get("", response_model=CustomerSetupResponse | None)
async def read_setup(
    shop: str = Depends(get_current_shop),
    db: AsyncSession = Depends(get_db),
):
    """Current setup for the shop. Returns null before the first save."""
    return await get_customer_setup(db, shop)


@router.post("", response_model=SaveResponse[CustomerSetupResponse])
async def submit_setup(
    company_name: str = Form("", alias="companyName"),
    customer_email: str = Form("", alias="customerEmail"),
    country_code: str = Form("", alias="countryCode"),
    customer_phone: str = Form("", alias="customerPhone"),
    app_name: str = Form("", alias="appName"),
    shop: str = Depends(get_current_shop),
    db: AsyncSession = Depends(get_db),
):
    body = validate_form(
        CustomerSetupIn,
        {
            "company_name": company_name.strip(),
            "customer_email": customer_email.strip(),
            "customer_phone_number_country_code": country_code.strip() or None,
            "customer_phone_number": customer_phone.strip(),
            "app_name": app_name.strip(),
        },
    )
    setup, created = await save_customer_setup(db, shop, body)
    return SaveResponse[CustomerSetupResponse](
        message="Setup saved successfully!" if created else "Setup updated successfully!",
        record=CustomerSetupResponse.model_validate(setup),
    )
