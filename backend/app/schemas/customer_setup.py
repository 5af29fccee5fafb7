"""Customer setup request/response schemas."""

import uuid
from datetime import datetime

from pydantic import EmailStr, Field

from app.schemas.common import CamelModel


class CustomerSetupIn(CamelModel):
    """Complete field set for a setup save (no patch semantics)."""

    company_name: str = Field(..., min_length=1, max_length=150)
    customer_email: EmailStr
    customer_phone_number_country_code: str | None = Field(None, pattern=r"^\+?\d{1,4}$")
    customer_phone_number: str = Field(..., pattern=r"^\d{10,15}$")
    app_name: str = Field(..., min_length=1, max_length=50)


class CustomerSetupResponse(CamelModel):
    id: uuid.UUID
    shop_name: str
    company_name: str
    customer_email: str
    customer_phone_number_country_code: str | None = None
    customer_phone_number: str
    app_name: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
