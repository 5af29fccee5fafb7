"""Admin dashboard status schema."""

from app.schemas.common import CamelModel


class DashboardStatusResponse(CamelModel):
    shop_name: str
    setup_complete: bool
    theme_configured: bool
    home_page_configured: bool
    next_step: str | None = None


class CollectionOption(CamelModel):
    label: str
    value: str
