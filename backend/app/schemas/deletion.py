"""Configuration deletion request/response schemas."""

from app.schemas.common import CamelModel


class DeleteOptions(CamelModel):
    delete_all: bool = False
    delete_home_page_configuration: bool = False
    delete_theme_configurations: bool = False
    delete_customer_setup: bool = False


class DeleteConfigurationRequest(CamelModel):
    shop_name: str | None = None
    delete_options: DeleteOptions | None = None


class DeletionResults(CamelModel):
    home_page_configuration: bool = False
    theme_configurations: bool = False
    customer_setup: bool = False


class DeletionResponse(CamelModel):
    message: str
    results: DeletionResults
