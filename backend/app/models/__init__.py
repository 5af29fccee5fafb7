from app.models.customer_setup import CustomerSetup
from app.models.home_page_configuration import HomePageConfiguration
from app.models.theme_configuration import ThemeConfiguration

__all__ = [
    "CustomerSetup",
    "HomePageConfiguration",
    "ThemeConfiguration",
]
