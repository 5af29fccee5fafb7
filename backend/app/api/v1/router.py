"""Aggregate all v1 sub-routers."""

from fastapi import APIRouter

from app.api.v1.admin import router as admin_router
from app.api.v1.configurations import router as configurations_router
from app.api.v1.graphql import router as graphql_router
from app.api.v1.health import router as health_router
from app.api.v1.home_page import router as home_page_router
from app.api.v1.setup import router as setup_router
from app.api.v1.theme import router as theme_router

api_v1_router = APIRouter()

api_v1_router.include_router(health_router, tags=["health"])

# External API for the mobile client (X-API-Key)
api_v1_router.include_router(
    configurations_router, prefix="/configurations", tags=["configurations"]
)
api_v1_router.include_router(graphql_router, prefix="/graphql", tags=["graphql"])

# Embedded admin (host platform session token)
api_v1_router.include_router(admin_router, prefix="/admin", tags=["admin"])
api_v1_router.include_router(setup_router, prefix="/admin/setup", tags=["admin-setup"])
api_v1_router.include_router(theme_router, prefix="/admin/theme", tags=["admin-theme"])
api_v1_router.include_router(
    home_page_router, prefix="/admin/home-page", tags=["admin-home-page"]
)
