"""External configuration API for the mobile client (API-key authenticated).

Bodies are parsed inside the handlers, after the key check has run, so an
unauthenticated caller always gets 401 whatever it sent.
"""

import logging

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.parsing import read_json_body
from app.core.dependencies import get_db, require_api_key
from app.core.exceptions import (
    ApiError,
    ConfigurationNotFoundError,
    DeletionConflictError,
    jsonable_errors,
    unexpected_error,
)
from app.schemas.common import ApiErrorResponse
from app.schemas.configuration import MergedConfigurationResponse
from app.schemas.deletion import DeleteConfigurationRequest, DeleteOptions, DeletionResponse
from app.services.configuration_reader import get_configuration
from app.services.deletion import delete_configuration

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_api_key)])

NOT_FOUND_MESSAGE = "No configuration found for the given shopName"
CONFLICT_MESSAGE = "Cannot delete customer setup while keeping other configurations"
ALL_DELETED_MESSAGE = "All configurations deleted successfully"
SELECTED_DELETED_MESSAGE = "Selected configurations deleted successfully"

_error_responses = {
    400: {"model": ApiErrorResponse},
    401: {"model": ApiErrorResponse},
    404: {"model": ApiErrorResponse},
    500: {"model": ApiErrorResponse},
}


@router.get("", response_model=MergedConfigurationResponse, responses=_error_responses)
async def read_configuration(
    shop_name: str | None = Query(None, alias="shopName"),
    db: AsyncSession = Depends(get_db),
):
    """Setup, first theme and home page for a shop, merged into one payload."""
    if not shop_name:
        raise ApiError(400, "shopName parameter is required")

    try:
        return await get_configuration(db, shop_name)
    except ConfigurationNotFoundError as exc:
        raise ApiError(404, NOT_FOUND_MESSAGE) from exc
    except Exception as exc:
        logger.exception("Configuration read failed for shop %s", shop_name)
        raise unexpected_error(exc) from exc


@router.post("/delete", response_model=DeletionResponse, responses=_error_responses)
async def delete_configuration_records(
    request: Request,
    db: AsyncSession = Depends(get_db),
):
    """Delete all or selected configuration records for a shop.

    Body: ``{"shopName": ..., "deleteOptions": {"deleteAll", "deleteHomePageConfiguration",
    "deleteThemeConfigurations", "deleteCustomerSetup"}}``.
    """
    payload = await read_json_body(request)
    try:
        body = DeleteConfigurationRequest.model_validate(payload)
    except ValidationError as exc:
        raise ApiError(400, "Invalid request body", details=jsonable_errors(exc.errors())) from exc

    if not body.shop_name:
        raise ApiError(400, "shopName is required")

    options = body.delete_options or DeleteOptions()
    try:
        results = await delete_configuration(db, body.shop_name, options)
    except ConfigurationNotFoundError as exc:
        raise ApiError(404, NOT_FOUND_MESSAGE) from exc
    except DeletionConflictError as exc:
        # Returned rather than raised: child deletions already applied are committed.
        return JSONResponse(
            status_code=400,
            content={
                "error": CONFLICT_MESSAGE,
                "results": exc.results.model_dump(by_alias=True),
            },
        )
    except Exception as exc:
        logger.exception("Configuration delete failed for shop %s", body.shop_name)
        raise unexpected_error(exc) from exc

    message = ALL_DELETED_MESSAGE if options.delete_all else SELECTED_DELETED_MESSAGE
    return DeletionResponse(message=message, results=results)
