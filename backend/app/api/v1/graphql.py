"""Storefront GraphQL pass-through for the mobile client (API-key authenticated)."""

import logging

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError

from app.api.v1.parsing import read_json_body
from app.core.dependencies import get_storefront_client, require_api_key
from app.core.exceptions import ApiError, jsonable_errors, unexpected_error
from app.schemas.graphql import GraphQLRequest
from app.services.storefront import StorefrontClient, StorefrontError

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_api_key)])


@router.post("")
async def graphql_proxy(
    request: Request,
    client: StorefrontClient = Depends(get_storefront_client),
):
    """Forward ``{query, variables}`` upstream and return its JSON body as-is."""
    payload = await read_json_body(request)
    try:
        body = GraphQLRequest.model_validate(payload)
    except ValidationError as exc:
        raise ApiError(400, "Invalid request body", details=jsonable_errors(exc.errors())) from exc

    if not body.query:
        raise ApiError(400, "No query provided")

    try:
        return await client.graphql(body.query, body.variables)
    except StorefrontError as exc:
        logger.exception("Storefront GraphQL proxy failed")
        raise unexpected_error(exc) from exc
    except Exception as exc:
        logger.exception("Unexpected error in GraphQL proxy")
        raise unexpected_error(exc) from exc
