"""Request body helpers shared by the API and admin form routes."""

import json
from typing import TypeVar

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from app.core.exceptions import ApiError

SchemaT = TypeVar("SchemaT", bound=BaseModel)


async def read_json_body(request: Request) -> object:
    """Parse a JSON body by hand, so it happens after the API key check."""
    try:
        return await request.json()
    except ValueError as exc:
        raise ApiError(400, "Request body must be valid JSON") from exc


def validate_form(schema: type[SchemaT], data: dict) -> SchemaT:
    """Validate submitted form fields; errors come back as a 422 with per-field detail."""
    try:
        return schema.model_validate(data)
    except ValidationError as exc:
        raise RequestValidationError(
            [{**err, "loc": ("body", *err["loc"])} for err in exc.errors()]
        ) from exc


def parse_json_list(raw: str | None, field: str) -> list | None:
    """Decode a JSON-encoded array form field. Empty input means "not submitted"."""
    if raw is None or raw == "":
        return None
    try:
        value = json.loads(raw)
    except ValueError as exc:
        raise RequestValidationError(
            [{"type": "json_invalid", "loc": ("body", field), "msg": "Must be a JSON array"}]
        ) from exc
    if not isinstance(value, list):
        raise RequestValidationError(
            [{"type": "list_type", "loc": ("body", field), "msg": "Must be a JSON array"}]
        )
    return value
