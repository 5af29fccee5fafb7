"""Error types and exception handlers.

Admin endpoints answer with RFC 7807 problem+json. The external (API-key)
endpoints answer with a flat ``{"error": ...}`` body that mobile clients
already parse.
"""

import traceback
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import settings

UNEXPECTED_ERROR_MESSAGE = "An error occurred while processing your request"


# --- Domain errors (raised by services, mapped to HTTP by routes) ---


class ConfigurationNotFoundError(Exception):
    """No CustomerSetup row exists for the shop."""

    def __init__(self, shop_name: str):
        super().__init__(f"No configuration found for shop {shop_name!r}")
        self.shop_name = shop_name


class SetupRequiredError(Exception):
    """A child record was requested before the shop completed setup."""

    def __init__(self, shop_name: str):
        super().__init__(f"Shop {shop_name!r} has not completed setup")
        self.shop_name = shop_name


class DeletionConflictError(Exception):
    """The parent setup cannot be deleted while child records are kept."""

    def __init__(self, results):
        super().__init__("Cannot delete customer setup while keeping other configurations")
        self.results = results


# --- HTTP errors ---


class ProblemDetailError(Exception):
    """Raise for RFC 7807 problem+json responses."""

    def __init__(
        self,
        status: int,
        title: str,
        detail: str,
        error_type: str | None = None,
        extra: dict[str, Any] | None = None,
    ):
        self.status = status
        self.title = title
        self.detail = detail
        self.error_type = error_type or "about:blank"
        self.extra = extra or {}


class ApiError(Exception):
    """Raise from external API routes for an ``{"error": ...}`` response."""

    def __init__(self, status: int, error: str, **extra: Any):
        self.status = status
        self.error = error
        self.extra = extra


def unexpected_error(exc: Exception) -> ApiError:
    """Build the 500 response for a storage or upstream failure."""
    extra: dict[str, Any] = {"details": str(exc)}
    if settings.DEBUG:
        extra["stack"] = "".join(traceback.format_exception(exc))
    return ApiError(500, UNEXPECTED_ERROR_MESSAGE, **extra)


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status, content={"error": exc.error, **exc.extra})


async def problem_detail_handler(request: Request, exc: ProblemDetailError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status,
        content={
            "type": exc.error_type,
            "title": exc.title,
            "status": exc.status,
            "detail": exc.detail,
            "instance": str(request.url.path),
            **exc.extra,
        },
        media_type="application/problem+json",
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "type": "about:blank",
            "title": exc.detail if isinstance(exc.detail, str) else "Error",
            "status": exc.status_code,
            "detail": exc.detail,
            "instance": str(request.url.path),
        },
        media_type="application/problem+json",
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={
            "type": "about:blank",
            "title": "Validation Error",
            "status": 422,
            "detail": jsonable_errors(exc.errors()),
            "instance": str(request.url.path),
        },
        media_type="application/problem+json",
    )


def jsonable_errors(errors) -> list[dict]:
    """Strip non-serializable ``ctx``/``input`` values from pydantic error dicts."""
    cleaned = []
    for err in errors:
        item = {k: v for k, v in err.items() if k not in ("ctx", "input", "url")}
        if "ctx" in err:
            item["ctx"] = {k: str(v) for k, v in err["ctx"].items()}
        cleaned.append(item)
    return cleaned


async def setup_required_handler(request: Request, exc: SetupRequiredError) -> JSONResponse:
    return await problem_detail_handler(
        request,
        ProblemDetailError(
            status=403,
            title="Setup required",
            detail="Please complete the setup first",
            extra={"redirectTo": "/api/v1/admin/setup"},
        ),
    )
