"""FastAPI dependencies: DB session, admin session auth, API key guard, upstream clients."""

import logging
from collections.abc import AsyncGenerator

from fastapi import Depends, HTTPException
from fastapi.security import APIKeyHeader, HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.api_keys import ApiKeyStore, load_api_key_store
from app.core.exceptions import ApiError, unexpected_error
from app.core.security import decode_session_token, shop_from_claims
from app.db.session import async_session_factory
from app.services.storefront import StorefrontClient

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)
api_key_scheme = APIKeyHeader(name="X-API-Key", auto_error=False)

INVALID_API_KEY_MESSAGE = "Invalid or missing API key"


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield an async DB session. Commits on success, rolls back on error."""
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def get_current_shop(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> str:
    """Verify the admin session token and return the shop it was issued for."""
    if credentials is None:
        raise HTTPException(status_code=401, detail="Missing authorization header")

    try:
        claims = decode_session_token(credentials.credentials)
        return shop_from_claims(claims)
    except JWTError as e:
        raise HTTPException(status_code=401, detail=f"Invalid session token: {e}") from e


def get_api_key_store() -> ApiKeyStore:
    try:
        return load_api_key_store()
    except ValueError as exc:
        logger.exception("API_KEYS could not be parsed")
        raise unexpected_error(exc) from exc


async def require_api_key(
    api_key: str | None = Depends(api_key_scheme),
    store: ApiKeyStore = Depends(get_api_key_store),
) -> str:
    """Reject external API calls without an active key, before any other work."""
    if not store.is_authorized(api_key):
        raise ApiError(401, INVALID_API_KEY_MESSAGE)
    return api_key


def get_storefront_client() -> StorefrontClient:
    return StorefrontClient.from_settings()
