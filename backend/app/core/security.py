"""Host-platform session token verification (HS256 JWT signed with the app secret).

The embedded admin UI sends the session token as ``Authorization: Bearer``.
The shop is the host of the ``dest`` claim, e.g. ``https://acme.myshopify.com``.
"""

import time
from urllib.parse import urlparse

from jose import JWTError, jwt

from app.core.config import settings


def decode_session_token(token: str) -> dict:
    """Verify signature, expiry and audience. Returns the claims dict."""
    return jwt.decode(
        token,
        settings.SHOPIFY_API_SECRET,
        algorithms=["HS256"],
        audience=settings.SHOPIFY_API_KEY,
        options={"verify_iss": False},
    )


def shop_from_claims(claims: dict) -> str:
    """Extract the shop domain from the ``dest`` claim."""
    dest = claims.get("dest")
    if not dest:
        raise JWTError("Token missing dest claim")
    shop = urlparse(dest).netloc or dest
    if not shop:
        raise JWTError("Token dest claim has no host")
    return shop


def create_session_token(
    shop: str,
    user_id: str = "1",
    expires_in: int = 60,
) -> str:
    """Create a session token the way the host platform does (local dev/testing)."""
    now = int(time.time())
    payload = {
        "iss": f"https://{shop}/admin",
        "dest": f"https://{shop}",
        "aud": settings.SHOPIFY_API_KEY,
        "sub": user_id,
        "iat": now,
        "nbf": now,
        "exp": now + expires_in,
    }
    return jwt.encode(payload, settings.SHOPIFY_API_SECRET, algorithm="HS256")
