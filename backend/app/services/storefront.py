"""Storefront GraphQL client.

Used by the ``/graphql`` pass-through endpoint and to list collections for
the home page form.
"""

import logging
from typing import Any

import httpx

from app.core.config import settings

logger = logging.getLogger(__name__)

COLLECTIONS_QUERY = """
query collections($first: Int!) {
    collections(first: $first) {
        edges {
            node {
                id
                title
            }
        }
    }
}
"""


class StorefrontError(RuntimeError):
    """Network or HTTP failure talking to the storefront API."""

    def __init__(self, message: str, status_code: int = 502):
        super().__init__(message)
        self.status_code = status_code


class StorefrontClient:
    def __init__(
        self,
        shop_domain: str,
        access_token: str,
        api_version: str = "2024-10",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.shop_domain = shop_domain
        self.access_token = access_token
        self.api_version = api_version
        self._timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls) -> "StorefrontClient":
        return cls(
            shop_domain=settings.STOREFRONT_SHOP_DOMAIN,
            access_token=settings.STOREFRONT_ACCESS_TOKEN,
            api_version=settings.STOREFRONT_API_VERSION,
            timeout=settings.STOREFRONT_TIMEOUT_SECONDS,
        )

    @property
    def endpoint(self) -> str:
        return f"https://{self.shop_domain}/api/{self.api_version}/graphql.json"

    async def graphql(self, query: str, variables: dict[str, Any] | None = None) -> dict:
        """Run a query and return the response body untouched (``data`` and ``errors``)."""
        if not self.shop_domain:
            raise StorefrontError("STOREFRONT_SHOP_DOMAIN is not configured", status_code=500)

        payload = {"query": query, "variables": variables or {}}
        headers = {
            "Content-Type": "application/json",
            "X-Shopify-Storefront-Access-Token": self.access_token,
        }
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.post(self.endpoint, json=payload, headers=headers)
        except httpx.RequestError as exc:
            logger.warning("Storefront request to %s failed: %s", self.shop_domain, exc)
            raise StorefrontError(f"Network error while calling storefront: {exc}") from exc

        if response.status_code >= 400:
            logger.warning(
                "Storefront returned %s for %s", response.status_code, self.shop_domain
            )
            raise StorefrontError(
                f"Storefront API call failed ({response.status_code}): {response.text}"
            )

        try:
            return response.json()
        except ValueError as exc:
            raise StorefrontError("Storefront returned a non-JSON response") from exc

    async def list_collections(self, first: int = 100) -> list[dict[str, str]]:
        """Collections as ``{label, value}`` select options."""
        body = await self.graphql(COLLECTIONS_QUERY, {"first": first})
        if body.get("errors"):
            raise StorefrontError(f"Storefront GraphQL errors: {body['errors']}")
        edges = ((body.get("data") or {}).get("collections") or {}).get("edges") or []
        return [
            {"label": edge["node"]["title"], "value": edge["node"]["id"]}
            for edge in edges
            if edge.get("node")
        ]
