"""Storefront GraphQL pass-through request schema."""

from typing import Any

from pydantic import BaseModel


class GraphQLRequest(BaseModel):
    query: str | None = None
    variables: dict[str, Any] | None = None
