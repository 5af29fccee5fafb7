"""Shared schema types: camelCase base model, save and external API error responses."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class SaveResponse(CamelModel, Generic[T]):
    success: bool = True
    message: str
    record: T


class ApiErrorResponse(BaseModel):
    error: str
    details: str | None = None
