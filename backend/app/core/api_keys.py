"""Allow-list of API keys for the external (mobile client) endpoints."""

import json
import logging
from datetime import datetime

from pydantic import BaseModel, Field, TypeAdapter

from app.core.config import settings

logger = logging.getLogger(__name__)


class ApiKeyRecord(BaseModel):
    name: str
    active: bool = False
    created_at: datetime | None = Field(None, alias="createdAt")

    model_config = {"populate_by_name": True}


_records_adapter = TypeAdapter(dict[str, ApiKeyRecord])


class ApiKeyStore:
    """Lookup over a fixed set of key records. No expiry or rotation."""

    def __init__(self, records: dict[str, ApiKeyRecord]):
        self._records = dict(records)

    @classmethod
    def from_json(cls, raw: str) -> "ApiKeyStore":
        return cls(_records_adapter.validate_python(json.loads(raw or "{}")))

    def is_authorized(self, key: str | None) -> bool:
        if not key:
            return False
        record = self._records.get(key)
        return record is not None and record.active

    def __len__(self) -> int:
        return len(self._records)


_store: ApiKeyStore | None = None


def load_api_key_store() -> ApiKeyStore:
    """Parse ``settings.API_KEYS`` once and reuse the result."""
    global _store
    if _store is None:
        _store = ApiKeyStore.from_json(settings.API_KEYS)
        if not len(_store):
            logger.warning("API_KEYS is empty; every external API request will be rejected")
    return _store
