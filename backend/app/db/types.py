"""Custom column types."""

import json

from sqlalchemy import Text
from sqlalchemy.types import TypeDecorator


class JSONEncodedList(TypeDecorator):
    """A ``list[str]`` stored as JSON-encoded text.

    Serialization happens here only; callers always see Python lists.
    NULL or empty text reads back as ``[]``.
    """

    impl = Text
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if not isinstance(value, list):
            raise TypeError(f"Expected a list, got {type(value).__name__}")
        return json.dumps(value)

    def process_result_value(self, value, dialect):
        if not value:
            return []
        return json.loads(value)
