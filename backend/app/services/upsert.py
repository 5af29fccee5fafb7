"""Create-or-update keyed by shop name, shared by every per-shop record kind."""

import logging
from typing import Any, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.base import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


async def upsert_by_shop(
    db: AsyncSession,
    model: type[ModelT],
    shop_name: str,
    fields: dict[str, Any],
) -> tuple[ModelT, bool]:
    """Update the shop's row in place, or insert it. Returns ``(record, created)``.

    Every field in ``fields`` is written; there is no version check, so
    concurrent saves for the same shop are last-write-wins.
    """
    result = await db.execute(select(model).where(model.shop_name == shop_name))
    record = result.scalar_one_or_none()
    created = record is None

    if record is None:
        record = model(shop_name=shop_name, **fields)
        db.add(record)
    else:
        for key, value in fields.items():
            setattr(record, key, value)

    await db.flush()
    await db.refresh(record)

    logger.info(
        "%s %s for shop %s",
        "Created" if created else "Updated",
        model.__tablename__,
        shop_name,
    )
    return record, created
