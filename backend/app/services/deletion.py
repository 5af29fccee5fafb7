"""Selective deletion of a shop's configuration records.

Children (home page, themes) are always removed before the parent setup.
All statements run in the caller's transaction, so a ``delete_all`` either
removes all three kinds or, on failure, none of them.
"""

import logging

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ConfigurationNotFoundError, DeletionConflictError
from app.models.customer_setup import CustomerSetup
from app.models.home_page_configuration import HomePageConfiguration
from app.models.theme_configuration import ThemeConfiguration
from app.schemas.deletion import DeleteOptions, DeletionResults

logger = logging.getLogger(__name__)


async def _count(db: AsyncSession, model, shop_name: str) -> int:
    result = await db.execute(
        select(func.count()).select_from(model).where(model.shop_name == shop_name)
    )
    return result.scalar_one()


async def _delete_rows(db: AsyncSession, model, shop_name: str) -> None:
    await db.execute(delete(model).where(model.shop_name == shop_name))
    logger.info("Deleted %s for shop %s", model.__tablename__, shop_name)


async def delete_configuration(
    db: AsyncSession,
    shop_name: str,
    options: DeleteOptions,
) -> DeletionResults:
    """Delete the requested record kinds for ``shop_name``.

    Raises ConfigurationNotFoundError when the shop has no setup, and
    DeletionConflictError when the setup is requested together with a child
    kind. In the conflict case the child deletions already applied are
    reported on the exception and are not rolled back by this function.
    """
    if await _count(db, CustomerSetup, shop_name) == 0:
        raise ConfigurationNotFoundError(shop_name)

    has_home_page = await _count(db, HomePageConfiguration, shop_name) > 0
    has_themes = await _count(db, ThemeConfiguration, shop_name) > 0
    results = DeletionResults()

    if options.delete_all:
        if has_home_page:
            await _delete_rows(db, HomePageConfiguration, shop_name)
            results.home_page_configuration = True
        if has_themes:
            await _delete_rows(db, ThemeConfiguration, shop_name)
            results.theme_configurations = True
        await _delete_rows(db, CustomerSetup, shop_name)
        results.customer_setup = True
        return results

    if options.delete_home_page_configuration and has_home_page:
        await _delete_rows(db, HomePageConfiguration, shop_name)
        results.home_page_configuration = True

    if options.delete_theme_configurations and has_themes:
        await _delete_rows(db, ThemeConfiguration, shop_name)
        results.theme_configurations = True

    if options.delete_customer_setup:
        keeps_children = (has_home_page and not results.home_page_configuration) or (
            has_themes and not results.theme_configurations
        )
        if (
            options.delete_home_page_configuration
            or options.delete_theme_configurations
            or keeps_children
        ):
            raise DeletionConflictError(results)
        await _delete_rows(db, CustomerSetup, shop_name)
        results.customer_setup = True

    return results
