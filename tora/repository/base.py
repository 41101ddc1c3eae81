# -*- coding: utf-8 -*-
"""
tora/repository/base.py
~~~~~~~~~~~~~~~~~~~~~~~
Base repository operations for generic CRUD functionality.

This module provides reusable asynchronous CRUD helpers using SQLAlchemy 2.0
async ORM, with logging and basic validation. It is designed to be stateless
for unit testing simplicity. Helpers that write accept ``commit=False`` so
that several writes can share one transaction.
"""

from __future__ import annotations

from typing import Any, List, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tora.config.logger import configure_logger
from tora.domain.models import Base
from tora.utils.exceptions import NotFoundError

T = TypeVar("T", bound=Base)

logger = configure_logger(__name__)

# ---------------------------------------------------------------------------
# Generic helpers
# ---------------------------------------------------------------------------


async def get_item(session: AsyncSession, model: Type[T], item_id: int) -> T:
    """Retrieve a single row by ID or raise NotFoundError.

    The row is always re-read, so rows removed by ON DELETE CASCADE are not
    served from the identity map.
    """
    instance = await session.get(model, item_id, populate_existing=True)
    if instance is None:
        raise NotFoundError(resource_type=model.__name__, resource_id=item_id)
    return instance


async def create_item(
    session: AsyncSession, model: Type[T], commit: bool = True, **kwargs: Any
) -> T:
    """Create a new row in the database."""
    instance = model(**kwargs)
    session.add(instance)
    if commit:
        await session.commit()
        await session.refresh(instance)
    else:
        await session.flush()
    return instance


async def update_item(
    session: AsyncSession, model: Type[T], item_id: int, **kwargs: Any
) -> T:
    """Update an existing row in the database."""
    instance = await get_item(session, model, item_id)
    for key, value in kwargs.items():
        setattr(instance, key, value)
    await session.commit()
    await session.refresh(instance)
    logger.debug(f"Обновлен {model.__name__} с ID {item_id}: {list(kwargs)}")
    return instance


async def delete_item(session: AsyncSession, model: Type[T], item_id: int) -> None:
    """Delete a row; children go with it through ON DELETE CASCADE."""
    instance = await get_item(session, model, item_id)
    await session.delete(instance)
    await session.commit()
    logger.info(f"Удален {model.__name__} с ID {item_id}")


async def list_items(
    session: AsyncSession,
    model: Type[T],
    skip: int = 0,
    limit: int = 0,
    order_by: tuple = (),
    **filters,
) -> List[T]:
    """Retrieve a list of rows filtered by the given criteria."""
    stmt = select(model)

    # Обработка кастомных фильтров перед filter_by
    for key, value in filters.items():
        if key.endswith("__in"):
            attr_name = key[:-4]  # Удаляем '__in'
            stmt = stmt.where(getattr(model, attr_name).in_(value))

    # Применение оставшихся фильтров
    stmt = stmt.filter_by(
        **{k: v for k, v in filters.items() if not k.endswith("__in")}
    )

    if order_by:
        stmt = stmt.order_by(*order_by)

    # Применяем пагинацию
    if skip > 0:
        stmt = stmt.offset(skip)
    if limit > 0:
        stmt = stmt.limit(limit)

    result = await session.execute(stmt)
    items = result.scalars().all()
    logger.debug(f"Получено {len(items)} записей {model.__name__}")
    return list(items)
