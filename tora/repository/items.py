# -*- coding: utf-8 -*-
"""
Операции хранилища для заданий.
"""

from typing import Iterable, List

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from tora.config.logger import configure_logger
from tora.domain.enums import ItemStatus, ItemType
from tora.domain.models import Item, utcnow
from tora.repository.base import (create_item, delete_item, get_item,
                                  list_items, update_item)

logger = configure_logger(__name__)


async def get_task(session: AsyncSession, item_id: int) -> Item:
    """
    Получить задание по ID.

    Raises:
        NotFoundError: Если задание не найдено
    """
    return await get_item(session, Item, item_id)


async def get_items_by_ids(session: AsyncSession, item_ids: Iterable[int]) -> List[Item]:
    """Получить задания по списку ID (в любом порядке)."""
    item_ids = list(item_ids)
    if not item_ids:
        return []
    return await list_items(session, Item, id__in=item_ids)


async def next_item_sort_order(session: AsyncSession, section_id: int) -> int:
    """Позиция для нового задания: max(sort_order) + 1, либо 0."""
    stmt = select(func.max(Item.sort_order)).where(Item.section_id == section_id)
    result = await session.execute(stmt)
    current_max = result.scalar_one_or_none()
    return 0 if current_max is None else current_max + 1


async def create_task(
    session: AsyncSession,
    section_id: int,
    title: str,
    description: str | None = None,
    type: ItemType = ItemType.OTHER,
    status: ItemStatus = ItemStatus.NOT_STARTED,
    sort_order: int | None = None,
    commit: bool = True,
) -> Item:
    """
    Создать задание в конце раздела.

    Args:
        session: Сессия базы данных
        section_id: ID раздела
        title: Заголовок задания
        description: Описание задания
        type: Тип задания
        status: Статус выполнения
        sort_order: Явная позиция; по умолчанию задание добавляется в конец
        commit: Фиксировать ли транзакцию

    Returns:
        Созданное задание
    """
    if sort_order is None:
        sort_order = await next_item_sort_order(session, section_id)

    now = utcnow()
    task = await create_item(
        session,
        Item,
        commit=commit,
        section_id=section_id,
        title=title,
        description=description,
        type=type,
        status=status,
        sort_order=sort_order,
        created_at=now,
        updated_at=now,
    )
    logger.debug(f"Задание создано с ID: {task.id} (раздел {section_id})")
    return task


async def update_task(session: AsyncSession, item_id: int, **update_data) -> Item:
    """Частично обновить задание."""
    logger.debug(f"Обновление задания {item_id}: {update_data}")
    return await update_item(session, Item, item_id, updated_at=utcnow(), **update_data)


async def cycle_task_status(session: AsyncSession, item_id: int) -> Item:
    """Перевести задание в следующий статус цикла."""
    task = await get_task(session, item_id)
    new_status = ItemStatus(task.status).next()
    logger.debug(f"Статус задания {item_id}: {task.status} -> {new_status}")
    return await update_task(session, item_id, status=new_status)


async def delete_task(session: AsyncSession, item_id: int) -> None:
    """Удалить задание."""
    await delete_item(session, Item, item_id)
