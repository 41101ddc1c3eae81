# -*- coding: utf-8 -*-
"""
Операции хранилища для разделов.
"""

from typing import Iterable, List

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from tora.config.logger import configure_logger
from tora.domain.models import Section, utcnow
from tora.repository.base import (create_item, delete_item, get_item,
                                  list_items, update_item)

logger = configure_logger(__name__)


async def get_section(session: AsyncSession, section_id: int) -> Section:
    """
    Получить раздел по ID.

    Raises:
        NotFoundError: Если раздел не найден
    """
    return await get_item(session, Section, section_id)


async def get_sections_by_ids(
    session: AsyncSession, section_ids: Iterable[int]
) -> List[Section]:
    """Получить разделы по списку ID (в любом порядке)."""
    section_ids = list(section_ids)
    if not section_ids:
        return []
    return await list_items(session, Section, id__in=section_ids)


async def next_section_sort_order(session: AsyncSession, curriculum_id: int) -> int:
    """Позиция для нового раздела: max(sort_order) + 1, либо 0."""
    stmt = select(func.max(Section.sort_order)).where(
        Section.curriculum_id == curriculum_id
    )
    result = await session.execute(stmt)
    current_max = result.scalar_one_or_none()
    return 0 if current_max is None else current_max + 1


async def create_section(
    session: AsyncSession,
    curriculum_id: int,
    title: str,
    description: str | None = None,
    sort_order: int | None = None,
    commit: bool = True,
) -> Section:
    """
    Создать раздел в конце учебной программы.

    Args:
        session: Сессия базы данных
        curriculum_id: ID учебной программы
        title: Заголовок раздела
        description: Описание раздела
        sort_order: Явная позиция; по умолчанию раздел добавляется в конец
        commit: Фиксировать ли транзакцию

    Returns:
        Созданный раздел
    """
    if sort_order is None:
        sort_order = await next_section_sort_order(session, curriculum_id)

    logger.debug(
        f"Создание раздела: curriculum_id={curriculum_id}, title={title}, "
        f"sort_order={sort_order}"
    )
    now = utcnow()
    section = await create_item(
        session,
        Section,
        commit=commit,
        curriculum_id=curriculum_id,
        title=title,
        description=description,
        sort_order=sort_order,
        created_at=now,
        updated_at=now,
    )
    logger.info(f"Раздел создан с ID: {section.id}")
    return section


async def update_section(session: AsyncSession, section_id: int, **update_data) -> Section:
    """Частично обновить раздел."""
    logger.debug(f"Обновление раздела {section_id}: {update_data}")
    return await update_item(
        session, Section, section_id, updated_at=utcnow(), **update_data
    )


async def delete_section(session: AsyncSession, section_id: int) -> None:
    """Удалить раздел вместе с заданиями."""
    await delete_item(session, Section, section_id)
