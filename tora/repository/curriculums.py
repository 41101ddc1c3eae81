# -*- coding: utf-8 -*-
"""
tora/repository/curriculums.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Операции хранилища для учебных программ.
"""

from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from tora.config.logger import configure_logger
from tora.domain.models import Curriculum, Section, utcnow
from tora.repository.base import create_item, delete_item, get_item, update_item
from tora.utils.exceptions import NotFoundError

logger = configure_logger(__name__)


async def get_curriculum(session: AsyncSession, curriculum_id: int) -> Curriculum:
    """
    Получить учебную программу по ID.

    Raises:
        NotFoundError: Если программа не найдена
    """
    return await get_item(session, Curriculum, curriculum_id)


async def get_curriculum_tree(
    session: AsyncSession, curriculum_id: int
) -> Curriculum:
    """
    Получить учебную программу вместе с разделами и заданиями.

    Всегда перечитывает строки из БД (populate_existing), поэтому результат
    отражает закоммиченное состояние, а не объекты, уже лежащие в сессии.

    Args:
        session: Сессия базы данных
        curriculum_id: ID учебной программы

    Returns:
        Учебная программа с загруженными sections и sections[].items

    Raises:
        NotFoundError: Если программа не найдена
    """
    stmt = (
        select(Curriculum)
        .where(Curriculum.id == curriculum_id)
        .options(selectinload(Curriculum.sections).selectinload(Section.items))
        .execution_options(populate_existing=True)
    )
    result = await session.execute(stmt)
    curriculum = result.scalar_one_or_none()
    if curriculum is None:
        raise NotFoundError(resource_type="Curriculum", resource_id=curriculum_id)
    return curriculum


async def list_curriculum_trees(session: AsyncSession) -> List[Curriculum]:
    """
    Получить все учебные программы с разделами и заданиями.

    Returns:
        Программы, отсортированные по updated_at по возрастанию
    """
    stmt = (
        select(Curriculum)
        .options(selectinload(Curriculum.sections).selectinload(Section.items))
        .order_by(Curriculum.updated_at.asc(), Curriculum.id.asc())
        .execution_options(populate_existing=True)
    )
    result = await session.execute(stmt)
    curriculums = list(result.scalars().all())
    logger.debug(f"Получено {len(curriculums)} учебных программ")
    return curriculums


async def create_curriculum(
    session: AsyncSession, commit: bool = True, **data
) -> Curriculum:
    """
    Создать учебную программу.

    Args:
        session: Сессия базы данных
        commit: Фиксировать ли транзакцию
        **data: Поля программы

    Returns:
        Созданная программа
    """
    now = utcnow()
    logger.debug(f"Создание учебной программы: title={data.get('title')}")
    curriculum = await create_item(
        session, Curriculum, commit=commit, created_at=now, updated_at=now, **data
    )
    logger.info(f"Учебная программа создана с ID: {curriculum.id}")
    return curriculum


async def update_curriculum(
    session: AsyncSession, curriculum_id: int, **update_data
) -> Curriculum:
    """Частично обновить учебную программу и сдвинуть updated_at."""
    logger.debug(f"Обновление учебной программы {curriculum_id}: {update_data}")
    return await update_item(
        session, Curriculum, curriculum_id, updated_at=utcnow(), **update_data
    )


async def delete_curriculum(session: AsyncSession, curriculum_id: int) -> None:
    """Удалить учебную программу вместе с разделами и заданиями."""
    await delete_item(session, Curriculum, curriculum_id)
