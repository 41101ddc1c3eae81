# -*- coding: utf-8 -*-
"""
Фикстуры для построения учебных программ в тестах
"""

from typing import List, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from tora.domain.enums import (CurriculumPriority, CurriculumStatus,
                               ItemStatus, ItemType)
from tora.domain.models import Curriculum, Item, Section
from tora.repository.base import create_item


async def create_test_curriculum(
    session: AsyncSession, title: str = "Test Curriculum", **kwargs
) -> Curriculum:
    """Создать тестовую учебную программу"""
    kwargs.setdefault("priority", CurriculumPriority.MEDIUM)
    kwargs.setdefault("status", CurriculumStatus.ONGOING)
    return await create_item(session, Curriculum, title=title, **kwargs)


async def create_test_section(
    session: AsyncSession,
    curriculum_id: int,
    title: str = "Test Section",
    sort_order: int = 0,
) -> Section:
    """Создать тестовый раздел"""
    return await create_item(
        session,
        Section,
        curriculum_id=curriculum_id,
        title=title,
        sort_order=sort_order,
    )


async def create_test_items(
    session: AsyncSession,
    section_id: int,
    statuses: Sequence[ItemStatus],
    title_prefix: str = "Item",
) -> List[Item]:
    """Создать задания раздела с заданными статусами (позиции 0..n-1)"""
    items = []
    for index, status in enumerate(statuses):
        item = await create_item(
            session,
            Item,
            section_id=section_id,
            title=f"{title_prefix} {index + 1}",
            type=ItemType.VIDEO,
            status=status,
            sort_order=index,
        )
        items.append(item)
    return items


async def create_test_tree(
    session: AsyncSession,
    layout: Sequence[Sequence[ItemStatus]],
    title: str = "Test Curriculum",
    **kwargs,
) -> Curriculum:
    """
    Создать программу с разделами по схеме layout.

    Каждый элемент layout описывает раздел списком статусов его заданий;
    разделы получают позиции 0..n-1 и названия "Section 1", "Section 2", ...
    """
    curriculum = await create_test_curriculum(session, title=title, **kwargs)
    for index, statuses in enumerate(layout):
        section = await create_test_section(
            session, curriculum.id, title=f"Section {index + 1}", sort_order=index
        )
        await create_test_items(
            session, section.id, statuses, title_prefix=f"S{index + 1} Item"
        )
    return curriculum
