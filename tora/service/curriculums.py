# -*- coding: utf-8 -*-
"""
tora/service/curriculums.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~
Сервисные функции чтения учебных программ: список с прогрессом, детальная
карточка с разделами, данные для дашборда.
"""

from datetime import date
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import AsyncSession

from tora.config.logger import configure_logger
from tora.domain.models import Curriculum, Item, Section
from tora.repository.curriculums import (get_curriculum_tree,
                                         list_curriculum_trees)
from tora.service.progress import (compute_curriculum_progress,
                                   compute_section_progress,
                                   find_current_or_next_task)

logger = configure_logger(__name__)


def _by_position(rows):
    return sorted(rows, key=lambda row: (row.sort_order, row.id))


def row_to_dict(row: Any) -> Dict[str, Any]:
    """Колонки ORM-объекта в виде словаря."""
    return {attr.key: getattr(row, attr.key) for attr in inspect(row).mapper.column_attrs}


def ordered_tree(curriculum: Curriculum) -> List[Tuple[Section, List[Item]]]:
    """
    Разделы программы и их задания в порядке sort_order.

    Порядок определяется только хранимым sort_order (при равенстве по id),
    а не порядком коллекций в памяти.
    """
    return [
        (section, _by_position(section.items))
        for section in _by_position(curriculum.sections)
    ]


def build_curriculum_detail(curriculum: Curriculum) -> Dict[str, Any]:
    """
    Собрать детальное представление программы.

    Returns:
        Поля программы, sections[] с items[] и progress раздела, а также
        итоги total_items / completed_items / progress по программе
    """
    tree = ordered_tree(curriculum)
    totals = compute_curriculum_progress(tree)

    data = row_to_dict(curriculum)
    data["sections"] = [
        {
            **row_to_dict(section),
            "items": [row_to_dict(item) for item in items],
            "progress": compute_section_progress(items),
        }
        for section, items in tree
    ]
    data["total_items"] = totals.total_items
    data["completed_items"] = totals.completed_items
    data["progress"] = totals.percent
    return data


def build_curriculum_summary(curriculum: Curriculum) -> Dict[str, Any]:
    """Поля программы и итоги прогресса без вложенных разделов."""
    totals = compute_curriculum_progress(ordered_tree(curriculum))
    return {
        **row_to_dict(curriculum),
        "total_items": totals.total_items,
        "completed_items": totals.completed_items,
        "progress": totals.percent,
    }


def build_current_task(curriculum: Curriculum) -> Optional[Dict[str, Any]]:
    """Текущее или следующее задание программы; None, если все выполнено."""
    found = find_current_or_next_task(ordered_tree(curriculum))
    if found is None:
        return None
    section, item = found
    return {
        "id": item.id,
        "title": item.title,
        "type": item.type,
        "status": item.status,
        "description": item.description,
        "section_id": section.id,
        "section_title": section.title,
    }


def days_remaining(end_date: Optional[date], today: Optional[date] = None) -> Optional[int]:
    """
    Сколько дней осталось до целевой даты.

    Returns:
        Число дней (0 в сам день, отрицательное при просрочке) либо None без даты
    """
    if end_date is None:
        return None
    today = today or date.today()
    return (end_date - today).days


async def list_curriculums_with_progress_service(
    session: AsyncSession,
) -> List[Dict[str, Any]]:
    """
    Получить все учебные программы с итогами прогресса.

    Returns:
        Список словарей: поля программы + total_items, completed_items, progress
    """
    curriculums = await list_curriculum_trees(session)
    return [build_curriculum_summary(curriculum) for curriculum in curriculums]


async def get_curriculum_detail_service(
    session: AsyncSession, curriculum_id: int
) -> Dict[str, Any]:
    """
    Получить учебную программу с разделами, заданиями и прогрессом.

    Raises:
        NotFoundError: Если программа не найдена
    """
    curriculum = await get_curriculum_tree(session, curriculum_id)
    logger.debug(
        f"Учебная программа {curriculum_id} загружена: "
        f"{len(curriculum.sections)} разделов"
    )
    return build_curriculum_detail(curriculum)


async def get_current_task_service(
    session: AsyncSession, curriculum_id: int
) -> Optional[Dict[str, Any]]:
    """
    Получить текущее или следующее задание учебной программы.

    Raises:
        NotFoundError: Если программа не найдена
    """
    curriculum = await get_curriculum_tree(session, curriculum_id)
    return build_current_task(curriculum)


async def get_dashboard_service(
    session: AsyncSession, today: Optional[date] = None
) -> List[Dict[str, Any]]:
    """
    Получить карточки дашборда.

    Каждая карточка содержит итоги прогресса, days_remaining до end_date и
    current_task (текущее или следующее задание).
    """
    curriculums = await list_curriculum_trees(session)
    cards = []
    for curriculum in curriculums:
        card = build_curriculum_summary(curriculum)
        card["days_remaining"] = days_remaining(curriculum.end_date, today)
        card["current_task"] = build_current_task(curriculum)
        cards.append(card)
    return cards
