# -*- coding: utf-8 -*-
"""
Модуль для расчета прогресса разделов и учебных программ.

Все функции чистые: работают с уже загруженными заданиями и ничего не пишут в БД.
"""

from dataclasses import dataclass
from typing import Any, Iterable, Sequence, Tuple

from tora.domain.enums import ItemStatus

# Пара (раздел, задания раздела)
SectionItems = Tuple[Any, Sequence[Any]]


@dataclass(frozen=True)
class CurriculumProgress:
    """Итоги по учебной программе."""

    total_items: int
    completed_items: int
    percent: int


def percent_of(completed: int, total: int) -> int:
    """
    Процент выполнения, округленный до ближайшего целого (половина вверх).

    Считается в целых числах: floor(100 * completed / total + 0.5), 12.5 -> 13.

    Returns:
        Целое число в диапазоне [0, 100]; 0 при total == 0
    """
    if total <= 0:
        return 0
    return (200 * completed + total) // (2 * total)


def _is_completed(item: Any) -> bool:
    return item.status == ItemStatus.COMPLETED


def compute_section_progress(items: Iterable[Any]) -> int:
    """
    Рассчитать прогресс раздела.

    Args:
        items: Задания раздела (порядок не важен)

    Returns:
        Процент выполненных заданий; 0 для пустого раздела
    """
    total = 0
    completed = 0
    for item in items:
        total += 1
        if _is_completed(item):
            completed += 1
    return percent_of(completed, total)


def compute_curriculum_progress(sections: Iterable[SectionItems]) -> CurriculumProgress:
    """
    Рассчитать прогресс учебной программы по плоскому списку заданий.

    Считается доля выполненных заданий среди всех заданий всех разделов, а не
    среднее процентов разделов.

    Args:
        sections: Пары (раздел, задания раздела)

    Returns:
        CurriculumProgress с total_items, completed_items и percent
    """
    total = 0
    completed = 0
    for _section, items in sections:
        for item in items:
            total += 1
            if _is_completed(item):
                completed += 1

    return CurriculumProgress(
        total_items=total,
        completed_items=completed,
        percent=percent_of(completed, total),
    )
