# -*- coding: utf-8 -*-
"""
Поиск текущего или следующего задания учебной программы.
"""

from typing import Any, Iterable, Optional, Tuple

from tora.domain.enums import ItemStatus
from tora.service.progress.calculation import SectionItems


def find_current_or_next_task(
    sections: Iterable[SectionItems],
) -> Optional[Tuple[Any, Any]]:
    """
    Найти задание, над которым стоит работать.

    Задания обходятся в порядке разделов, внутри раздела в порядке заданий.
    Сначала ищется первое задание в статусе in_progress; если такого нет,
    берется первое not_started.

    Args:
        sections: Пары (раздел, задания), уже отсортированные по sort_order

    Returns:
        Пара (раздел, задание) либо None, если все задания выполнены или их нет
    """
    first_not_started = None
    for section, items in sections:
        for item in items:
            if item.status == ItemStatus.IN_PROGRESS:
                return section, item
            if first_not_started is None and item.status == ItemStatus.NOT_STARTED:
                first_not_started = (section, item)
    return first_not_started
