# -*- coding: utf-8 -*-
"""
Модуль для расчета прогресса учебных программ.

Экспортирует чистые функции агрегации прогресса и поиска текущего задания.
"""

from tora.service.progress.calculation import (CurriculumProgress,
                                               SectionItems,
                                               compute_curriculum_progress,
                                               compute_section_progress,
                                               percent_of)
from tora.service.progress.current_task import find_current_or_next_task

__all__ = [
    # Расчет прогресса
    "CurriculumProgress",
    "SectionItems",
    "compute_section_progress",
    "compute_curriculum_progress",
    "percent_of",
    # Текущее задание
    "find_current_or_next_task",
]
