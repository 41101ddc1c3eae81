# -*- coding: utf-8 -*-
"""
Общие Pydantic-схемы ответов API.

Поля передаются по сети в camelCase (sortOrder, totalItems, platformUrl);
во входных данных также принимаются имена в snake_case.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from tora.domain.enums import (CurriculumPriority, CurriculumStatus,
                               ItemStatus, ItemType)


class CamelModel(BaseModel):
    """Базовая схема с camelCase-алиасами."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def blank_to_none(value):
    """Пустая строка во входных данных означает отсутствие значения."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


def coerce_date(value):
    """Принимает как дату (2025-01-31), так и дату-время (2025-01-31T00:00:00Z)."""
    value = blank_to_none(value)
    if isinstance(value, str) and "T" in value:
        return value.split("T", 1)[0]
    if isinstance(value, datetime):
        return value.date()
    return value


class ItemRead(CamelModel):
    """Схема для чтения задания."""

    id: int
    section_id: int
    title: str
    description: Optional[str] = None
    type: ItemType
    status: ItemStatus
    sort_order: int
    created_at: datetime
    updated_at: datetime


class SectionRead(CamelModel):
    """Схема для чтения раздела."""

    id: int
    curriculum_id: int
    title: str
    description: Optional[str] = None
    sort_order: int
    created_at: datetime
    updated_at: datetime


class SectionWithItems(SectionRead):
    """Раздел с заданиями и процентом выполнения."""

    items: List[ItemRead] = []
    progress: int = 0


class CurriculumRead(CamelModel):
    """Схема для чтения учебной программы."""

    id: int
    title: str
    author: Optional[str] = None
    platform: Optional[str] = None
    platform_url: Optional[str] = None
    description: Optional[str] = None
    priority: CurriculumPriority
    status: CurriculumStatus
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    created_at: datetime
    updated_at: datetime


class CurriculumWithProgress(CurriculumRead):
    """Учебная программа с итогами прогресса."""

    total_items: int = 0
    completed_items: int = 0
    progress: int = 0


class CurriculumDetail(CurriculumWithProgress):
    """Учебная программа с разделами и заданиями."""

    sections: List[SectionWithItems] = []


class CurrentTaskInfo(CamelModel):
    """Текущее или следующее задание программы."""

    id: int
    title: str
    type: ItemType
    status: ItemStatus
    description: Optional[str] = None
    section_id: int
    section_title: str


class CurriculumCard(CurriculumWithProgress):
    """Карточка дашборда."""

    days_remaining: Optional[int] = None
    current_task: Optional[CurrentTaskInfo] = None
