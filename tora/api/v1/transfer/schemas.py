# -*- coding: utf-8 -*-
"""
Схемы JSON-документа для импорта и экспорта учебных программ.

Документ не содержит позиций: порядок разделов и заданий задается порядком
элементов в массивах.
"""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from pydantic import Field, field_validator

from tora.api.v1.shared.schemas import CamelModel, blank_to_none, coerce_date
from tora.domain.enums import (CurriculumPriority, CurriculumStatus,
                               ItemStatus, ItemType)


class ItemDocument(CamelModel):
    """Задание в документе импорта."""

    title: str = Field(min_length=1)
    description: Optional[str] = None
    type: ItemType = ItemType.OTHER
    status: ItemStatus = ItemStatus.NOT_STARTED


class SectionDocument(CamelModel):
    """Раздел в документе импорта."""

    title: str = Field(min_length=1)
    description: Optional[str] = None
    items: List[ItemDocument] = []


class CurriculumDocument(CamelModel):
    """Учебная программа в документе импорта."""

    title: str = Field(min_length=1)
    author: Optional[str] = None
    platform: Optional[str] = None
    platform_url: Optional[str] = None
    description: Optional[str] = None
    priority: CurriculumPriority = CurriculumPriority.MEDIUM
    status: CurriculumStatus = CurriculumStatus.PLANNED
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    sections: List[SectionDocument]

    @field_validator("author", "platform", "platform_url", "description", mode="before")
    @classmethod
    def empty_to_none(cls, v):
        return blank_to_none(v)

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def parse_dates(cls, v):
        return coerce_date(v)


class ImportResultSchema(CamelModel):
    """Результат импорта."""

    message: str
    id: int
