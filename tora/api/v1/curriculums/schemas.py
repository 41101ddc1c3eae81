# -*- coding: utf-8 -*-
"""
Pydantic schemas for Curriculum endpoints.
"""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from pydantic import Field, field_validator

from tora.api.v1.shared.schemas import (CamelModel, CurriculumDetail,
                                        blank_to_none, coerce_date)
from tora.domain.enums import CurriculumPriority, CurriculumStatus
from tora.service.reorder import ItemPosition, SectionPosition

# Верхняя граница 32-битного INTEGER, общая для SQLite и PostgreSQL
MAX_DB_INTEGER = 2**31 - 1


def _check_platform_url(value: Optional[str]) -> Optional[str]:
    if value is not None and not value.startswith(("http://", "https://")):
        raise ValueError("platformUrl должен быть http(s) URL")
    return value


class CurriculumCreateSchema(CamelModel):
    """Схема для создания учебной программы."""

    title: str = Field(min_length=1)
    author: Optional[str] = None
    platform: Optional[str] = None
    platform_url: Optional[str] = None
    description: Optional[str] = None
    priority: CurriculumPriority = CurriculumPriority.MEDIUM
    status: CurriculumStatus = CurriculumStatus.PLANNED
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    @field_validator("author", "platform", "platform_url", "description", mode="before")
    @classmethod
    def empty_to_none(cls, v):
        """Пустые строки сохраняются как NULL."""
        return blank_to_none(v)

    @field_validator("platform_url")
    @classmethod
    def validate_platform_url(cls, v):
        return _check_platform_url(v)

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def parse_dates(cls, v):
        return coerce_date(v)


class CurriculumUpdateSchema(CamelModel):
    """Схема для частичного обновления учебной программы."""

    title: Optional[str] = Field(None, min_length=1)
    author: Optional[str] = None
    platform: Optional[str] = None
    platform_url: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[CurriculumPriority] = None
    status: Optional[CurriculumStatus] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    @field_validator("title", "priority", "status", mode="before")
    @classmethod
    def forbid_null(cls, v):
        """Обязательные поля нельзя обнулить."""
        if v is None:
            raise ValueError("поле не может быть null")
        return v

    @field_validator("author", "platform", "platform_url", "description", mode="before")
    @classmethod
    def empty_to_none(cls, v):
        return blank_to_none(v)

    @field_validator("platform_url")
    @classmethod
    def validate_platform_url(cls, v):
        return _check_platform_url(v)

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def parse_dates(cls, v):
        return coerce_date(v)


class ItemOrderSchema(CamelModel):
    """Новая позиция задания."""

    id: int = Field(ge=1, le=MAX_DB_INTEGER)
    sort_order: int = Field(ge=0, le=MAX_DB_INTEGER)


class SectionOrderSchema(CamelModel):
    """Новая позиция раздела и его заданий."""

    id: int = Field(ge=1, le=MAX_DB_INTEGER)
    sort_order: int = Field(ge=0, le=MAX_DB_INTEGER)
    items: List[ItemOrderSchema] = []


class ReorderRequestSchema(CamelModel):
    """Тело запроса пакетной перестановки."""

    sections: List[SectionOrderSchema]

    def to_positions(self) -> List[SectionPosition]:
        """Преобразовать в типизированные значения сервисного слоя."""
        return [
            SectionPosition(
                section_id=section.id,
                sort_order=section.sort_order,
                items=tuple(
                    ItemPosition(item_id=item.id, sort_order=item.sort_order)
                    for item in section.items
                ),
            )
            for section in self.sections
        ]


class ReorderResponseSchema(CamelModel):
    """Ответ пакетной перестановки."""

    success: bool = True
    curriculum: CurriculumDetail
