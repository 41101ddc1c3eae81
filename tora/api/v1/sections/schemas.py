# -*- coding: utf-8 -*-
"""
Pydantic schemas for Section endpoints.
"""

from typing import Optional

from pydantic import Field, field_validator

from tora.api.v1.shared.schemas import CamelModel, blank_to_none


class SectionCreateSchema(CamelModel):
    """Схема для создания раздела."""

    title: str = Field(min_length=1)
    description: Optional[str] = None

    @field_validator("description", mode="before")
    @classmethod
    def empty_to_none(cls, v):
        return blank_to_none(v)


class SectionUpdateSchema(CamelModel):
    """Схема для обновления раздела. Позиция меняется только через reorder."""

    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None

    @field_validator("title", mode="before")
    @classmethod
    def forbid_null_title(cls, v):
        if v is None:
            raise ValueError("title не может быть null")
        return v

    @field_validator("description", mode="before")
    @classmethod
    def empty_to_none(cls, v):
        return blank_to_none(v)
