# -*- coding: utf-8 -*-
"""
Pydantic schemas for Item endpoints.
"""

from typing import Optional

from pydantic import Field, field_validator

from tora.api.v1.shared.schemas import CamelModel, blank_to_none
from tora.domain.enums import ItemStatus, ItemType


class ItemCreateSchema(CamelModel):
    """Схема для создания задания."""

    title: str = Field(min_length=1)
    description: Optional[str] = None
    type: ItemType = ItemType.OTHER
    status: ItemStatus = ItemStatus.NOT_STARTED

    @field_validator("description", mode="before")
    @classmethod
    def empty_to_none(cls, v):
        return blank_to_none(v)


class ItemUpdateSchema(CamelModel):
    """Схема для обновления задания."""

    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    type: Optional[ItemType] = None
    status: Optional[ItemStatus] = None

    @field_validator("title", "type", "status", mode="before")
    @classmethod
    def forbid_null(cls, v):
        if v is None:
            raise ValueError("поле не может быть null")
        return v

    @field_validator("description", mode="before")
    @classmethod
    def empty_to_none(cls, v):
        return blank_to_none(v)
