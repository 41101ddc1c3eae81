# -*- coding: utf-8 -*-
"""
tora/domain/models.py
~~~~~~~~~~~~~~~~~~~~~
ORM-модели SQLAlchemy: учебная программа, раздел, задание.

Иерархия Curriculum -> Section -> Item. Удаление родителя каскадно удаляет
потомков (ON DELETE CASCADE на уровне БД и cascade на уровне ORM).
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import List, Optional

from sqlalchemy import Date, DateTime
from sqlalchemy import Enum as SAEnum
from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from tora.domain.enums import (CurriculumPriority, CurriculumStatus,
                               ItemStatus, ItemType)


def utcnow() -> datetime:
    """Текущее время в UTC."""
    return datetime.now(timezone.utc)


def _enum_column(enum_cls, name: str) -> SAEnum:
    # Храним значения ("in_progress"), а не имена членов ("IN_PROGRESS")
    return SAEnum(
        enum_cls,
        name=name,
        native_enum=False,
        length=32,
        values_callable=lambda members: [member.value for member in members],
        validate_strings=True,
    )


class Base(DeclarativeBase):
    """Базовый класс декларативных моделей."""


class Curriculum(Base):
    """Учебная программа (курс)."""

    __tablename__ = "curriculums"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    author: Mapped[Optional[str]] = mapped_column(String(255))
    platform: Mapped[Optional[str]] = mapped_column(String(255))
    platform_url: Mapped[Optional[str]] = mapped_column(String(2048))
    description: Mapped[Optional[str]] = mapped_column(Text)
    priority: Mapped[CurriculumPriority] = mapped_column(
        _enum_column(CurriculumPriority, "curriculum_priority"),
        nullable=False,
        default=CurriculumPriority.MEDIUM,
    )
    status: Mapped[CurriculumStatus] = mapped_column(
        _enum_column(CurriculumStatus, "curriculum_status"),
        nullable=False,
        default=CurriculumStatus.PLANNED,
    )
    start_date: Mapped[Optional[date]] = mapped_column(Date)
    end_date: Mapped[Optional[date]] = mapped_column(Date)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )

    sections: Mapped[List["Section"]] = relationship(
        back_populates="curriculum",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by=lambda: [Section.sort_order, Section.id],
    )

    def __repr__(self) -> str:
        return f"<Curriculum id={self.id} title={self.title!r}>"


class Section(Base):
    """Раздел учебной программы."""

    __tablename__ = "sections"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    curriculum_id: Mapped[int] = mapped_column(
        ForeignKey("curriculums.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )

    curriculum: Mapped[Curriculum] = relationship(back_populates="sections")
    items: Mapped[List["Item"]] = relationship(
        back_populates="section",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by=lambda: [Item.sort_order, Item.id],
    )

    def __repr__(self) -> str:
        return f"<Section id={self.id} sort_order={self.sort_order}>"


class Item(Base):
    """Задание внутри раздела."""

    __tablename__ = "items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    section_id: Mapped[int] = mapped_column(
        ForeignKey("sections.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    type: Mapped[ItemType] = mapped_column(
        _enum_column(ItemType, "item_type"), nullable=False, default=ItemType.OTHER
    )
    status: Mapped[ItemStatus] = mapped_column(
        _enum_column(ItemStatus, "item_status"),
        nullable=False,
        default=ItemStatus.NOT_STARTED,
    )
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )

    section: Mapped[Section] = relationship(back_populates="items")

    def __repr__(self) -> str:
        return f"<Item id={self.id} status={self.status} sort_order={self.sort_order}>"
