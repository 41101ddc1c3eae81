# -*- coding: utf-8 -*-
"""
tora/domain/enums.py
~~~~~~~~~~~~~~~~~~~~
Определение классов перечислений для домена Tora.

Этот модуль содержит все перечисления, используемые в приложении: приоритеты и
статусы учебных программ, типы и статусы заданий.
"""

import enum


class CurriculumPriority(str, enum.Enum):
    """Приоритет учебной программы."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class CurriculumStatus(str, enum.Enum):
    """Состояния учебной программы."""

    ONGOING = "ongoing"  # Изучается сейчас
    STANDBY = "standby"  # Отложена
    PLANNED = "planned"  # Запланирована
    WISHLIST = "wishlist"  # Список желаний


class ItemType(str, enum.Enum):
    """Типы заданий внутри раздела."""

    VIDEO = "video"
    READING = "reading"
    EXERCISE = "exercise"
    HOMEWORK = "homework"
    OTHER = "other"


class ItemStatus(str, enum.Enum):
    """Состояния выполнения задания."""

    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"

    def next(self) -> "ItemStatus":
        """Следующий статус в цикле not_started -> in_progress -> completed."""
        return _STATUS_CYCLE[self]


_STATUS_CYCLE = {
    ItemStatus.NOT_STARTED: ItemStatus.IN_PROGRESS,
    ItemStatus.IN_PROGRESS: ItemStatus.COMPLETED,
    ItemStatus.COMPLETED: ItemStatus.NOT_STARTED,
}
