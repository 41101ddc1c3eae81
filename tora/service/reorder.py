# -*- coding: utf-8 -*-
"""
tora/service/reorder.py
~~~~~~~~~~~~~~~~~~~~~~~
Пакетное изменение порядка разделов и заданий учебной программы.

Запрос задает абсолютные позиции (sort_order) для разделов и для заданий
внутри разделов. Все проверки выполняются до первой записи, все записи
фиксируются одной транзакцией: либо применяется весь запрос, либо ничего.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from tora.config.logger import configure_logger
from tora.config.settings import settings
from tora.domain.models import Item, Section, utcnow
from tora.repository.curriculums import get_curriculum, get_curriculum_tree
from tora.repository.items import get_items_by_ids
from tora.repository.sections import get_sections_by_ids
from tora.service.curriculums import build_curriculum_detail
from tora.utils.exceptions import APIException, StorageError, ValidationError

logger = configure_logger(__name__)


@dataclass(frozen=True)
class ItemPosition:
    """Новая позиция задания."""

    item_id: int
    sort_order: int


@dataclass(frozen=True)
class SectionPosition:
    """Новая позиция раздела и позиции перечисленных в нем заданий."""

    section_id: int
    sort_order: int
    items: Sequence[ItemPosition] = field(default_factory=tuple)


def _check_permutation(positions: List[int], owner: str) -> None:
    if sorted(positions) != list(range(len(positions))):
        raise ValidationError(
            f"Позиции {owner} должны образовывать последовательность 0..{len(positions) - 1}, "
            f"получено {sorted(positions)}"
        )


class ReorderCoordinator:
    """Применяет пакетную перестановку разделов и заданий одной транзакцией."""

    def __init__(self, session: AsyncSession, strict_permutation: Optional[bool] = None):
        """
        Args:
            session: Сессия базы данных
            strict_permutation: Требовать, чтобы позиции образовывали
                перестановку 0..n-1; по умолчанию берется из настроек
        """
        self.session = session
        if strict_permutation is None:
            strict_permutation = settings.reorder_strict_permutation
        self.strict_permutation = strict_permutation

    async def reorder(
        self, curriculum_id: int, positions: Sequence[SectionPosition]
    ) -> Dict[str, Any]:
        """
        Применить новые позиции и вернуть перечитанную программу.

        Args:
            curriculum_id: ID учебной программы
            positions: Новые позиции разделов и заданий (порядок списка не важен)

        Returns:
            Детальное представление программы после перестановки

        Raises:
            NotFoundError: Программа не найдена
            ValidationError: Раздел не принадлежит программе, задание не
                принадлежит разделу, ID повторяется или позиции некорректны
            StorageError: Ошибка хранилища; транзакция откатана
        """
        logger.debug(
            f"Перестановка в учебной программе {curriculum_id}: "
            f"{len(positions)} разделов"
        )

        try:
            await get_curriculum(self.session, curriculum_id)
            sections, items = await self._load_and_validate(curriculum_id, positions)

            now = utcnow()
            for position in positions:
                section = sections[position.section_id]
                section.sort_order = position.sort_order
                section.updated_at = now
                for item_position in position.items:
                    item = items[item_position.item_id]
                    item.sort_order = item_position.sort_order
                    item.updated_at = now

            await self.session.commit()
        except APIException:
            await self.session.rollback()
            raise
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(
                f"Ошибка хранилища при перестановке в учебной программе {curriculum_id}: "
                f"{type(e).__name__}: {e}"
            )
            raise StorageError("Не удалось сохранить новый порядок") from e
        except Exception as e:
            # Ошибки драйвера вне иерархии SQLAlchemy (например, OverflowError)
            await self.session.rollback()
            logger.error(
                f"Перестановка в учебной программе {curriculum_id} прервана: "
                f"{type(e).__name__}: {e}"
            )
            raise

        logger.info(
            f"Порядок учебной программы {curriculum_id} обновлен: "
            f"{len(sections)} разделов, {len(items)} заданий"
        )

        curriculum = await get_curriculum_tree(self.session, curriculum_id)
        return build_curriculum_detail(curriculum)

    async def _load_and_validate(
        self, curriculum_id: int, positions: Sequence[SectionPosition]
    ) -> tuple[Dict[int, Section], Dict[int, Item]]:
        section_ids = [position.section_id for position in positions]
        _reject_duplicates(section_ids, "Раздел")

        item_owner: Dict[int, int] = {}
        for position in positions:
            for item_position in position.items:
                if item_position.item_id in item_owner:
                    raise ValidationError(
                        f"Задание {item_position.item_id} указано в запросе несколько раз",
                        resource_id=item_position.item_id,
                    )
                item_owner[item_position.item_id] = position.section_id

        sections = {
            section.id: section
            for section in await get_sections_by_ids(self.session, section_ids)
        }
        for section_id in section_ids:
            section = sections.get(section_id)
            if section is None or section.curriculum_id != curriculum_id:
                raise ValidationError(
                    f"Раздел {section_id} не принадлежит учебной программе {curriculum_id}",
                    resource_id=section_id,
                )

        items = {
            item.id: item
            for item in await get_items_by_ids(self.session, item_owner.keys())
        }
        for item_id, section_id in item_owner.items():
            item = items.get(item_id)
            if item is None or item.section_id != section_id:
                raise ValidationError(
                    f"Задание {item_id} не принадлежит разделу {section_id}",
                    resource_id=item_id,
                )

        if self.strict_permutation:
            _check_permutation(
                [position.sort_order for position in positions], "разделов"
            )
            for position in positions:
                _check_permutation(
                    [item.sort_order for item in position.items],
                    f"заданий раздела {position.section_id}",
                )

        return sections, items


def _reject_duplicates(ids: List[int], resource_type: str) -> None:
    seen = set()
    for resource_id in ids:
        if resource_id in seen:
            raise ValidationError(
                f"{resource_type} {resource_id} указан в запросе несколько раз",
                resource_id=resource_id,
            )
        seen.add(resource_id)
