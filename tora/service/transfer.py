# -*- coding: utf-8 -*-
"""
tora/service/transfer.py
~~~~~~~~~~~~~~~~~~~~~~~~
Импорт и экспорт учебных программ: JSON-документы, Markdown-отчет о прогрессе
и ZIP-архив с отчетом и полной резервной копией.
"""

import io
import json
import zipfile
from datetime import date
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from tora.api.v1.transfer.schemas import CurriculumDocument
from tora.config.logger import configure_logger
from tora.config.settings import settings
from tora.domain.enums import CurriculumStatus, ItemStatus
from tora.domain.models import Curriculum
from tora.repository.curriculums import create_curriculum, list_curriculum_trees
from tora.repository.items import create_task
from tora.repository.sections import create_section
from tora.service.curriculums import ordered_tree
from tora.service.progress import compute_curriculum_progress
from tora.utils.exceptions import StorageError

logger = configure_logger(__name__)

_STATUS_MARKS = {
    ItemStatus.COMPLETED: ("✓", "Completed"),
    ItemStatus.IN_PROGRESS: ("▶", "In Progress"),
    ItemStatus.NOT_STARTED: (" ", "Not Started"),
}


async def import_curriculum_service(
    session: AsyncSession, document: CurriculumDocument
) -> Curriculum:
    """
    Импортировать учебную программу из JSON-документа.

    Позиции разделов и заданий берутся из порядка в документе. Программа,
    разделы и задания создаются одной транзакцией.

    Raises:
        StorageError: Ошибка хранилища; транзакция откатана
    """
    try:
        curriculum = await create_curriculum(
            session,
            commit=False,
            title=document.title,
            author=document.author or None,
            platform=document.platform or None,
            platform_url=document.platform_url or None,
            description=document.description or None,
            priority=document.priority,
            status=document.status,
            start_date=document.start_date,
            end_date=document.end_date,
        )
        for section_index, section_doc in enumerate(document.sections):
            section = await create_section(
                session,
                curriculum_id=curriculum.id,
                title=section_doc.title,
                description=section_doc.description or None,
                sort_order=section_index,
                commit=False,
            )
            for item_index, item_doc in enumerate(section_doc.items):
                await create_task(
                    session,
                    section_id=section.id,
                    title=item_doc.title,
                    description=item_doc.description or None,
                    type=item_doc.type,
                    status=item_doc.status,
                    sort_order=item_index,
                    commit=False,
                )
        await session.commit()
    except SQLAlchemyError as e:
        await session.rollback()
        logger.error(f"Ошибка импорта учебной программы: {type(e).__name__}: {e}")
        raise StorageError("Не удалось импортировать учебную программу") from e

    logger.info(
        f"Учебная программа '{document.title}' импортирована с ID {curriculum.id}: "
        f"{len(document.sections)} разделов"
    )
    return curriculum


def curriculum_to_document(curriculum: Curriculum) -> Dict[str, Any]:
    """
    Преобразовать программу в JSON-документ формата импорта.

    Пустые необязательные поля в документ не попадают.
    """
    sections = []
    for section, items in ordered_tree(curriculum):
        section_doc = _compact(
            {
                "title": section.title,
                "description": section.description,
                "items": [
                    _compact(
                        {
                            "title": item.title,
                            "description": item.description,
                            "type": item.type.value,
                            "status": item.status.value,
                        }
                    )
                    for item in items
                ],
            }
        )
        sections.append(section_doc)

    return _compact(
        {
            "title": curriculum.title,
            "author": curriculum.author,
            "platform": curriculum.platform,
            "platformUrl": curriculum.platform_url,
            "description": curriculum.description,
            "priority": curriculum.priority.value,
            "status": curriculum.status.value,
            "startDate": curriculum.start_date.isoformat() if curriculum.start_date else None,
            "endDate": curriculum.end_date.isoformat() if curriculum.end_date else None,
            "sections": sections,
        }
    )


def _compact(data: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in data.items() if value not in (None, "")}


async def export_documents_service(session: AsyncSession) -> List[Dict[str, Any]]:
    """Экспортировать все учебные программы в виде JSON-документов."""
    curriculums = await list_curriculum_trees(session)
    documents = [curriculum_to_document(curriculum) for curriculum in curriculums]
    logger.info(f"Экспортировано {len(documents)} учебных программ")
    return documents


def build_progress_report(curriculums: List[Curriculum], today: date) -> str:
    """
    Сформировать Markdown-отчет о прогрессе.

    Программы в статусе ongoing выводятся полностью (с разделами и заданиями),
    standby кратко с перечнем разделов, planned только с описанием.
    """
    lines = ["# Study Progress Report", "", f"Generated: {today.isoformat()}", ""]

    ongoing = [c for c in curriculums if c.status == CurriculumStatus.ONGOING]
    standby = [c for c in curriculums if c.status == CurriculumStatus.STANDBY]
    planned = [c for c in curriculums if c.status == CurriculumStatus.PLANNED]

    if ongoing:
        lines += ["## Active Studies (Ongoing)", ""]
        for curriculum in ongoing:
            tree = ordered_tree(curriculum)
            totals = compute_curriculum_progress(tree)
            lines.append(f"### {curriculum.title}")
            lines.append(
                f"**Progress:** {totals.completed_items}/{totals.total_items} items "
                f"({totals.percent}%)"
            )
            lines.append("")

            meta = []
            if curriculum.author:
                meta.append(f"**Author:** {curriculum.author}")
            if curriculum.platform:
                platform = curriculum.platform
                if curriculum.platform_url:
                    platform = f"[{curriculum.platform}]({curriculum.platform_url})"
                meta.append(f"**Platform:** {platform}")
            meta.append(f"**Priority:** {curriculum.priority.value}")
            lines.append(" | ".join(meta))

            for section, items in tree:
                lines += ["", f"#### {section.title}"]
                if section.description:
                    lines.append(section.description)
                for item in items:
                    icon, label = _STATUS_MARKS[item.status]
                    lines.append(f"- [{icon}] {item.title} ({item.type.value}) - {label}")
            lines += ["", "---", ""]

    if standby:
        lines += ["## On Hold (Standby)", ""]
        for curriculum in standby:
            lines.append(f"### {curriculum.title}")
            lines += [curriculum.description or "Currently on hold.", ""]
            section_titles = [section.title for section, _ in ordered_tree(curriculum)]
            if section_titles:
                lines += [f"**Sections:** {', '.join(section_titles)}", ""]
            lines += ["---", ""]

    if planned:
        lines += ["## Planned", ""]
        for curriculum in planned:
            lines.append(f"### {curriculum.title}")
            lines += [curriculum.description or "Not yet started.", ""]

    return "\n".join(lines)


async def build_memory_pack_service(
    session: AsyncSession, today: Optional[date] = None
) -> Tuple[str, bytes]:
    """
    Собрать ZIP-архив с Markdown-отчетом и полной JSON-копией.

    Returns:
        Имя архива и его содержимое
    """
    today = today or date.today()
    stamp = today.isoformat()
    prefix = settings.export_prefix

    curriculums = await list_curriculum_trees(session)
    report = build_progress_report(curriculums, today)
    documents = [curriculum_to_document(curriculum) for curriculum in curriculums]

    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED, compresslevel=9) as archive:
        archive.writestr(f"{prefix}-progress-{stamp}.md", report)
        archive.writestr(
            f"{prefix}-full-backup-{stamp}.json",
            json.dumps(documents, ensure_ascii=False, indent=2),
        )

    logger.info(
        f"Сформирован архив экспорта: {len(curriculums)} учебных программ, "
        f"{buffer.tell()} байт"
    )
    return f"{prefix}-memory-pack-{stamp}.zip", buffer.getvalue()
