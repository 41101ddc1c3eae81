# -*- coding: utf-8 -*-
"""
Обновление учебных программ.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from tora.api.v1.shared.schemas import CurriculumRead
from tora.clients.database_client import get_db
from tora.config.logger import configure_logger
from tora.repository.curriculums import update_curriculum

from ..schemas import CurriculumUpdateSchema

router = APIRouter(tags=["📚 Учебные программы - ✏️ Обновление"])
logger = configure_logger()


@router.patch("/{curriculum_id}", response_model=CurriculumRead)
async def update_curriculum_endpoint(
    curriculum_id: int,
    payload: CurriculumUpdateSchema,
    session: AsyncSession = Depends(get_db),
):
    """
    Частично обновить учебную программу.

    Передаются только изменяемые поля; updatedAt обновляется всегда.
    """
    update_data = payload.model_dump(exclude_unset=True)
    logger.debug(f"Обновление учебной программы {curriculum_id} с данными: {update_data}")

    curriculum = await update_curriculum(session, curriculum_id, **update_data)

    logger.info(f"Учебная программа {curriculum_id} обновлена")
    return CurriculumRead.model_validate(curriculum)
