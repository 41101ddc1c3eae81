# -*- coding: utf-8 -*-
"""
Создание учебных программ.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from tora.api.v1.shared.schemas import CurriculumRead
from tora.clients.database_client import get_db
from tora.config.logger import configure_logger
from tora.repository.curriculums import create_curriculum

from ..schemas import CurriculumCreateSchema

router = APIRouter(tags=["📚 Учебные программы - ➕ Создание"])
logger = configure_logger()


@router.post("", response_model=CurriculumRead, status_code=status.HTTP_201_CREATED)
async def create_curriculum_endpoint(
    payload: CurriculumCreateSchema,
    session: AsyncSession = Depends(get_db),
):
    """
    Создать новую учебную программу.

    - **title**: Название программы
    - **author**, **platform**, **platformUrl**, **description**: Опционально
    - **priority**: high / medium / low (по умолчанию medium)
    - **status**: ongoing / standby / planned / wishlist (по умолчанию planned)
    - **startDate**, **endDate**: Даты начала и цели (опционально)
    """
    logger.debug(f"Создание учебной программы с данными: {payload.model_dump()}")

    curriculum = await create_curriculum(session, **payload.model_dump())

    logger.info(f"Учебная программа создана с ID: {curriculum.id}")
    return CurriculumRead.model_validate(curriculum)
