# -*- coding: utf-8 -*-
"""
Чтение учебных программ.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from tora.api.v1.shared.schemas import (CurrentTaskInfo, CurriculumCard,
                                        CurriculumDetail,
                                        CurriculumWithProgress)
from tora.clients.database_client import get_db
from tora.config.logger import configure_logger
from tora.service.curriculums import (get_current_task_service,
                                      get_curriculum_detail_service,
                                      get_dashboard_service,
                                      list_curriculums_with_progress_service)

router = APIRouter(tags=["📚 Учебные программы - 📖 Чтение"])
logger = configure_logger()


@router.get("", response_model=List[CurriculumWithProgress])
async def list_curriculums_endpoint(session: AsyncSession = Depends(get_db)):
    """
    Получить список учебных программ.

    Каждая программа содержит totalItems, completedItems и progress;
    список отсортирован по updatedAt по возрастанию.
    """
    curriculums = await list_curriculums_with_progress_service(session)
    logger.debug(f"Получено {len(curriculums)} учебных программ")
    return curriculums


@router.get("/dashboard", response_model=List[CurriculumCard])
async def dashboard_endpoint(session: AsyncSession = Depends(get_db)):
    """Карточки дашборда: прогресс, дни до цели и текущее задание."""
    return await get_dashboard_service(session)


@router.get("/{curriculum_id}", response_model=CurriculumDetail)
async def get_curriculum_endpoint(
    curriculum_id: int,
    session: AsyncSession = Depends(get_db),
):
    """
    Получить учебную программу с разделами и заданиями.

    - **curriculum_id**: ID учебной программы
    """
    logger.debug(f"Получение учебной программы с ID: {curriculum_id}")
    return await get_curriculum_detail_service(session, curriculum_id)


@router.get("/{curriculum_id}/current-task", response_model=Optional[CurrentTaskInfo])
async def get_current_task_endpoint(
    curriculum_id: int,
    session: AsyncSession = Depends(get_db),
):
    """
    Получить текущее задание (in_progress) или следующее (not_started).

    Возвращает null, если все задания выполнены.
    """
    return await get_current_task_service(session, curriculum_id)
