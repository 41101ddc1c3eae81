# -*- coding: utf-8 -*-
"""
Пакетная перестановка разделов и заданий.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from tora.api.v1.shared.schemas import CurriculumDetail
from tora.clients.database_client import get_db
from tora.config.logger import configure_logger
from tora.service.reorder import ReorderCoordinator

from ..schemas import ReorderRequestSchema, ReorderResponseSchema

router = APIRouter(tags=["📚 Учебные программы - 🔀 Порядок"])
logger = configure_logger()


@router.patch("/{curriculum_id}/reorder", response_model=ReorderResponseSchema)
async def reorder_curriculum_endpoint(
    curriculum_id: int,
    payload: ReorderRequestSchema,
    session: AsyncSession = Depends(get_db),
):
    """
    Задать новые позиции разделов и заданий одной транзакцией.

    - **sections**: `[{id, sortOrder, items: [{id, sortOrder}]}]`

    sortOrder задает абсолютную позицию; порядок элементов в массивах не важен.
    Если хотя бы один раздел или задание не принадлежит программе, ничего не
    меняется и возвращается 400.
    """
    logger.debug(
        f"Перестановка в учебной программе {curriculum_id}: "
        f"{payload.model_dump(by_alias=True)}"
    )

    coordinator = ReorderCoordinator(session)
    detail = await coordinator.reorder(curriculum_id, payload.to_positions())

    return ReorderResponseSchema(
        success=True, curriculum=CurriculumDetail.model_validate(detail)
    )
