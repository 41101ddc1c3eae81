# -*- coding: utf-8 -*-
"""
Маршруты для заданий.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from tora.api.v1.shared.schemas import ItemRead
from tora.clients.database_client import get_db
from tora.config.logger import configure_logger
from tora.repository.items import cycle_task_status, delete_task, update_task

from .schemas import ItemUpdateSchema

router = APIRouter(prefix="/items", tags=["📝 Задания"])
logger = configure_logger()


@router.patch("/{item_id}", response_model=ItemRead)
async def update_item_endpoint(
    item_id: int,
    payload: ItemUpdateSchema,
    session: AsyncSession = Depends(get_db),
):
    """
    Обновить задание.

    - **item_id**: ID задания
    - **title**, **description**, **type**, **status**: Опционально
    """
    update_data = payload.model_dump(exclude_unset=True)
    logger.debug(f"Обновление задания {item_id} с данными: {update_data}")

    task = await update_task(session, item_id, **update_data)
    return ItemRead.model_validate(task)


@router.patch("/{item_id}/status", response_model=ItemRead)
async def cycle_item_status_endpoint(
    item_id: int,
    session: AsyncSession = Depends(get_db),
):
    """Переключить статус: not_started → in_progress → completed → not_started."""
    task = await cycle_task_status(session, item_id)
    logger.info(f"Статус задания {item_id}: {task.status.value}")
    return ItemRead.model_validate(task)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_item_endpoint(
    item_id: int,
    session: AsyncSession = Depends(get_db),
):
    """Удалить задание."""
    await delete_task(session, item_id)
    logger.info(f"Задание {item_id} удалено")
