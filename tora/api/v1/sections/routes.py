# -*- coding: utf-8 -*-
"""
Маршруты для разделов.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from tora.api.v1.items.schemas import ItemCreateSchema
from tora.api.v1.shared.schemas import ItemRead, SectionRead
from tora.clients.database_client import get_db
from tora.config.logger import configure_logger
from tora.repository.items import create_task
from tora.repository.sections import (delete_section, get_section,
                                      update_section)

from .schemas import SectionUpdateSchema

router = APIRouter(prefix="/sections", tags=["📖 Разделы"])
logger = configure_logger()


@router.patch("/{section_id}", response_model=SectionRead)
async def update_section_endpoint(
    section_id: int,
    payload: SectionUpdateSchema,
    session: AsyncSession = Depends(get_db),
):
    """
    Обновить раздел.

    - **section_id**: ID раздела
    - **title**: Новый заголовок (опционально)
    - **description**: Новое описание (опционально)
    """
    update_data = payload.model_dump(exclude_unset=True)
    logger.debug(f"Обновление раздела {section_id} с данными: {update_data}")

    section = await update_section(session, section_id, **update_data)
    return SectionRead.model_validate(section)


@router.delete("/{section_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_section_endpoint(
    section_id: int,
    session: AsyncSession = Depends(get_db),
):
    """Удалить раздел вместе с заданиями."""
    await delete_section(session, section_id)
    logger.info(f"Раздел {section_id} удален")


@router.post(
    "/{section_id}/items",
    response_model=ItemRead,
    status_code=status.HTTP_201_CREATED,
)
async def create_item_endpoint(
    section_id: int,
    payload: ItemCreateSchema,
    session: AsyncSession = Depends(get_db),
):
    """
    Создать задание в конце раздела.

    - **title**: Заголовок задания
    - **description**: Описание (опционально)
    - **type**: video / reading / exercise / homework / other
    - **status**: not_started / in_progress / completed
    """
    await get_section(session, section_id)

    task = await create_task(
        session,
        section_id=section_id,
        title=payload.title,
        description=payload.description,
        type=payload.type,
        status=payload.status,
    )
    logger.info(f"Задание создано с ID: {task.id}")
    return ItemRead.model_validate(task)
