# -*- coding: utf-8 -*-
"""
Удаление учебных программ.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from tora.clients.database_client import get_db
from tora.config.logger import configure_logger
from tora.repository.curriculums import delete_curriculum

router = APIRouter(tags=["📚 Учебные программы - 🗑️ Удаление"])
logger = configure_logger()


@router.delete("/{curriculum_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_curriculum_endpoint(
    curriculum_id: int,
    session: AsyncSession = Depends(get_db),
):
    """Удалить учебную программу вместе с разделами и заданиями."""
    await delete_curriculum(session, curriculum_id)
    logger.info(f"Учебная программа {curriculum_id} удалена")
