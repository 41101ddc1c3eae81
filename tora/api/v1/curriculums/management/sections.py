# -*- coding: utf-8 -*-
"""
Разделы внутри учебной программы.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from tora.api.v1.sections.schemas import SectionCreateSchema
from tora.api.v1.shared.schemas import SectionRead
from tora.clients.database_client import get_db
from tora.config.logger import configure_logger
from tora.repository.curriculums import get_curriculum
from tora.repository.sections import create_section

router = APIRouter(tags=["📚 Учебные программы - 📖 Разделы"])
logger = configure_logger()


@router.post(
    "/{curriculum_id}/sections",
    response_model=SectionRead,
    status_code=status.HTTP_201_CREATED,
)
async def create_section_endpoint(
    curriculum_id: int,
    payload: SectionCreateSchema,
    session: AsyncSession = Depends(get_db),
):
    """
    Создать раздел в конце учебной программы.

    - **title**: Заголовок раздела
    - **description**: Описание раздела (опционально)
    """
    await get_curriculum(session, curriculum_id)

    section = await create_section(
        session,
        curriculum_id=curriculum_id,
        title=payload.title,
        description=payload.description,
    )
    return SectionRead.model_validate(section)
