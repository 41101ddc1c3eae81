# -*- coding: utf-8 -*-
"""
Импорт и экспорт учебных программ.
"""

from datetime import date

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from tora.clients.database_client import get_db
from tora.config.logger import configure_logger
from tora.config.settings import settings
from tora.service.transfer import (build_memory_pack_service,
                                   export_documents_service,
                                   import_curriculum_service)

from .schemas import CurriculumDocument, ImportResultSchema

router = APIRouter(tags=["📦 Импорт и экспорт"])
logger = configure_logger()


def _attachment(filename: str) -> dict:
    return {"Content-Disposition": f'attachment; filename="{filename}"'}


@router.post(
    "/import", response_model=ImportResultSchema, status_code=status.HTTP_201_CREATED
)
async def import_curriculum_endpoint(
    payload: CurriculumDocument,
    session: AsyncSession = Depends(get_db),
):
    """
    Импортировать учебную программу из JSON-документа.

    Порядок разделов и заданий берется из порядка элементов в массивах.
    """
    logger.debug(
        f"Импорт учебной программы '{payload.title}': {len(payload.sections)} разделов"
    )
    curriculum = await import_curriculum_service(session, payload)
    return ImportResultSchema(
        message="Учебная программа импортирована", id=curriculum.id
    )


@router.get("/export/json")
async def export_json_endpoint(session: AsyncSession = Depends(get_db)):
    """Выгрузить все учебные программы в виде JSON-документов."""
    documents = await export_documents_service(session)
    filename = f"{settings.export_prefix}-export-{date.today().isoformat()}.json"
    return JSONResponse(content=documents, headers=_attachment(filename))


@router.get("/export/report")
async def export_report_endpoint(session: AsyncSession = Depends(get_db)):
    """Выгрузить ZIP-архив с Markdown-отчетом о прогрессе и полной JSON-копией."""
    filename, content = await build_memory_pack_service(session)
    return Response(
        content=content,
        media_type="application/zip",
        headers=_attachment(filename),
    )
