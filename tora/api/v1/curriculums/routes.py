# -*- coding: utf-8 -*-
"""
Модульные маршруты для учебных программ.
"""

from fastapi import APIRouter

from .crud import create_router, delete_router, read_router, update_router
from .management import reorder_router, sections_router

PREFIX = "/curriculums"

# Создаем основной роутер
router = APIRouter()

# Подключаем CRUD операции (чтение первым: /dashboard раньше /{curriculum_id})
router.include_router(read_router, prefix=PREFIX)
router.include_router(create_router, prefix=PREFIX)
router.include_router(update_router, prefix=PREFIX)
router.include_router(delete_router, prefix=PREFIX)

# Подключаем управление структурой
router.include_router(reorder_router, prefix=PREFIX)
router.include_router(sections_router, prefix=PREFIX)
