# -*- coding: utf-8 -*-
"""
Управление структурой учебной программы.
"""

from .reorder import router as reorder_router
from .sections import router as sections_router

__all__ = ["reorder_router", "sections_router"]
