# -*- coding: utf-8 -*-
"""
Конфигурация для Uvicorn с логами через loguru.
"""

import logging

from tora.config.logger import InterceptHandler
from tora.config.settings import settings

# Уровни перехватываемых логгеров; uvicorn.access заглушен, запросы пишет middleware
_INTERCEPTED_LEVELS = {
    "uvicorn": logging.INFO,
    "uvicorn.error": logging.INFO,
    "uvicorn.access": logging.WARNING,
    "fastapi": logging.INFO,
    "sqlalchemy.engine": logging.WARNING,
    "sqlalchemy.pool": logging.WARNING,
    "alembic": logging.INFO,
}


def setup_uvicorn_logging():
    """Перенаправляет логи uvicorn, FastAPI, SQLAlchemy и Alembic в loguru."""
    for name, level in _INTERCEPTED_LEVELS.items():
        std_logger = logging.getLogger(name)
        std_logger.handlers = [] if name == "uvicorn.access" else [InterceptHandler()]
        std_logger.propagate = False
        std_logger.setLevel(level)

    if settings.database_echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)


def get_uvicorn_config() -> dict:
    """Параметры запуска uvicorn из настроек приложения."""
    return {
        "app": "tora.main:app",
        "host": settings.app_host,
        "port": settings.app_port,
        "reload": settings.debug,
        "log_config": None,  # Отключаем стандартную конфигурацию логов
        "access_log": False,
    }


def run():
    """Точка входа консольной команды ``tora-server``."""
    import uvicorn

    setup_uvicorn_logging()
    uvicorn.run(**get_uvicorn_config())
