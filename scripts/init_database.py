#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Скрипт инициализации базы данных.

Выполняет:
1. Применение миграций Alembic
2. Проверку подключения к базе данных
"""

import asyncio
import subprocess
import sys
from pathlib import Path

from sqlalchemy import text

from tora.clients.database_client import async_engine
from tora.config.logger import configure_logger

logger = configure_logger()

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def apply_migrations() -> None:
    """Применить миграции до последней ревизии."""
    result = subprocess.run(
        ["alembic", "-c", "alembic.ini", "upgrade", "head"],
        capture_output=True,
        text=True,
        cwd=PROJECT_ROOT,
    )
    if result.returncode != 0:
        logger.error(f"❌ Ошибка при применении миграций: {result.stderr}")
        logger.debug(f"stdout: {result.stdout}")
        sys.exit(1)
    logger.info("✅ Миграции применены успешно")


async def check_connection() -> None:
    """Проверить, что база данных отвечает."""
    async with async_engine.connect() as conn:
        await conn.execute(text("SELECT 1"))
    await async_engine.dispose()
    logger.info(f"✅ База данных доступна: {async_engine.url.render_as_string()}")


def main() -> None:
    logger.info("🚀 Начинаем инициализацию базы данных...")
    apply_migrations()
    asyncio.run(check_connection())
    logger.info("🎉 Инициализация базы данных завершена успешно!")


if __name__ == "__main__":
    main()
