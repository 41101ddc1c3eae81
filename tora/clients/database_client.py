# -*- coding: utf-8 -*-
"""
Клиент для работы с базой данных (SQLAlchemy async).
"""
from pathlib import Path
from typing import AsyncGenerator

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (AsyncEngine, AsyncSession,
                                    async_sessionmaker, create_async_engine)

from tora.config.settings import settings
from tora.domain.models import Base


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """
    Включает PRAGMA foreign_keys для каждого нового SQLite-соединения.

    Без этого SQLite игнорирует ON DELETE CASCADE.
    """
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, _connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def _ensure_sqlite_directory(database_url: str) -> None:
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite" and url.database not in (None, "", ":memory:"):
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)


def build_engine(database_url: str, echo: bool = False, **kwargs) -> AsyncEngine:
    """Создает асинхронный движок с настройками под конкретный диалект."""
    _ensure_sqlite_directory(database_url)
    if not database_url.startswith("sqlite"):
        kwargs.setdefault("pool_pre_ping", True)  # Проверяем соединение перед использованием
        kwargs.setdefault("pool_recycle", 3600)  # Переподключаемся каждый час
    engine = create_async_engine(database_url, echo=echo, **kwargs)
    enable_sqlite_foreign_keys(engine)
    return engine


async_engine = build_engine(settings.database_url, echo=settings.database_echo)

# Создаем фабрику асинхронных сессий
AsyncSessionLocal = async_sessionmaker(
    bind=async_engine, class_=AsyncSession, expire_on_commit=False
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Предоставляет асинхронную сессию базы данных для внедрения зависимостей в FastAPI.

    Yields:
        AsyncSession: Активная сессия базы данных

    Raises:
        SQLAlchemyError: Ошибки подключения к базе данных
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def init_db(engine: AsyncEngine = async_engine) -> None:
    """
    Создает все таблицы, описанные в моделях.

    Raises:
        SQLAlchemyError: Ошибки при создании таблиц
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
