# -*- coding: utf-8 -*-
"""
Точка входа FastAPI-приложения Tora.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text

from tora.api.v1.curriculums.routes import router as curriculums_router
from tora.api.v1.items.routes import router as items_router
from tora.api.v1.sections.routes import router as sections_router
from tora.api.v1.transfer.routes import router as transfer_router
from tora.clients.database_client import async_engine, init_db
from tora.config.logger import configure_logger, get_system_logger
from tora.config.settings import settings
from tora.config.uvicorn_config import setup_uvicorn_logging

app = FastAPI(
    title="Tora API",
    description="API для учета прохождения учебных программ",
    version="0.1.0",
    docs_url="/api/v1/docs",
    redoc_url="/api/v1/redoc",
    openapi_url="/api/v1/openapi.json",
    openapi_tags=[
        {"name": "📚 Учебные программы - ➕ Создание", "description": "Создание учебных программ"},
        {"name": "📚 Учебные программы - 📖 Чтение", "description": "Списки, дашборд и детальные карточки"},
        {"name": "📚 Учебные программы - ✏️ Обновление", "description": "Частичное обновление программ"},
        {"name": "📚 Учебные программы - 🗑️ Удаление", "description": "Каскадное удаление программ"},
        {"name": "📚 Учебные программы - 🔀 Порядок", "description": "Пакетная перестановка разделов и заданий"},
        {"name": "📚 Учебные программы - 📖 Разделы", "description": "Добавление разделов в программу"},
        {"name": "📖 Разделы", "description": "Управление разделами и их заданиями"},
        {"name": "📝 Задания", "description": "Управление заданиями и их статусами"},
        {"name": "📦 Импорт и экспорт", "description": "JSON-документы и ZIP-архив с отчетом"},
    ],
)

# Настройка CORS из настроек
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_origins(),
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.get_cors_methods(),
    allow_headers=settings.get_cors_headers(),
)

logger = configure_logger()


# Middleware для логирования всех запросов
@app.middleware("http")
async def log_all_requests(request, call_next):
    if request.url.path.startswith("/api/"):
        logger.info(f"🌐 API запрос: {request.method} {request.url.path}")

    try:
        response = await call_next(request)

        if request.url.path.startswith("/api/"):
            if response.status_code >= 400:
                logger.warning(
                    f"❌ API ошибка: {request.method} {request.url.path} → {response.status_code}"
                )
            else:
                logger.info(
                    f"✅ API ответ: {request.method} {request.url.path} → {response.status_code}"
                )

        return response

    except Exception as e:
        if request.url.path.startswith("/api/"):
            logger.error(
                f"💥 Критическая ошибка API: {request.method} {request.url.path}"
            )
            logger.exception(f"Детали ошибки: {str(e)[:1000]}")
        raise


app.include_router(curriculums_router, prefix="/api/v1")
app.include_router(sections_router, prefix="/api/v1")
app.include_router(items_router, prefix="/api/v1")
app.include_router(transfer_router, prefix="/api/v1")


@app.on_event("startup")
async def startup_event():
    setup_uvicorn_logging()
    system_logger = get_system_logger()
    system_logger.info(f"🚀 Запуск Tora API ({settings.get_config_source()})")

    if settings.auto_migrate:
        await init_db()
        logger.info("✅ Таблицы базы данных проверены")

    # Проверяем подключение к базе данных
    try:
        async with async_engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        logger.info(f"✅ База данных подключена: {async_engine.url.render_as_string()}")
    except Exception as e:
        logger.error(f"❌ Ошибка подключения к базе данных: {e}")
        raise

    system_logger.info("🎉 Все сервисы готовы к работе!")


@app.on_event("shutdown")
async def shutdown_event():
    """Обработчик завершения приложения"""
    logger.info("🛑 Завершение работы Tora API")
    await async_engine.dispose()


@app.get("/api/v1")
async def api_root():
    """Корневой эндпоинт API."""
    return {"message": "Tora API работает", "version": app.version}


@app.get("/api/v1/health")
async def api_health():
    """Проверка живости приложения."""
    return {"status": "ok"}
