# -*- coding: utf-8 -*-
"""
tora/config/settings.py
~~~~~~~~~~~~~~~~~~~~~~~
Конфигурация настроек приложения с использованием Pydantic.

Этот модуль загружает конфигурацию из .env файла, предоставляя централизованную
систему управления настройками для всех окружений.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Корень проекта (каталог с pyproject.toml)
BASE_DIR = Path(__file__).resolve().parent.parent.parent

ENV_PATH = (BASE_DIR / ".env").resolve()

# Приоритет: 1) переменные окружения, 2) .env файл в корне проекта


class Settings(BaseSettings):
    """Настройки приложения, загружаемые из .env файла."""

    model_config = SettingsConfigDict(
        env_file=ENV_PATH if ENV_PATH.exists() else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Конфигурация базы данных
    database_url: str = "sqlite+aiosqlite:///./data/tora.db"
    database_echo: bool = False

    # Конфигурация приложения
    app_host: str = "0.0.0.0"
    app_port: int = 3001
    # Внешний порт фронтенда
    frontend_port: int | None = None

    # Конфигурация логирования
    log_level: str = "INFO"
    log_file: str | None = None
    debug: bool = False

    # Создавать таблицы при старте
    auto_migrate: bool = True

    # Конфигурация CORS
    cors_allow_origins: str = ""
    cors_allow_credentials: bool = True
    cors_allow_methods: str = "GET,POST,PUT,PATCH,DELETE,OPTIONS"
    cors_allow_headers: str = "Content-Type"

    # Проверять, что новые позиции образуют перестановку 0..n-1
    reorder_strict_permutation: bool = False

    # Префикс имен файлов экспорта
    export_prefix: str = "tora"

    def get_allowed_origins(self) -> list[str]:
        """Формирует список разрешённых origins для CORS.
        Приоритет: явные cors_allow_origins -> localhost с портом фронтенда.
        """
        if self.cors_allow_origins:
            return [
                origin.strip()
                for origin in self.cors_allow_origins.split(",")
                if origin.strip()
            ]

        port = self.frontend_port or 5173
        return [
            f"http://localhost:{port}",
            f"http://127.0.0.1:{port}",
        ]

    def get_cors_methods(self) -> list[str]:
        """Возвращает список разрешённых HTTP методов для CORS."""
        if self.cors_allow_methods == "*":
            return ["*"]
        return [
            method.strip()
            for method in self.cors_allow_methods.split(",")
            if method.strip()
        ]

    def get_cors_headers(self) -> list[str]:
        """Возвращает список разрешённых заголовков для CORS."""
        if self.cors_allow_headers == "*":
            return ["*"]
        return [
            header.strip()
            for header in self.cors_allow_headers.split(",")
            if header.strip()
        ]

    def get_config_source(self) -> str:
        """Возвращает информацию об источнике конфигурации для отладки."""
        if ENV_PATH.exists():
            return f"env file: {ENV_PATH}"
        return "environment variables only"


settings = Settings()
