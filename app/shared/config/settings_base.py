# -*- coding: utf-8 -*-
"""
backend/app/shared/config/settings_base.py

Base de configuración (Pydantic v2) para el backend de Hitos.
- Esta clase NO instancia singletons ni resuelve .env; eso lo hace config_loader.
- Es la base para settings_dev.py, settings_testing.py y settings_prod.py.

Autor: Ixchel Beristain
Fecha: 24/10/2025
Actualizado: 2026-02-11 - repositorio de hitos (memory|sql)
"""

from typing import Literal, Optional

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Tipos de entorno soportados
EnvName = Literal["development", "test", "production"]
RepositoryBackend = Literal["memory", "sql"]


class BaseAppSettings(BaseSettings):
    # =========================
    # Núcleo de la aplicación
    # =========================
    python_env: EnvName = Field(default="development", validation_alias="PYTHON_ENV")
    app_name: str = Field(default="Hitos", validation_alias="APP_NAME")
    app_version: str = Field(default="0.1.0", validation_alias="APP_VERSION")
    app_host: str = Field(default="0.0.0.0", validation_alias="APP_HOST")
    app_port: int = Field(default=8000, validation_alias="APP_PORT")
    debug: bool = Field(default=False, validation_alias="DEBUG")

    # =========================
    # Logging
    # =========================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_format: Literal["json", "pretty", "plain"] = Field(default="pretty", validation_alias="LOG_FORMAT")

    # =========================
    # Persistencia de grupos/hitos
    # =========================
    milestones_repository: RepositoryBackend = Field(default="memory", validation_alias="MILESTONES_REPOSITORY")
    db_url: str = Field(default="sqlite:///./hitos.db", validation_alias="DB_URL")
    db_echo_sql: bool = Field(default=False, validation_alias="DB_ECHO_SQL")
    db_pool_pre_ping: bool = Field(default=True, validation_alias="DB_POOL_PRE_PING")

    @computed_field  # type: ignore[misc]
    @property
    def database_url(self) -> str:
        """
        URL de conexión para SQLAlchemy (driver síncrono).
        Normaliza el esquema legacy postgres:// → postgresql+psycopg://
        """
        url = self.db_url
        if url.startswith("postgres://"):
            url = url.replace("postgres://", "postgresql+psycopg://", 1)
        return url

    # =========================
    # CORS / Frontend
    # =========================
    allowed_origins: str = Field(default="*", validation_alias="CORS_ORIGINS")

    # =========================
    # Observabilidad
    # =========================
    metrics_enabled: bool = Field(default=True, validation_alias="METRICS_ENABLED")

    # =========================
    # Contexto de actor (lo provee la capa de auth externa)
    # =========================
    actor_role_header: str = Field(default="X-Actor-Role", validation_alias="ACTOR_ROLE_HEADER")

    # ===== Helpers de entorno =====
    @computed_field  # type: ignore[misc]
    @property
    def is_dev(self) -> bool:
        return self.python_env == "development"

    @computed_field  # type: ignore[misc]
    @property
    def is_test(self) -> bool:
        return self.python_env == "test"

    @computed_field  # type: ignore[misc]
    @property
    def is_prod(self) -> bool:
        return self.python_env == "production"

    @field_validator("actor_role_header")
    @classmethod
    def _header_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("ACTOR_ROLE_HEADER no puede estar vacío")
        return v

    # ===== Utilidad para normalizar CORS =====
    def get_cors_origins(self) -> list[str]:
        """Convierte allowed_origins en lista procesable para CORS middleware."""
        if not self.allowed_origins or self.allowed_origins == "*":
            return ["*"]
        # Parsea lista separada por comas, limpia comillas
        return [o.strip().strip('"').strip("'") for o in self.allowed_origins.split(",") if o.strip()]

    def _security_checks(self) -> None:
        """Validaciones mínimas de coherencia por entorno."""
        if self.is_prod and self.milestones_repository == "memory":
            raise ValueError(
                "MILESTONES_REPOSITORY=memory no es válido en producción: "
                "los grupos se perderían al reiniciar"
            )
        if self.is_prod and self.database_url.startswith("sqlite"):
            raise ValueError("DB_URL apunta a SQLite en producción")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


__all__ = ["BaseAppSettings", "EnvName", "RepositoryBackend"]
# Fin del archivo backend/app/shared/config/settings_base.py
