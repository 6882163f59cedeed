# -*- coding: utf-8 -*-
"""
backend/app/core/logging.py

Fachada de logging: configura el sistema a partir de los settings activos
(LOG_LEVEL / LOG_FORMAT) o de valores explícitos.

Autor: Ixchel Beristain
Fecha: 2025-11-17
"""

from typing import Literal, Optional

from app.shared.config.logging_config import setup_logging as _setup_logging


def setup_logging(
    level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = None,
    fmt: Optional[Literal["plain", "pretty", "json"]] = None,
) -> None:
    """
    Configura el logging de la aplicación.

    Sin argumentos toma level/fmt de get_settings().
    """
    if level is None or fmt is None:
        from app.core.settings import get_settings

        settings = get_settings()
        level = level or settings.log_level
        fmt = fmt or settings.log_format
    _setup_logging(level=level, fmt=fmt)

# Fin del archivo backend/app/core/logging.py
