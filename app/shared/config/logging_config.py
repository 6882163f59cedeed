# -*- coding: utf-8 -*-
"""
backend/app/shared/config/logging_config.py

Configuración centralizada de logging para el backend de Hitos.
Soporta formato plain/pretty (desarrollo) y json (producción, python-json-logger).

Loggers del módulo de hitos:
- milestones.facade     : comandos despachados
- milestones.review     : lotes de decisiones aplicados / rechazados
- milestones.repository : escrituras y conflictos de versión
- milestones.metrics    : registro de collectors Prometheus

Autor: Ixchel Beristain
Fecha: 24/10/2025
"""

import logging.config
from typing import Literal

JSON_FORMATTER_PATH = "pythonjsonlogger.json.JsonFormatter"


def setup_logging(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO",
    fmt: Literal["plain", "pretty", "json"] = "plain",
) -> None:
    """
    Configura el sistema de logging de la aplicación.

    Args:
        level: Nivel de logging (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        fmt: Formato de salida (plain, pretty, json)

    Ejemplos:
        >>> setup_logging("INFO", "plain")
        >>> setup_logging("WARNING", "json")
    """
    use_json = fmt == "json"

    formatters = {
        "default": {
            "format": "%(levelname)s [%(name)s]: %(message)s",
        },
        "pretty": {
            "format": "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
        "json": {
            "()": JSON_FORMATTER_PATH,
            "format": "%(asctime)s %(name)s %(levelname)s %(message)s",
        },
    }

    if use_json:
        formatter = "json"
    elif fmt == "pretty":
        formatter = "pretty"
    else:
        formatter = "default"

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": formatters,
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": formatter,
                "stream": "ext://sys.stdout",
            }
        },
        "loggers": {
            # SQL echo solo si DB_ECHO_SQL lo pide (engine.echo)
            "sqlalchemy.engine": {"level": "WARNING"},
        },
        "root": {
            "handlers": ["console"],
            "level": level.upper(),
        },
    }

    logging.config.dictConfig(logging_config)


__all__ = ["setup_logging"]
# Fin del archivo backend/app/shared/config/logging_config.py
