# -*- coding: utf-8 -*-
"""
backend/app/core/settings.py

Fachada de configuración del backend de Hitos.
Reexpone la carga de settings (Pydantic v2) definida en `app.shared.config`.

Autor: Ixchel Beristain
Fecha: 2025-11-17
"""

from typing import cast

from app.shared.config.config_loader import get_settings as _get_settings
from app.shared.config.settings_base import BaseAppSettings


def get_settings() -> BaseAppSettings:
    """
    Devuelve la configuración global (según PYTHON_ENV).

    La instancia está cacheada; los tests limpian la caché con
    `app.shared.config.get_settings.cache_clear()`.
    """
    return cast(BaseAppSettings, _get_settings())

# Fin del archivo backend/app/core/settings.py
