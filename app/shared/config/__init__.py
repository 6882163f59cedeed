# -*- coding: utf-8 -*-
"""
backend/app/shared/config/__init__.py

Punto único de acceso a la configuración:
    from app.shared.config import get_settings

La instancia se crea en el primer uso (no al importar), para que los tests
puedan fijar PYTHON_ENV antes y limpiar la caché con get_settings.cache_clear().
"""

from .config_loader import get_settings
from .logging_config import setup_logging
from .settings_base import BaseAppSettings

__all__ = ["get_settings", "setup_logging", "BaseAppSettings"]
