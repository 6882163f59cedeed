# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/__init__.py

Utilidades compartidas de la API.
"""

from .base_models import UTF8SafeModel
from .json_response import UTF8JSONResponse, json_response_utf8

__all__ = ["UTF8SafeModel", "UTF8JSONResponse", "json_response_utf8"]
