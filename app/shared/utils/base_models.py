# -*- coding: utf-8 -*-
"""
backend/app/shared/utils/base_models.py

Modelo base personalizado para los esquemas Pydantic de la API de Hitos.

Incluye:
- Eliminación automática de espacios en campos de texto (`str_strip_whitespace = True`)
- Modo de atributos activado para validar directo desde entidades (`from_attributes = True`)
- Reexportación de `Field`

Autor: Ixchel Beristain
Fecha: 31/05/2025
Actualizado: 2026-02-12 - Base común para schemas de hitos
"""

from pydantic import BaseModel, ConfigDict, Field


class UTF8SafeModel(BaseModel):
    """Modelo base: strings recortados y lectura desde atributos (dataclasses de dominio)."""
    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


__all__ = ["UTF8SafeModel", "Field"]
# Fin del archivo base_models.py
