# -*- coding: utf-8 -*-
"""
backend/app/shared/__init__.py

Infraestructura compartida del backend de Hitos: configuración, base de
datos, helpers de métricas y utilidades de respuesta JSON.

Autor: Ixchel Beristain
Fecha: 24/10/2025
"""
