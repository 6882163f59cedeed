# -*- coding: utf-8 -*-
"""
backend/app/__init__.py

Inicializador del paquete principal 'app' del backend de Hitos.
Permite importar los módulos internos como 'app.*' cuando la carpeta
'backend' se incluye en PYTHONPATH.

Autor: Ixchel Beristain
Fecha: 2025-11-07
"""

# Fin del archivo backend/app/__init__.py
