# -*- coding: utf-8 -*-
"""
backend/app/modules/milestones/__init__.py

Módulo de hitos (ciclo de vida y agregación de progreso por grupo).

Este módulo gestiona:
- Propuesta y asignación directa de hitos por fase
- Revisión docente de propuestas y de entregas (lotes todo-o-nada)
- Autoservicio del grupo (iniciar, enviar a revisión, reenviar)
- Progreso derivado y etiqueta compuesta del grupo
- Tableros Kanban por grupo y tablero global docente

Autor: Ixchel Beristain
Fecha: 2026-02-09
"""

# Paquete liviano: no importes modelos aquí (para no disparar mapeos al importar enums).

__all__ = []
# Fin del archivo
