# -*- coding: utf-8 -*-
"""
backend/app/modules/milestones/repositories/__init__.py

Implementaciones de la frontera de persistencia de grupos:
- TeamRepository        : protocolo consumido por el núcleo
- InMemoryTeamRepository: desarrollo y tests
- SqlTeamRepository     : SQLAlchemy (SQLite / PostgreSQL)
"""

from .base import TeamRepository
from .inmemory import InMemoryTeamRepository
from .sql_repository import SqlTeamRepository

__all__ = ["TeamRepository", "InMemoryTeamRepository", "SqlTeamRepository"]
