"""Stores — implementações concretas de persistência de ajustes.

Módulos disponíveis:
    - sql_adjustment_store: banco relacional via SQLAlchemy (PostgreSQL)
    - sheets_adjustment_store: planilha Google (revisão legada)
    - memory_stores: store em memória para desenvolvimento/testes
"""

from __future__ import annotations

from app.infra.stores.memory_stores import MemoryAdjustmentStore
from app.infra.stores.sheets_adjustment_store import SheetsAdjustmentStore
from app.infra.stores.sql_adjustment_store import SqlAdjustmentStore, build_adjustments_table

__all__ = [
    "MemoryAdjustmentStore",
    "SheetsAdjustmentStore",
    "SqlAdjustmentStore",
    "build_adjustments_table",
]
