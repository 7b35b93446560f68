"""Stores em memória — apenas para desenvolvimento e testes.

ATENÇÃO: Não usar em staging/production. Sem persistência entre reinícios.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.protocols.adjustment_store import AdjustmentStoreProtocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.domain.adjustment import AdjustmentRecord


class MemoryAdjustmentStore(AdjustmentStoreProtocol):
    """Store de ajustes em memória — apenas para dev/test."""

    def __init__(self) -> None:
        self._records: list[AdjustmentRecord] = []

    async def insert_all(self, records: Sequence[AdjustmentRecord]) -> None:
        """Append dos registros na ordem recebida."""
        self._records.extend(records)

    async def clear_all(self) -> int:
        """Esvazia o store e retorna quantos registros havia."""
        count = len(self._records)
        self._records = []
        return count

    async def fetch_all(self) -> list[AdjustmentRecord]:
        """Mais recentes primeiro; empates na ordem de inserção."""
        return sorted(self._records, key=lambda record: record.registered_at or "", reverse=True)

    def get_records(self) -> list[AdjustmentRecord]:
        """Retorna os registros na ordem de inserção (apenas para testes)."""
        return list(self._records)
