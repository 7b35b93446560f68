"""Use case de exportação dos registros em CSV."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING

from app.services.csv_exporter import build_export_filename, to_csv

if TYPE_CHECKING:
    from app.protocols.adjustment_store import AdjustmentStoreProtocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CsvExport:
    """Conteúdo e nome do arquivo de exportação."""

    filename: str
    content: str
    record_count: int


class ExportAdjustmentsUseCase:
    """Lê todos os registros (mais recentes primeiro) e gera o CSV."""

    def __init__(self, *, store: AdjustmentStoreProtocol, filename_prefix: str) -> None:
        self._store = store
        self._filename_prefix = filename_prefix

    async def execute(self, *, today: date | None = None) -> CsvExport:
        records = await self._store.fetch_all()
        logger.info("adjustments_exported", extra={"record_count": len(records)})
        return CsvExport(
            filename=build_export_filename(self._filename_prefix, today),
            content=to_csv(records),
            record_count=len(records),
        )
