"""Use case de limpeza total dos registros de ajuste."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.protocols.adjustment_store import AdjustmentStoreProtocol

logger = logging.getLogger(__name__)


class ClearAdjustmentsUseCase:
    """Apaga todos os registros e retorna quantos foram removidos."""

    def __init__(self, *, store: AdjustmentStoreProtocol) -> None:
        self._store = store

    async def execute(self) -> int:
        count = await self._store.clear_all()
        logger.info("adjustments_cleared", extra={"record_count": count})
        return count
