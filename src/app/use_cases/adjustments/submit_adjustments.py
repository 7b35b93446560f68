"""Use case de registro de um lote de ajustes.

Fluxo:
    1. Normaliza o lote em registros planos (ValidationError -> sem efeitos)
    2. Garante configuração de envio antes de qualquer IO
    3. Persiste todos os registros (PersistenceError pode deixar prefixo gravado)
    4. Notifica RH e gestor (best-effort)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from app.services.adjustment_normalizer import normalize_batch

if TYPE_CHECKING:
    from app.domain.adjustment import AdjustmentRecord, SubmissionBatch
    from app.protocols.adjustment_store import AdjustmentStoreProtocol
    from app.services.adjustment_notifier import AdjustmentNotifier

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SubmissionResult:
    """Resultado do registro de um lote."""

    records: list[AdjustmentRecord]
    notified: bool

    @property
    def count(self) -> int:
        return len(self.records)


class SubmitAdjustmentsUseCase:
    """Registra o lote e envia o resumo por email."""

    def __init__(
        self,
        *,
        store: AdjustmentStoreProtocol,
        notifier: AdjustmentNotifier,
    ) -> None:
        self._store = store
        self._notifier = notifier

    async def execute(
        self,
        batch: SubmissionBatch,
        *,
        now: datetime | None = None,
    ) -> SubmissionResult:
        """Executa o fluxo completo de registro.

        Raises:
            ValidationError: Lote sem ajustes.
            ConfigurationError: Storage ou email sem configuração.
            PersistenceError: Falha ao gravar (registros anteriores permanecem).
        """
        records = normalize_batch(batch, now=now)
        self._notifier.ensure_configured()

        await self._store.insert_all(records)
        logger.info(
            "adjustments_registered",
            extra={"record_count": len(records), "branch_present": bool(batch.branch)},
        )

        notified = await self._notifier.notify(records, batch.manager_email, batch.manager_name)
        return SubmissionResult(records=records, notified=notified)
