"""Achatamento do lote do gestor em registros de ajuste (sem IO).

Regras:
- Um unico `registered_at` por chamada, compartilhado por todos os registros.
- Lote sem grupos de colaboradores, ou sem nenhum ajuste, e rejeitado.
- Email, data e horario NAO sao validados nem corrigidos: seguem como vieram.
"""

from __future__ import annotations

from datetime import datetime
from zoneinfo import ZoneInfo

from app.domain.adjustment import AdjustmentRecord, SubmissionBatch
from utils.errors import ValidationError

REGISTRATION_TIMEZONE = ZoneInfo("America/Sao_Paulo")
REGISTRATION_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_registered_at(moment: datetime) -> str:
    """Renderiza o instante no fuso de Sao Paulo (YYYY-MM-DD HH:MM:SS).

    Datetimes sem tzinfo sao tratados como ja estando no fuso de registro.
    """
    if moment.tzinfo is not None:
        moment = moment.astimezone(REGISTRATION_TIMEZONE)
    return moment.strftime(REGISTRATION_FORMAT)


def normalize_batch(
    batch: SubmissionBatch,
    *,
    now: datetime | None = None,
) -> list[AdjustmentRecord]:
    """Converte o lote aninhado em lista plana de AdjustmentRecord.

    Args:
        batch: Lote recebido do formulario.
        now: Instante de registro (default: relogio atual).

    Returns:
        Registros na ordem colaborador -> ajuste do lote.

    Raises:
        ValidationError: Se o lote nao contem nenhum ajuste.
    """
    if not batch.collaborator_groups:
        raise ValidationError("Nenhum ajuste informado: ajustesMultiColaborador está vazio.")

    registered_at = format_registered_at(now or datetime.now(REGISTRATION_TIMEZONE))

    records = [
        AdjustmentRecord(
            registered_at=registered_at,
            branch=batch.branch,
            manager_email=batch.manager_email,
            manager_name=batch.manager_name,
            collaborator_name=group.collaborator_name,
            adjustment_date=entry.date,
            adjusted_time=entry.time,
            reason=entry.reason,
        )
        for group in batch.collaborator_groups
        for entry in group.adjustments
    ]

    if not records:
        raise ValidationError("Nenhum ajuste informado para os colaboradores do lote.")

    return records
