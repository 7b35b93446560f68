"""Modelos de dominio para ajustes de ponto.

O lote (SubmissionBatch) existe apenas durante a requisicao: chega no formato
do formulario do gestor, vira uma lista plana de AdjustmentRecord e e
descartado. AdjustmentRecord e a unidade de persistencia e de notificacao.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# Ordem de declaracao dos campos de AdjustmentRecord -> coluna persistida.
COLUMN_NAMES: dict[str, str] = {
    "registered_at": "data_registro",
    "branch": "filial",
    "manager_email": "email_gestor",
    "manager_name": "nome_gestor",
    "collaborator_name": "nome_colaborador",
    "adjustment_date": "data_ajuste",
    "adjusted_time": "horario_ajustado",
    "reason": "motivo",
}


class AdjustmentEntry(BaseModel):
    """Uma correcao de ponto (dia, horario e motivo) de um colaborador."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, coerce_numbers_to_str=True)

    date: str | None = Field(default=None, alias="data", description="Dia corrigido (YYYY-MM-DD).")
    time: str | None = Field(default=None, alias="horario", description="Horario ajustado.")
    reason: str | None = Field(default=None, alias="motivo", description="Justificativa.")


class CollaboratorGroup(BaseModel):
    """Ajustes de um mesmo colaborador dentro do lote."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, coerce_numbers_to_str=True)

    collaborator_name: str | None = Field(default=None, alias="nomeColaborador")
    adjustments: list[AdjustmentEntry] = Field(default_factory=list, alias="ajustes")


class SubmissionBatch(BaseModel):
    """Submissao de um gestor: um ou mais colaboradores com seus ajustes."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, coerce_numbers_to_str=True)

    manager_name: str | None = Field(default=None, alias="nomeGestor")
    manager_email: str | None = Field(default=None, alias="emailGestor")
    branch: str | None = Field(default=None, alias="filial")
    collaborator_groups: list[CollaboratorGroup] | None = Field(
        default=None,
        alias="ajustesMultiColaborador",
    )


class AdjustmentRecord(BaseModel):
    """Registro persistido de um ajuste. Imutavel apos criado."""

    model_config = ConfigDict(frozen=True)

    registered_at: str | None = None
    branch: str | None = None
    manager_email: str | None = None
    manager_name: str | None = None
    collaborator_name: str | None = None
    adjustment_date: str | None = None
    adjusted_time: str | None = None
    reason: str | None = None

    def to_row(self) -> dict[str, str | None]:
        """Retorna os valores indexados pelo nome da coluna persistida."""
        return {column: getattr(self, attr) for attr, column in COLUMN_NAMES.items()}

    @classmethod
    def from_row(cls, row: dict[str, object]) -> AdjustmentRecord:
        """Constroi o registro a partir de uma linha indexada por coluna."""
        values = {}
        for attr, column in COLUMN_NAMES.items():
            value = row.get(column)
            values[attr] = None if value is None else str(value)
        return cls(**values)


__all__ = [
    "COLUMN_NAMES",
    "AdjustmentEntry",
    "AdjustmentRecord",
    "CollaboratorGroup",
    "SubmissionBatch",
]
