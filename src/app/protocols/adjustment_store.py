"""Protocolo do storage de registros de ajuste.

Interface leve (ABC) dependida pelos casos de uso. Implementacoes concretas
(SQL, Google Sheets, memoria) ficam em app/infra/stores/.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.domain.adjustment import AdjustmentRecord


class AdjustmentStoreProtocol(ABC):
    """Contrato de persistencia: inserir, apagar tudo e ler tudo.

    Todas as operacoes levantam ConfigurationError quando o destino do
    storage nao esta configurado, antes de qualquer conexao.
    """

    @abstractmethod
    async def insert_all(self, records: Sequence[AdjustmentRecord]) -> None:
        """Insere registros um a um, na ordem recebida, sem transacao unica.

        Raises:
            PersistenceError: Na primeira falha; registros anteriores
                permanecem gravados e os seguintes nao sao tentados.
        """

    @abstractmethod
    async def clear_all(self) -> int:
        """Apaga todos os registros e retorna quantos foram removidos."""

    @abstractmethod
    async def fetch_all(self) -> list[AdjustmentRecord]:
        """Retorna todos os registros, mais recentes (registered_at) primeiro."""

    def validate(self) -> list[str]:
        """Retorna erros de configuracao do backend (vazia = OK)."""
        return []
