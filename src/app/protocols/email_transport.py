"""Protocolo de transporte de email.

Qualquer provider (SMTP, API transacional) que envie EmailMessage e
intercambiavel.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class EmailMessage:
    """Email HTML pronto para envio."""

    from_email: str
    to: list[str] = field(default_factory=list)
    subject: str = ""
    html: str = ""
    from_name: str = ""


@runtime_checkable
class EmailTransportProtocol(Protocol):
    """Contrato minimo para envio de email."""

    async def send(self, message: EmailMessage) -> None:
        """Envia a mensagem.

        Raises:
            NotificationError: Se o provider recusar ou estiver indisponivel.
        """
        ...

    def validate(self) -> list[str]:
        """Retorna erros de configuracao do transporte (vazia = OK)."""
        ...
