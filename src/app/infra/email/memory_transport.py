"""Transporte em memória — apenas para desenvolvimento e testes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from utils.errors import NotificationError

if TYPE_CHECKING:
    from app.protocols.email_transport import EmailMessage


class MemoryEmailTransport:
    """Guarda as mensagens enviadas; `fail_with` simula indisponibilidade."""

    def __init__(self, fail_with: str | None = None) -> None:
        self.sent: list[EmailMessage] = []
        self._fail_with = fail_with

    def validate(self) -> list[str]:
        return []

    async def send(self, message: EmailMessage) -> None:
        if self._fail_with is not None:
            raise NotificationError(self._fail_with)
        self.sent.append(message)
