"""Transporte de email via SMTP (smtplib).

Compatível com relays como smtp.sendgrid.net (usuário "apikey") ou
servidores corporativos. smtplib é síncrono; o envio roda em
asyncio.to_thread.
"""

from __future__ import annotations

import asyncio
import logging
import smtplib
from email.message import EmailMessage as MimeMessage
from email.utils import formataddr
from typing import TYPE_CHECKING

from utils.errors import NotificationError

if TYPE_CHECKING:
    from app.protocols.email_transport import EmailMessage

logger = logging.getLogger(__name__)


class SmtpTransport:
    """Envio SMTP com STARTTLS opcional e login quando há usuário."""

    def __init__(
        self,
        *,
        host: str,
        port: int = 587,
        username: str = "",
        password: str = "",
        use_tls: bool = True,
        timeout_seconds: float = 15.0,
    ) -> None:
        self._host = host
        self._port = port
        self._username = username
        self._password = password
        self._use_tls = use_tls
        self._timeout_seconds = timeout_seconds

    def validate(self) -> list[str]:
        if not self._host:
            return ["SMTP_HOST não configurado"]
        return []

    @staticmethod
    def build_mime(message: EmailMessage) -> MimeMessage:
        mime = MimeMessage()
        mime["From"] = formataddr((message.from_name, message.from_email)) if message.from_name else message.from_email
        mime["To"] = ", ".join(message.to)
        mime["Subject"] = message.subject
        mime.set_content("Este email requer um cliente com suporte a HTML.")
        mime.add_alternative(message.html, subtype="html")
        return mime

    def _send_sync(self, message: EmailMessage) -> None:
        mime = self.build_mime(message)
        with smtplib.SMTP(self._host, self._port, timeout=self._timeout_seconds) as client:
            if self._use_tls:
                client.starttls()
            if self._username:
                client.login(self._username, self._password)
            client.send_message(mime)

    async def send(self, message: EmailMessage) -> None:
        try:
            await asyncio.to_thread(self._send_sync, message)
        except (smtplib.SMTPException, OSError) as exc:
            logger.warning(
                "smtp_send_failed",
                extra={"host": self._host, "port": self._port, "error_type": type(exc).__name__},
            )
            raise NotificationError(f"Falha no envio SMTP: {exc}") from exc
