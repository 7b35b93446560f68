"""Transporte de email via API da MailerSend."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.infra.email._http_transport import HttpEmailTransport

if TYPE_CHECKING:
    from app.protocols.email_transport import EmailMessage

MAILERSEND_API_URL = "https://api.mailersend.com/v1/email"


class MailerSendTransport(HttpEmailTransport):
    """POST /v1/email. O remetente precisa pertencer a um domínio verificado."""

    endpoint = MAILERSEND_API_URL
    provider = "mailersend"

    def build_payload(self, message: EmailMessage) -> dict[str, Any]:
        sender: dict[str, str] = {"email": message.from_email}
        if message.from_name:
            sender["name"] = message.from_name
        return {
            "from": sender,
            "to": [{"email": address} for address in message.to],
            "subject": message.subject,
            "html": message.html,
        }
