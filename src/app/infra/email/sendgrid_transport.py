"""Transporte de email via SendGrid Web API v3."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.infra.email._http_transport import HttpEmailTransport

if TYPE_CHECKING:
    from app.protocols.email_transport import EmailMessage

SENDGRID_API_URL = "https://api.sendgrid.com/v3/mail/send"


class SendGridTransport(HttpEmailTransport):
    """POST /v3/mail/send com uma personalization para todos os destinatários."""

    endpoint = SENDGRID_API_URL
    provider = "sendgrid"

    def build_payload(self, message: EmailMessage) -> dict[str, Any]:
        sender: dict[str, str] = {"email": message.from_email}
        if message.from_name:
            sender["name"] = message.from_name
        return {
            "personalizations": [{"to": [{"email": address} for address in message.to]}],
            "from": sender,
            "subject": message.subject,
            "content": [{"type": "text/html", "value": message.html}],
        }
