"""Transportes de email — implementações de EmailTransportProtocol.

Módulos disponíveis:
    - mailersend_transport: API HTTP da MailerSend
    - sendgrid_transport: SendGrid Web API v3
    - smtp_transport: SMTP via smtplib
    - memory_transport: em memória para desenvolvimento/testes
"""

from __future__ import annotations

from app.infra.email.mailersend_transport import MailerSendTransport
from app.infra.email.memory_transport import MemoryEmailTransport
from app.infra.email.sendgrid_transport import SendGridTransport
from app.infra.email.smtp_transport import SmtpTransport

__all__ = [
    "MailerSendTransport",
    "MemoryEmailTransport",
    "SendGridTransport",
    "SmtpTransport",
]
