"""Testes do SmtpTransport com smtplib.SMTP mockado."""

from __future__ import annotations

import smtplib
from unittest.mock import MagicMock

import pytest

from app.infra.email import smtp_transport
from app.infra.email.smtp_transport import SmtpTransport
from app.protocols import EmailMessage
from utils.errors import NotificationError

MESSAGE = EmailMessage(
    from_email="no-reply@empresa.com",
    from_name="Ajuste de Ponto",
    to=["rh@empresa.com", "ana@empresa.com"],
    subject="ADJUSTMENT - SP01 - 1 RECORD(S)",
    html="<p>Olá</p>",
)


@pytest.fixture
def smtp_client(monkeypatch: pytest.MonkeyPatch) -> MagicMock:
    client = MagicMock()
    smtp_class = MagicMock()
    smtp_class.return_value.__enter__.return_value = client
    monkeypatch.setattr(smtp_transport.smtplib, "SMTP", smtp_class)
    client.smtp_class = smtp_class
    return client


class TestSmtpTransport:
    """Testes do SmtpTransport."""

    @pytest.mark.asyncio
    async def test_starttls_login_and_send(self, smtp_client: MagicMock) -> None:
        transport = SmtpTransport(host="smtp.sendgrid.net", username="apikey", password="secret")

        await transport.send(MESSAGE)

        smtp_client.smtp_class.assert_called_once_with("smtp.sendgrid.net", 587, timeout=15.0)
        smtp_client.starttls.assert_called_once()
        smtp_client.login.assert_called_once_with("apikey", "secret")
        mime = smtp_client.send_message.call_args.args[0]
        assert mime["To"] == "rh@empresa.com, ana@empresa.com"
        assert mime["Subject"] == "ADJUSTMENT - SP01 - 1 RECORD(S)"
        assert "Ajuste de Ponto" in mime["From"]

    @pytest.mark.asyncio
    async def test_no_tls_no_login(self, smtp_client: MagicMock) -> None:
        transport = SmtpTransport(host="localhost", port=25, use_tls=False)
        await transport.send(MESSAGE)
        smtp_client.starttls.assert_not_called()
        smtp_client.login.assert_not_called()

    @pytest.mark.asyncio
    async def test_smtp_error_raises_notification_error(self, smtp_client: MagicMock) -> None:
        smtp_client.send_message.side_effect = smtplib.SMTPRecipientsRefused({})
        with pytest.raises(NotificationError, match="SMTP"):
            await SmtpTransport(host="localhost").send(MESSAGE)

    def test_html_alternative_in_mime(self) -> None:
        mime = SmtpTransport.build_mime(MESSAGE)
        html_part = mime.get_body(preferencelist=("html",))
        assert "<p>Olá</p>" in html_part.get_content()

    def test_validate_requires_host(self) -> None:
        assert SmtpTransport(host="").validate() == ["SMTP_HOST não configurado"]
