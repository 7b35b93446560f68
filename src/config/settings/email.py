"""Settings do envio de emails de notificação.

Providers suportados:
- mailersend: API HTTP da MailerSend (padrão)
- sendgrid: API HTTP v3 da SendGrid
- smtp: servidor SMTP qualquer (ex: smtp.sendgrid.net, Gmail)
- memory: apenas desenvolvimento e testes
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

VALID_EMAIL_PROVIDERS = ("mailersend", "sendgrid", "smtp", "memory")

DEFAULT_SUBJECT_TEMPLATE = "ADJUSTMENT - {branch} - {count} RECORD(S)"


@dataclass(frozen=True)
class EmailSettings:
    """Configurações de email.

    Attributes:
        provider: Provider de envio (mailersend|sendgrid|smtp|memory)
        api_key: Chave de API do provider HTTP
        from_email: Remetente verificado no provider
        from_name: Nome exibido do remetente
        hr_email: Destinatário fixo do RH (RH_EMAIL)
        subject_template: Template do assunto ({branch}, {count})
        request_timeout_seconds: Timeout das chamadas HTTP
        smtp_host: Host do servidor SMTP
        smtp_port: Porta do servidor SMTP
        smtp_username: Usuário SMTP
        smtp_password: Senha SMTP
        smtp_use_tls: Usar STARTTLS
    """

    provider: str = "mailersend"
    api_key: str = ""
    from_email: str = ""
    from_name: str = "Ajuste de Ponto"
    hr_email: str = ""
    subject_template: str = DEFAULT_SUBJECT_TEMPLATE
    request_timeout_seconds: float = 15.0

    smtp_host: str = ""
    smtp_port: int = 587
    smtp_username: str = ""
    smtp_password: str = ""
    smtp_use_tls: bool = True

    def validate(self) -> list[str]:
        """Valida configurações mínimas do provider selecionado."""
        errors: list[str] = []

        if self.provider not in VALID_EMAIL_PROVIDERS:
            errors.append(f"EMAIL_PROVIDER inválido: {self.provider}")
            return errors

        if not self.hr_email:
            errors.append("RH_EMAIL não configurado")

        if not self.from_email:
            errors.append("EMAIL_FROM não configurado")

        if self.provider in ("mailersend", "sendgrid") and not self.api_key:
            errors.append("EMAIL_API_KEY não configurada")

        if self.provider == "smtp" and not self.smtp_host:
            errors.append("SMTP_HOST não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("EMAIL_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_email_from_env() -> EmailSettings:
    """Carrega EmailSettings de variáveis de ambiente."""
    return EmailSettings(
        provider=os.getenv("EMAIL_PROVIDER", "mailersend").lower(),
        api_key=os.getenv("EMAIL_API_KEY", ""),
        from_email=os.getenv("EMAIL_FROM", ""),
        from_name=os.getenv("EMAIL_FROM_NAME", "Ajuste de Ponto"),
        hr_email=os.getenv("RH_EMAIL", ""),
        subject_template=os.getenv("EMAIL_SUBJECT_TEMPLATE", DEFAULT_SUBJECT_TEMPLATE),
        request_timeout_seconds=float(os.getenv("EMAIL_REQUEST_TIMEOUT_SECONDS", "15")),
        smtp_host=os.getenv("SMTP_HOST", ""),
        smtp_port=int(os.getenv("SMTP_PORT", "587")),
        smtp_username=os.getenv("SMTP_USERNAME", ""),
        smtp_password=os.getenv("SMTP_PASSWORD", ""),
        smtp_use_tls=os.getenv("SMTP_USE_TLS", "true").lower() in ("true", "1"),
    )


@lru_cache(maxsize=1)
def get_email_settings() -> EmailSettings:
    """Retorna instância cacheada de EmailSettings."""
    return _load_email_from_env()
