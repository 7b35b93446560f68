"""Factories de dependências — criação de implementações concretas.

Centraliza a escolha de backend de storage e provider de email a partir
das settings carregadas do ambiente.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from app.infra.email import (
    MailerSendTransport,
    MemoryEmailTransport,
    SendGridTransport,
    SmtpTransport,
)
from app.infra.stores import MemoryAdjustmentStore, SheetsAdjustmentStore, SqlAdjustmentStore
from app.protocols import AdjustmentStoreProtocol, EmailTransportProtocol
from app.services.adjustment_notifier import AdjustmentNotifier
from config.settings import (
    BaseSettings,
    EmailSettings,
    StorageSettings,
    get_base_settings,
    get_email_settings,
    get_storage_settings,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AppDependencies:
    """Dependências compartilhadas pelas rotas (uma instância por processo)."""

    store: AdjustmentStoreProtocol
    notifier: AdjustmentNotifier
    settings: BaseSettings


# ──────────────────────────────────────────────────────────────────────────────
# Adjustment Store Factory
# ──────────────────────────────────────────────────────────────────────────────


def create_adjustment_store(settings: StorageSettings | None = None) -> AdjustmentStoreProtocol:
    """Cria store de ajustes baseado na configuração.

    STORAGE_BACKEND:
    - "sql": SqlAdjustmentStore (PostgreSQL/SQLite via DATABASE_URL)
    - "sheets": SheetsAdjustmentStore (Google Sheets)
    - "memory": MemoryAdjustmentStore (dev only)

    Configuração incompleta não impede a criação: o store levanta
    ConfigurationError na primeira operação.
    """
    settings = settings or get_storage_settings()
    backend = settings.backend.lower()

    if backend == "sql":
        store: AdjustmentStoreProtocol = SqlAdjustmentStore(
            settings.normalized_database_url,
            table_name=settings.database_table,
            ssl_mode=settings.database_ssl_mode,
        )
    elif backend == "sheets":
        store = SheetsAdjustmentStore(
            spreadsheet_id=settings.sheets_spreadsheet_id,
            value_range=settings.sheets_range,
            credentials_json=settings.sheets_credentials_json,
        )
    elif backend == "memory":
        store = MemoryAdjustmentStore()
    else:
        msg = f"STORAGE_BACKEND inválido: {backend}"
        raise ValueError(msg)

    logger.info("adjustment_store_created", extra={"backend": backend})
    return store


# ──────────────────────────────────────────────────────────────────────────────
# Email Transport / Notifier Factories
# ──────────────────────────────────────────────────────────────────────────────


def create_email_transport(settings: EmailSettings | None = None) -> EmailTransportProtocol:
    """Cria transporte de email conforme EMAIL_PROVIDER."""
    settings = settings or get_email_settings()
    provider = settings.provider.lower()

    if provider == "mailersend":
        transport: EmailTransportProtocol = MailerSendTransport(
            api_key=settings.api_key,
            timeout_seconds=settings.request_timeout_seconds,
        )
    elif provider == "sendgrid":
        transport = SendGridTransport(
            api_key=settings.api_key,
            timeout_seconds=settings.request_timeout_seconds,
        )
    elif provider == "smtp":
        transport = SmtpTransport(
            host=settings.smtp_host,
            port=settings.smtp_port,
            username=settings.smtp_username,
            password=settings.smtp_password,
            use_tls=settings.smtp_use_tls,
            timeout_seconds=settings.request_timeout_seconds,
        )
    elif provider == "memory":
        transport = MemoryEmailTransport()
    else:
        msg = f"EMAIL_PROVIDER inválido: {provider}"
        raise ValueError(msg)

    logger.info("email_transport_created", extra={"provider": provider})
    return transport


def create_notifier(
    settings: EmailSettings | None = None,
    transport: EmailTransportProtocol | None = None,
) -> AdjustmentNotifier:
    """Cria o notifier com o transporte configurado."""
    settings = settings or get_email_settings()
    return AdjustmentNotifier(
        transport or create_email_transport(settings),
        hr_email=settings.hr_email,
        from_email=settings.from_email,
        from_name=settings.from_name,
        subject_template=settings.subject_template,
    )


def build_dependencies() -> AppDependencies:
    """Monta todas as dependências a partir do ambiente."""
    return AppDependencies(
        store=create_adjustment_store(),
        notifier=create_notifier(),
        settings=get_base_settings(),
    )
