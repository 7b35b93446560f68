"""Exceções de domínio do fluxo de ajustes de ponto."""

from __future__ import annotations


class ValidationError(Exception):
    """Payload de requisição malformado ou lote vazio."""


class ConfigurationError(Exception):
    """Variável de ambiente obrigatória ausente."""


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura (storage, email)."""


class PersistenceError(InfrastructureError):
    """Falha ao gravar, apagar ou ler registros no storage."""


class NotificationError(InfrastructureError):
    """Falha no envio do email de notificação."""
