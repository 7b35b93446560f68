"""Agregador de settings do serviço de ajustes de ponto.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.email import (
    DEFAULT_SUBJECT_TEMPLATE,
    EmailSettings,
    get_email_settings,
)
from config.settings.storage import (
    StorageBackend,
    StorageSettings,
    get_storage_settings,
)

__all__ = [
    "DEFAULT_SUBJECT_TEMPLATE",
    "BaseSettings",
    "EmailSettings",
    "Environment",
    "StorageBackend",
    "StorageSettings",
    "get_base_settings",
    "get_email_settings",
    "get_storage_settings",
]
