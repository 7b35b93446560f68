"""Testes para config.settings (base, storage, email)."""

from __future__ import annotations

import pytest

from config.settings import BaseSettings, EmailSettings, StorageSettings
from config.settings.base.core import _load_base_from_env
from config.settings.email import _load_email_from_env
from config.settings.storage import _load_storage_from_env


class TestBaseSettings:
    """Testes para BaseSettings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("ENVIRONMENT", "CORS_ENABLED", "CORS_ALLOW_ORIGINS", "EXPORT_FILENAME_PREFIX"):
            monkeypatch.delenv(name, raising=False)
        settings = _load_base_from_env()
        assert settings.environment == "development"
        assert settings.cors_enabled is True
        assert settings.cors_allow_origins == ("*",)
        assert settings.export_filename_prefix == "registros_ajustes"
        assert settings.validate() == []

    def test_environment_aliases(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "prod")
        settings = _load_base_from_env()
        assert settings.is_production
        assert settings.is_strict

    def test_origins_are_split_and_trimmed(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CORS_ALLOW_ORIGINS", "https://a.example, https://b.example ,")
        assert _load_base_from_env().cors_allow_origins == ("https://a.example", "https://b.example")

    def test_empty_prefix_is_invalid(self) -> None:
        errors = BaseSettings(export_filename_prefix="").validate()
        assert "EXPORT_FILENAME_PREFIX não pode ser vazio" in errors


class TestStorageSettings:
    """Testes para StorageSettings."""

    def test_sql_requires_database_url(self) -> None:
        assert StorageSettings(backend="sql").validate() == ["DATABASE_URL não configurada"]

    def test_postgres_scheme_is_normalized(self) -> None:
        settings = StorageSettings(database_url="postgres://u:p@host:5432/db")
        assert settings.normalized_database_url == "postgresql://u:p@host:5432/db"

    def test_sheets_requires_id_and_credentials(self) -> None:
        errors = StorageSettings(backend="sheets").validate()
        assert "SHEETS_SPREADSHEET_ID não configurado" in errors
        assert "SHEETS_CREDENTIALS_JSON não configurado" in errors

    def test_memory_needs_nothing(self) -> None:
        assert StorageSettings(backend="memory").validate() == []

    def test_invalid_backend(self) -> None:
        assert StorageSettings(backend="mongo").validate() == ["STORAGE_BACKEND inválido: mongo"]

    def test_load_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STORAGE_BACKEND", "SQL")
        monkeypatch.setenv("DATABASE_URL", "sqlite:///ajustes.db")
        monkeypatch.setenv("DATABASE_SSL_MODE", "require")
        monkeypatch.setenv("DATABASE_AUTO_CREATE", "true")
        settings = _load_storage_from_env()
        assert settings.backend == "sql"
        assert settings.database_ssl_mode == "require"
        assert settings.database_auto_create is True
        assert settings.database_table == "ajustes"
        assert settings.validate() == []


class TestEmailSettings:
    """Testes para EmailSettings."""

    def test_http_provider_requires_api_key(self) -> None:
        settings = EmailSettings(provider="sendgrid", hr_email="rh@empresa.com", from_email="no-reply@empresa.com")
        assert settings.validate() == ["EMAIL_API_KEY não configurada"]

    def test_smtp_requires_host(self) -> None:
        settings = EmailSettings(provider="smtp", hr_email="rh@empresa.com", from_email="no-reply@empresa.com")
        assert settings.validate() == ["SMTP_HOST não configurado"]

    def test_missing_recipients_reported(self) -> None:
        errors = EmailSettings(provider="memory").validate()
        assert errors == ["RH_EMAIL não configurado", "EMAIL_FROM não configurado"]

    def test_load_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EMAIL_PROVIDER", "smtp")
        monkeypatch.setenv("RH_EMAIL", "rh@empresa.com")
        monkeypatch.setenv("EMAIL_FROM", "no-reply@empresa.com")
        monkeypatch.setenv("SMTP_HOST", "smtp.sendgrid.net")
        monkeypatch.setenv("SMTP_PORT", "2525")
        monkeypatch.setenv("SMTP_USE_TLS", "false")
        settings = _load_email_from_env()
        assert settings.smtp_port == 2525
        assert settings.smtp_use_tls is False
        assert settings.subject_template == "ADJUSTMENT - {branch} - {count} RECORD(S)"
        assert settings.validate() == []
