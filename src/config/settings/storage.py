"""Settings do storage de ajustes.

Backends suportados:
- sql: banco relacional via SQLAlchemy (PostgreSQL em produção)
- sheets: planilha Google via Sheets API v4 (revisão legada)
- memory: apenas desenvolvimento e testes
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

StorageBackend = Literal["sql", "sheets", "memory"]

VALID_STORAGE_BACKENDS = ("sql", "sheets", "memory")


@dataclass(frozen=True)
class StorageSettings:
    """Configurações de persistência.

    Attributes:
        backend: Backend de storage (sql|sheets|memory)
        database_url: Connection string do banco (DATABASE_URL)
        database_ssl_mode: sslmode repassado ao PostgreSQL (ex: require)
        database_table: Nome da tabela de ajustes
        database_auto_create: Cria a tabela no startup se não existir
        sheets_spreadsheet_id: ID da planilha Google
        sheets_range: Faixa A1 das linhas de dados (sem cabeçalho)
        sheets_credentials_json: JSON da conta de serviço Google
    """

    backend: str = "sql"

    database_url: str = ""
    database_ssl_mode: str = ""
    database_table: str = "ajustes"
    database_auto_create: bool = False

    sheets_spreadsheet_id: str = ""
    sheets_range: str = "REGISTRO!A2:H"
    sheets_credentials_json: str = ""

    @property
    def normalized_database_url(self) -> str:
        """URL com esquema aceito pelo SQLAlchemy (postgres:// -> postgresql://)."""
        url = self.database_url
        if url.startswith("postgres://"):
            return url.replace("postgres://", "postgresql://", 1)
        return url

    def validate(self) -> list[str]:
        """Valida configurações do backend selecionado."""
        errors: list[str] = []

        if self.backend not in VALID_STORAGE_BACKENDS:
            errors.append(f"STORAGE_BACKEND inválido: {self.backend}")
            return errors

        if self.backend == "sql":
            if not self.database_url:
                errors.append("DATABASE_URL não configurada")
            if not self.database_table:
                errors.append("DATABASE_TABLE não pode ser vazio")

        if self.backend == "sheets":
            if not self.sheets_spreadsheet_id:
                errors.append("SHEETS_SPREADSHEET_ID não configurado")
            if not self.sheets_credentials_json:
                errors.append("SHEETS_CREDENTIALS_JSON não configurado")

        return errors


def _load_storage_from_env() -> StorageSettings:
    """Carrega StorageSettings de variáveis de ambiente."""
    return StorageSettings(
        backend=os.getenv("STORAGE_BACKEND", "sql").lower(),
        database_url=os.getenv("DATABASE_URL", ""),
        database_ssl_mode=os.getenv("DATABASE_SSL_MODE", ""),
        database_table=os.getenv("DATABASE_TABLE", "ajustes"),
        database_auto_create=os.getenv("DATABASE_AUTO_CREATE", "").lower()
        in ("true", "1", "yes"),
        sheets_spreadsheet_id=os.getenv("SHEETS_SPREADSHEET_ID", ""),
        sheets_range=os.getenv("SHEETS_RANGE", "REGISTRO!A2:H"),
        sheets_credentials_json=os.getenv("SHEETS_CREDENTIALS_JSON", ""),
    )


@lru_cache(maxsize=1)
def get_storage_settings() -> StorageSettings:
    """Retorna instância cacheada de StorageSettings."""
    return _load_storage_from_env()
