"""Settings base do serviço de ajustes de ponto.

Configurações comuns: ambiente, identificação do serviço, CORS e exportação.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]


@dataclass(frozen=True)
class BaseSettings:
    """Configurações base do sistema.

    Attributes:
        environment: Ambiente de execução (development|staging|production)
        service_name: Nome do serviço para logs
        debug: Modo debug ativo
        cors_enabled: Responde OPTIONS e aplica CORSMiddleware
        cors_allow_origins: Origens aceitas pelo CORS
        export_filename_prefix: Prefixo do arquivo CSV exportado
    """

    environment: Environment = "development"
    service_name: str = "ajuste-ponto"
    debug: bool = False

    cors_enabled: bool = True
    cors_allow_origins: tuple[str, ...] = field(default=("*",))

    export_filename_prefix: str = "registros_ajustes"

    @property
    def is_production(self) -> bool:
        """Retorna True se ambiente é produção."""
        return self.environment == "production"

    @property
    def is_strict(self) -> bool:
        """Staging e produção falham no boot com configuração inválida."""
        return self.environment in ("staging", "production")

    def validate(self) -> list[str]:
        """Valida configurações base.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if self.environment not in ("development", "staging", "production"):
            errors.append(f"ENVIRONMENT inválido: {self.environment}")

        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")

        if not self.export_filename_prefix:
            errors.append("EXPORT_FILENAME_PREFIX não pode ser vazio")

        return errors


def _parse_environment(env_str: str) -> Environment:
    """Converte string de ambiente para tipo Environment."""
    env_lower = env_str.lower()
    if env_lower in ("production", "prod"):
        return "production"
    if env_lower in ("staging", "stage"):
        return "staging"
    return "development"


def _parse_origins(raw: str) -> tuple[str, ...]:
    origins = tuple(item.strip() for item in raw.split(",") if item.strip())
    return origins or ("*",)


def _load_base_from_env() -> BaseSettings:
    """Carrega BaseSettings de variáveis de ambiente."""
    return BaseSettings(
        environment=_parse_environment(os.getenv("ENVIRONMENT", "development")),
        service_name=os.getenv("SERVICE_NAME", "ajuste-ponto"),
        debug=os.getenv("DEBUG", "").lower() in ("true", "1", "yes"),
        cors_enabled=os.getenv("CORS_ENABLED", "true").lower() in ("true", "1", "yes"),
        cors_allow_origins=_parse_origins(os.getenv("CORS_ALLOW_ORIGINS", "*")),
        export_filename_prefix=os.getenv("EXPORT_FILENAME_PREFIX", "registros_ajustes"),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instância cacheada de BaseSettings."""
    return _load_base_from_env()
