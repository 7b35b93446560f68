"""Configuração de logging estruturado.

Re-exporta funções e classes para configuração de logging JSON.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (bootstrap)
    configure_logging(level="INFO", service_name="ajuste_ponto")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("adjustments_persisted", extra={"record_count": 3})

Campos obrigatórios em todo log:
- correlation_id
- service
- level
- logger
- message
- asctime

Nomes, emails e motivos dos colaboradores nunca vão para o log.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
