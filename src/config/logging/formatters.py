"""Formatter JSON dos logs do serviço.

Cada linha de log é um objeto JSON com os campos de REQUIRED_LOG_FIELDS,
renomeados conforme FIELD_RENAME_MAP, mais os campos passados via `extra`.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "asctime": "timestamp",
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {"timestamp": "2026-10-19 10:30:00,123", "level": "INFO",
         "logger": "app.use_cases.adjustments.submit",
         "message": "adjustments_persisted", "correlation_id": "abc-123",
         "service": "ajuste_ponto", "record_count": 2}
    """
    return JsonFormatter(
        " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS),
        rename_fields=FIELD_RENAME_MAP,
        json_ensure_ascii=False,
    )
