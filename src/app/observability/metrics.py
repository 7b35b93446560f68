"""Métricas via structured logging.

Registradas como logs estruturados (`metric_latency`) para agregação
posterior no provedor de logs.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "sql_adjustment_store")
        operation: Nome da operação (ex: "insert_all")
        latency_ms: Latência em milissegundos
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
        },
    )
