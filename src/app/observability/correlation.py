"""correlation_id por requisição HTTP.

Guardado em ContextVar (seguro para async) e injetado nos logs pelo
CorrelationIdFilter. O middleware HTTP define o valor a partir do header
`x-correlation-id` ou gera um UUID4.
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

CORRELATION_HEADER = "x-correlation-id"

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual ('' se não definido)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id (gera UUID4 se None) e retorna o token de reset."""
    return _correlation_id.set(correlation_id or str(uuid.uuid4()))


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o correlation_id anterior."""
    _correlation_id.reset(token)
