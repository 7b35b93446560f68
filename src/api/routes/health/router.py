"""Endpoints de health check."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de configuração de uma dependência."""

    status: Literal["ok", "failed"]
    errors: tuple[str, ...] = ()

    def as_dict(self) -> dict[str, Any]:
        return {"status": self.status, "errors": list(self.errors)}


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Liveness probe — verifica se o serviço está rodando."""
    dependencies = getattr(request.app.state, "dependencies", None)
    service = dependencies.settings.service_name if dependencies is not None else "ajuste-ponto"
    return HealthResponse(
        status="healthy",
        service=service,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness probe — valida configuração de storage e email (sem IO de rede)."""
    dependencies = getattr(request.app.state, "dependencies", None)
    if dependencies is None:
        store_check = DependencyCheck(status="failed", errors=("not_configured",))
        email_check = DependencyCheck(status="failed", errors=("not_configured",))
    else:
        store_check = _check(dependencies.store.validate)
        email_check = _check(dependencies.notifier.ensure_configured)

    ready = store_check.status == "ok" and email_check.status == "ok"
    if not ready:
        logger.warning(
            "readiness_check_failed",
            extra={"storage": store_check.status, "email": email_check.status},
        )

    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {
            "storage": store_check.as_dict(),
            "email": email_check.as_dict(),
        },
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


def _check(probe: Any) -> DependencyCheck:
    """Executa `validate()` (lista de erros) ou `ensure_configured()` (levanta)."""
    try:
        errors = probe() or []
    except Exception as exc:
        errors = [str(exc)]
    if errors:
        return DependencyCheck(status="failed", errors=tuple(errors))
    return DependencyCheck(status="ok")
