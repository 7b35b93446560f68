"""Endpoints de ajustes de ponto.

Endpoints:
- POST /api/registrar: grava um lote e notifica RH + gestor
- DELETE /api/limpar: apaga todos os registros
- GET /api/download: exporta todos os registros em CSV

Cada endpoint tem uma única fronteira de erro: a exceção é capturada uma
vez, registrada em log e convertida em resposta JSON com a causa.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from pydantic import ValidationError as PayloadValidationError

from app.domain.adjustment import SubmissionBatch
from app.use_cases.adjustments import (
    ClearAdjustmentsUseCase,
    ExportAdjustmentsUseCase,
    SubmitAdjustmentsUseCase,
)
from utils.errors import ConfigurationError, InfrastructureError, ValidationError

if TYPE_CHECKING:
    from app.bootstrap.dependencies import AppDependencies

logger = logging.getLogger(__name__)

router = APIRouter()

CSV_MEDIA_TYPE = "text/csv; charset=utf-8"


class OperationResponse(BaseModel):
    """Corpo JSON das respostas de operação."""

    success: bool
    message: str
    count: int | None = None


def _dependencies(request: Request) -> AppDependencies:
    return request.app.state.dependencies


def _json(status_code: int, message: str, *, success: bool, count: int | None = None) -> JSONResponse:
    body = OperationResponse(success=success, message=message, count=count)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def _failure(exc: Exception, *, operation: str, prefix: str) -> JSONResponse:
    """Converte exceção em resposta de erro (400 para entrada inválida, 500 demais)."""
    if isinstance(exc, ValidationError):
        logger.info("adjustments_request_rejected", extra={"operation": operation, "reason": str(exc)})
        return _json(status.HTTP_400_BAD_REQUEST, str(exc), success=False)

    logger.exception(
        "adjustments_operation_failed",
        extra={
            "operation": operation,
            "error_type": type(exc).__name__,
            "configuration": isinstance(exc, ConfigurationError),
            "infrastructure": isinstance(exc, InfrastructureError),
        },
    )
    return _json(status.HTTP_500_INTERNAL_SERVER_ERROR, f"{prefix}: {exc}", success=False)


def _parse_batch(raw_body: bytes) -> SubmissionBatch:
    try:
        return SubmissionBatch.model_validate_json(raw_body or b"null")
    except PayloadValidationError as exc:
        first = exc.errors()[0] if exc.errors() else {}
        detail = first.get("msg", "corpo inválido")
        raise ValidationError(f"Requisição inválida: {detail}") from exc


@router.post("/registrar", response_model=OperationResponse)
async def register_adjustments(request: Request) -> JSONResponse:
    """Registra o lote do gestor e envia o resumo por email."""
    deps = _dependencies(request)
    use_case = SubmitAdjustmentsUseCase(store=deps.store, notifier=deps.notifier)
    try:
        batch = _parse_batch(await request.body())
        result = await use_case.execute(batch)
    except Exception as exc:
        return _failure(exc, operation="register", prefix="Erro ao registrar ajustes")

    message = f"{result.count} ajuste(s) registrado(s) com sucesso."
    if not result.notified:
        message += " O email de notificação não pôde ser enviado."
    return _json(status.HTTP_200_OK, message, success=True)


@router.delete("/limpar", response_model=OperationResponse)
async def clear_adjustments(request: Request) -> JSONResponse:
    """Apaga todos os registros de ajuste."""
    deps = _dependencies(request)
    use_case = ClearAdjustmentsUseCase(store=deps.store)
    try:
        count = await use_case.execute()
    except Exception as exc:
        return _failure(exc, operation="clear", prefix="Erro ao limpar registros")

    return _json(status.HTTP_200_OK, f"{count} registro(s) removido(s).", success=True, count=count)


@router.get("/download")
async def download_adjustments(request: Request) -> Response:
    """Exporta todos os registros (mais recentes primeiro) em CSV."""
    deps = _dependencies(request)
    use_case = ExportAdjustmentsUseCase(
        store=deps.store,
        filename_prefix=deps.settings.export_filename_prefix,
    )
    try:
        export = await use_case.execute()
    except Exception as exc:
        return _failure(exc, operation="download", prefix="Erro interno ao buscar e exportar dados")

    return Response(
        content=export.content,
        media_type=CSV_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{export.filename}"'},
    )
