"""Handlers de exceção HTTP — respostas JSON no formato {success, message}.

Rota inexistente (404) e método não permitido (405, com header Allow)
chegam aqui como HTTPException do Starlette.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

if TYPE_CHECKING:
    from fastapi import FastAPI

logger = logging.getLogger(__name__)

_DEFAULT_MESSAGES = {
    status.HTTP_404_NOT_FOUND: "Rota não encontrada.",
    status.HTTP_405_METHOD_NOT_ALLOWED: "Método não permitido.",
}


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = _DEFAULT_MESSAGES.get(exc.status_code, str(exc.detail))
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED and exc.headers:
        allowed = exc.headers.get("Allow", "")
        if allowed:
            message = f"Método não permitido. Use {allowed}."
    logger.info(
        "http_error_response",
        extra={"status_code": exc.status_code, "method": request.method, "path": request.url.path},
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": message},
        headers=exc.headers,
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    detail = errors[0].get("msg", "corpo inválido") if errors else "corpo inválido"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"success": False, "message": f"Requisição inválida: {detail}"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Registra os handlers no app."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
