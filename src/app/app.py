"""Entrypoint da aplicação de ajustes de ponto.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from api.errors import register_exception_handlers
from api.routes import create_api_router
from app.bootstrap import build_dependencies, initialize_app, validate_runtime_settings
from app.infra.stores import SqlAdjustmentStore
from app.observability import CORRELATION_HEADER, reset_correlation_id, set_correlation_id
from config.logging import get_logger
from config.settings import get_storage_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Awaitable, Callable

    from app.bootstrap import AppDependencies

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)

ALLOWED_METHODS = ("GET", "POST", "DELETE", "OPTIONS")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações
    - Cria a tabela de ajustes se DATABASE_AUTO_CREATE estiver ativo

    Shutdown:
    - Fecha o transporte de email
    """
    dependencies: AppDependencies = app.state.dependencies
    logger.info("app_starting", extra={"service": dependencies.settings.service_name})
    validate_runtime_settings()

    store = dependencies.store
    if get_storage_settings().database_auto_create and isinstance(store, SqlAdjustmentStore):
        try:
            await asyncio.to_thread(store.create_schema_sync)
        except Exception as exc:
            logger.warning("adjustments_table_not_ready", extra={"error_type": type(exc).__name__})

    yield

    await dependencies.notifier.aclose()
    logger.info("app_shutting_down", extra={"service": dependencies.settings.service_name})


def _install_middlewares(app: FastAPI, dependencies: AppDependencies) -> None:
    settings = dependencies.settings

    if settings.cors_enabled:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(settings.cors_allow_origins),
            allow_methods=list(ALLOWED_METHODS),
            allow_headers=["*"],
            expose_headers=["Content-Disposition"],
        )

        @app.middleware("http")
        async def answer_options(
            request: Request,
            call_next: Callable[[Request], Awaitable[Response]],
        ) -> Response:
            # OPTIONS em qualquer caminho: 200 sem corpo, com headers CORS
            if request.method != "OPTIONS":
                return await call_next(request)
            origin = request.headers.get("origin")
            allow_all = "*" in settings.cors_allow_origins
            headers = {
                "Access-Control-Allow-Methods": ", ".join(ALLOWED_METHODS),
                "Access-Control-Allow-Headers": request.headers.get(
                    "access-control-request-headers", "Content-Type"
                ),
            }
            if allow_all:
                headers["Access-Control-Allow-Origin"] = "*"
            elif origin and origin in settings.cors_allow_origins:
                headers["Access-Control-Allow-Origin"] = origin
                headers["Vary"] = "Origin"
            return Response(status_code=200, headers=headers)

    @app.middleware("http")
    async def bind_correlation_id(
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        token = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            response = await call_next(request)
        finally:
            reset_correlation_id(token)
        return response


def create_app(dependencies: AppDependencies | None = None) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        dependencies: Dependências prontas (testes); default monta a partir do ambiente.

    Returns:
        Aplicação FastAPI configurada.
    """
    dependencies = dependencies or build_dependencies()

    fastapi_app = FastAPI(
        title="Ajuste de Ponto",
        description="Registro de solicitações de ajuste de ponto e notificação ao RH",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs" if dependencies.settings.debug else None,
        redoc_url=None,
        openapi_url="/openapi.json" if dependencies.settings.debug else None,
    )
    fastapi_app.state.dependencies = dependencies

    _install_middlewares(fastapi_app, dependencies)
    register_exception_handlers(fastapi_app)
    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": dependencies.settings.service_name})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting ajuste-ponto in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
