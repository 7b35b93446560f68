"""Testes dos endpoints de health e readiness."""

from __future__ import annotations

import json
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from starlette.requests import Request

from api.routes.health.router import health_check, readiness_check
from app.infra.email import MemoryEmailTransport
from app.infra.stores import MemoryAdjustmentStore, SqlAdjustmentStore
from app.services.adjustment_notifier import AdjustmentNotifier
from config.settings import BaseSettings


def _build_request_with_state(state: SimpleNamespace) -> Request:
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "GET",
        "path": "/ready",
        "raw_path": b"/ready",
        "query_string": b"",
        "headers": [],
        "app": SimpleNamespace(state=state),
    }

    async def _receive() -> dict[str, object]:
        return {"type": "http.request", "body": b"", "more_body": False}

    return Request(scope, _receive)


def _dependencies(store, hr_email: str = "rh@empresa.com") -> SimpleNamespace:
    notifier = AdjustmentNotifier(
        MemoryEmailTransport(),
        hr_email=hr_email,
        from_email="no-reply@empresa.com",
    )
    return SimpleNamespace(store=store, notifier=notifier, settings=BaseSettings(service_name="ajuste-ponto"))


@pytest.mark.asyncio
async def test_health_reports_service_name() -> None:
    request = _build_request_with_state(SimpleNamespace(dependencies=_dependencies(MagicMock())))

    response = await health_check(request)

    assert response.status == "healthy"
    assert response.service == "ajuste-ponto"


@pytest.mark.asyncio
async def test_readiness_returns_not_ready_without_dependencies() -> None:
    response = await readiness_check(_build_request_with_state(SimpleNamespace()))
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["status"] == "not_ready"
    assert payload["checks"]["storage"]["status"] == "failed"


@pytest.mark.asyncio
async def test_readiness_ready_when_store_and_email_configured() -> None:
    state = SimpleNamespace(dependencies=_dependencies(MemoryAdjustmentStore()))

    response = await readiness_check(_build_request_with_state(state))
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 200
    assert payload["status"] == "ready"
    assert payload["checks"]["storage"] == {"status": "ok", "errors": []}
    assert payload["checks"]["email"] == {"status": "ok", "errors": []}


@pytest.mark.asyncio
async def test_readiness_lists_configuration_errors() -> None:
    state = SimpleNamespace(dependencies=_dependencies(SqlAdjustmentStore(""), hr_email=""))

    response = await readiness_check(_build_request_with_state(state))
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["checks"]["storage"]["errors"] == ["DATABASE_URL não configurada"]
    assert payload["checks"]["email"]["errors"] == ["RH_EMAIL não configurado"]
