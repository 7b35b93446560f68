"""Testes para composição e envio do email de ajustes."""

from __future__ import annotations

import pytest

from app.domain.adjustment import AdjustmentRecord
from app.infra.email import MemoryEmailTransport
from app.services.adjustment_notifier import (
    AdjustmentNotifier,
    build_subject,
    format_display_date,
    group_by_collaborator,
    render_html,
)
from utils.errors import ConfigurationError


def _record(collaborator: str, date: str, reason: str = "Esqueceu") -> AdjustmentRecord:
    return AdjustmentRecord(
        registered_at="2026-03-10 11:05:09",
        branch="SP01",
        manager_email="ana@empresa.com",
        manager_name="Ana",
        collaborator_name=collaborator,
        adjustment_date=date,
        adjusted_time="08:00",
        reason=reason,
    )


@pytest.fixture
def records() -> list[AdjustmentRecord]:
    return [
        _record("Bruno", "2026-03-09"),
        _record("Carla", "2026-03-08", "Consulta\nmédica"),
        _record("Bruno", "2026-03-10"),
    ]


def _notifier(transport: MemoryEmailTransport, **overrides: object) -> AdjustmentNotifier:
    options: dict = {"hr_email": "rh@empresa.com", "from_email": "no-reply@empresa.com"}
    options.update(overrides)
    return AdjustmentNotifier(transport, **options)


class TestRendering:
    """Testes para assunto e corpo HTML."""

    def test_subject_has_branch_and_count(self, records: list[AdjustmentRecord]) -> None:
        assert build_subject(records[:2]) == "ADJUSTMENT - SP01 - 2 RECORD(S)"

    def test_display_date(self) -> None:
        assert format_display_date("2026-03-09") == "09/03/2026"
        assert format_display_date("09/03") == "09/03"
        assert format_display_date(None) == ""

    def test_group_by_collaborator_keeps_first_seen_order(self, records: list[AdjustmentRecord]) -> None:
        groups = group_by_collaborator(records)
        assert list(groups) == ["Bruno", "Carla"]
        assert [r.adjustment_date for r in groups["Bruno"]] == ["2026-03-09", "2026-03-10"]

    def test_html_grouped(self, records: list[AdjustmentRecord]) -> None:
        body = render_html(records, "Ana")

        assert body.count("<h3>Colaborador:") == 2
        assert "09/03/2026" in body
        assert "Consulta<br>médica" in body
        assert "Registrado em: 10/03/2026 11:05:09" in body

    def test_html_flat_lists_collaborator_per_entry(self, records: list[AdjustmentRecord]) -> None:
        body = render_html(records, "Ana", grouped=False)
        assert "<h3>" not in body
        assert body.count("<strong>Colaborador:</strong>") == 3

    def test_html_escapes_user_input(self) -> None:
        body = render_html([_record("<b>Bruno</b>", "2026-03-09", "a & b")], "Ana")
        assert "&lt;b&gt;Bruno&lt;/b&gt;" in body
        assert "a &amp; b" in body


class TestAdjustmentNotifier:
    """Testes para AdjustmentNotifier."""

    @pytest.mark.asyncio
    async def test_sends_to_hr_and_manager(self, records: list[AdjustmentRecord]) -> None:
        transport = MemoryEmailTransport()
        notifier = _notifier(transport, from_name="Ajuste de Ponto")

        sent = await notifier.notify(records, "ana@empresa.com", "Ana")

        assert sent is True
        [message] = transport.sent
        assert message.to == ["rh@empresa.com", "ana@empresa.com"]
        assert message.subject == "ADJUSTMENT - SP01 - 3 RECORD(S)"
        assert message.from_name == "Ajuste de Ponto"

    @pytest.mark.asyncio
    async def test_missing_manager_email_sends_only_to_hr(self, records: list[AdjustmentRecord]) -> None:
        transport = MemoryEmailTransport()
        await _notifier(transport).notify(records, None, "Ana")
        assert transport.sent[0].to == ["rh@empresa.com"]

    @pytest.mark.asyncio
    async def test_transport_failure_is_swallowed(self, records: list[AdjustmentRecord]) -> None:
        transport = MemoryEmailTransport(fail_with="provider down")
        assert await _notifier(transport).notify(records, "ana@empresa.com", "Ana") is False

    def test_ensure_configured_lists_missing_settings(self) -> None:
        notifier = _notifier(MemoryEmailTransport(), hr_email="", from_email="")
        with pytest.raises(ConfigurationError, match="RH_EMAIL não configurado; EMAIL_FROM não configurado"):
            notifier.ensure_configured()

    def test_ensure_configured_includes_transport_errors(self) -> None:
        class _Unconfigured(MemoryEmailTransport):
            def validate(self) -> list[str]:
                return ["EMAIL_API_KEY não configurada"]

        with pytest.raises(ConfigurationError, match="EMAIL_API_KEY"):
            _notifier(_Unconfigured()).ensure_configured()
