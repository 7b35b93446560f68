"""Composicao e envio do email de notificacao de ajustes.

O email resume o lote recem-gravado para o RH e para o gestor que enviou.
Opera sobre os registros em memoria produzidos pelo normalizador; nunca
rele o storage.

Envio e best-effort: falha do transporte e registrada em log e nao
propaga para o chamador (o lote ja foi persistido).
"""

from __future__ import annotations

import html
import logging
import time
from datetime import datetime
from typing import TYPE_CHECKING

from app.observability import record_latency
from app.protocols.email_transport import EmailMessage
from config.settings import DEFAULT_SUBJECT_TEMPLATE
from utils.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.domain.adjustment import AdjustmentRecord
    from app.protocols.email_transport import EmailTransportProtocol

logger = logging.getLogger(__name__)

_COMPONENT = "adjustment_notifier"

_BLOCK_STYLE = "border:1px solid #ddd;border-radius:6px;padding:12px;margin-bottom:12px;"
_FOOTER_STYLE = "color:#666;font-size:12px;margin-top:16px;"


def format_display_date(value: str | None) -> str:
    """Converte YYYY-MM-DD em DD/MM/YYYY; valores fora do padrao voltam como vieram."""
    if not value:
        return ""
    try:
        return datetime.strptime(value.strip()[:10], "%Y-%m-%d").strftime("%d/%m/%Y")
    except ValueError:
        return value


def format_display_timestamp(value: str | None) -> str:
    """Converte 'YYYY-MM-DD HH:MM:SS' em 'DD/MM/YYYY HH:MM:SS' quando possivel."""
    if not value:
        return ""
    try:
        return datetime.strptime(value, "%Y-%m-%d %H:%M:%S").strftime("%d/%m/%Y %H:%M:%S")
    except ValueError:
        return value


def _text(value: str | None) -> str:
    """Escapa HTML e converte quebras de linha em <br>."""
    escaped = html.escape(value or "")
    return escaped.replace("\r\n", "\n").replace("\n", "<br>")


def build_subject(
    records: Sequence[AdjustmentRecord],
    template: str = DEFAULT_SUBJECT_TEMPLATE,
) -> str:
    """Assunto com filial e quantidade de registros do lote."""
    branch = records[0].branch if records else ""
    return template.format(branch=branch or "", count=len(records))


def group_by_collaborator(
    records: Sequence[AdjustmentRecord],
) -> dict[str, list[AdjustmentRecord]]:
    """Agrupa registros por colaborador preservando a ordem de chegada."""
    groups: dict[str, list[AdjustmentRecord]] = {}
    for record in records:
        groups.setdefault(record.collaborator_name or "", []).append(record)
    return groups


def _render_entry(record: AdjustmentRecord, *, with_collaborator: bool) -> str:
    lines = []
    if with_collaborator:
        lines.append(f"<p><strong>Colaborador:</strong> {_text(record.collaborator_name)}</p>")
    lines.append(f"<p><strong>Data:</strong> {_text(format_display_date(record.adjustment_date))}</p>")
    lines.append(f"<p><strong>Horário ajustado:</strong> {_text(record.adjusted_time)}</p>")
    lines.append(f"<p><strong>Motivo:</strong> {_text(record.reason)}</p>")
    return "\n".join(lines)


def render_html(
    records: Sequence[AdjustmentRecord],
    manager_name: str | None,
    *,
    grouped: bool = True,
) -> str:
    """Renderiza o corpo HTML do email.

    Args:
        records: Registros do lote (mesmo registered_at).
        manager_name: Nome do gestor solicitante.
        grouped: Um bloco por colaborador (True) ou um bloco por registro.
    """
    parts = [
        "<div style=\"font-family:Arial,sans-serif;\">",
        "<h2>Solicitação de ajuste de ponto</h2>",
        f"<p><strong>Gestor:</strong> {_text(manager_name)}</p>",
        f"<p><strong>Filial:</strong> {_text(records[0].branch if records else '')}</p>",
    ]

    if grouped:
        for collaborator, items in group_by_collaborator(records).items():
            parts.append(f"<div style=\"{_BLOCK_STYLE}\">")
            parts.append(f"<h3>Colaborador: {_text(collaborator)}</h3>")
            parts.extend(
                f"<div>{_render_entry(item, with_collaborator=False)}</div><hr>" for item in items
            )
            parts.append("</div>")
    else:
        parts.extend(
            f"<div style=\"{_BLOCK_STYLE}\">{_render_entry(record, with_collaborator=True)}</div>"
            for record in records
        )

    registered_at = records[0].registered_at if records else ""
    parts.append(
        f"<div style=\"{_FOOTER_STYLE}\">"
        f"Registrado em: {_text(format_display_timestamp(registered_at))}"
        "</div>"
    )
    parts.append("</div>")
    return "\n".join(parts)


class AdjustmentNotifier:
    """Monta e envia o resumo do lote para RH e gestor."""

    __slots__ = ("_from_email", "_from_name", "_grouped", "_hr_email", "_subject_template", "_transport")

    def __init__(
        self,
        transport: EmailTransportProtocol,
        *,
        hr_email: str,
        from_email: str,
        from_name: str = "",
        subject_template: str = DEFAULT_SUBJECT_TEMPLATE,
        grouped: bool = True,
    ) -> None:
        self._transport = transport
        self._hr_email = hr_email
        self._from_email = from_email
        self._from_name = from_name
        self._subject_template = subject_template
        self._grouped = grouped

    def ensure_configured(self) -> None:
        """Falha rapido se faltar configuracao de envio.

        Raises:
            ConfigurationError: RH_EMAIL, EMAIL_FROM ou credenciais ausentes.
        """
        errors: list[str] = []
        if not self._hr_email:
            errors.append("RH_EMAIL não configurado")
        if not self._from_email:
            errors.append("EMAIL_FROM não configurado")
        errors.extend(self._transport.validate())
        if errors:
            raise ConfigurationError("; ".join(errors))

    def build_message(
        self,
        records: Sequence[AdjustmentRecord],
        manager_email: str | None,
        manager_name: str | None,
    ) -> EmailMessage:
        """Monta a mensagem sem enviar."""
        recipients = [address for address in (self._hr_email, manager_email) if address]
        return EmailMessage(
            from_email=self._from_email,
            from_name=self._from_name,
            to=recipients,
            subject=build_subject(records, self._subject_template),
            html=render_html(records, manager_name, grouped=self._grouped),
        )

    async def notify(
        self,
        records: Sequence[AdjustmentRecord],
        manager_email: str | None,
        manager_name: str | None,
    ) -> bool:
        """Envia o resumo do lote. Retorna False se o envio falhou."""
        message = self.build_message(records, manager_email, manager_name)
        started_at = time.perf_counter()
        try:
            await self._transport.send(message)
        except Exception as exc:
            logger.error(
                "adjustment_notification_failed",
                extra={
                    "component": _COMPONENT,
                    "record_count": len(records),
                    "error_type": type(exc).__name__,
                    "error": str(exc),
                },
            )
            return False

        record_latency(_COMPONENT, "notify", (time.perf_counter() - started_at) * 1000)
        logger.info(
            "adjustment_notification_sent",
            extra={
                "component": _COMPONENT,
                "record_count": len(records),
                "recipient_count": len(message.to),
            },
        )
        return True

    async def aclose(self) -> None:
        """Libera recursos do transporte (ex.: cliente HTTP)."""
        close = getattr(self._transport, "aclose", None)
        if close is not None:
            await close()
