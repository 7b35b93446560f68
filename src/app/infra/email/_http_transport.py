"""Base comum dos transportes de email via API HTTP (httpx)."""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

import httpx

from app.observability import record_latency
from utils.errors import NotificationError

if TYPE_CHECKING:
    from app.protocols.email_transport import EmailMessage

logger = logging.getLogger(__name__)


class HttpEmailTransport(ABC):
    """Transporte HTTP com API key em Bearer token.

    Subclasses definem `endpoint`, `provider` e `build_payload`.
    """

    endpoint: str = ""
    provider: str = ""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: float = 15.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._api_key = api_key
        self._timeout_seconds = timeout_seconds
        self._http_client = http_client

    def validate(self) -> list[str]:
        if not self._api_key:
            return ["EMAIL_API_KEY não configurada"]
        return []

    async def _get_http_client(self) -> httpx.AsyncClient:
        """Obtém ou cria cliente HTTP."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=self._timeout_seconds)
        return self._http_client

    @abstractmethod
    def build_payload(self, message: EmailMessage) -> dict[str, Any]:
        """Corpo JSON da requisição no formato do provider."""

    async def aclose(self) -> None:
        """Fecha o cliente HTTP criado ou injetado."""
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    async def send(self, message: EmailMessage) -> None:
        """Envia a mensagem pelo provider.

        Raises:
            NotificationError: Timeout, erro de rede ou status HTTP != 2xx.
        """
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }
        client = await self._get_http_client()
        started_at = time.perf_counter()
        try:
            response = await client.post(
                self.endpoint,
                headers=headers,
                json=self.build_payload(message),
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "email_provider_http_error",
                extra={
                    "provider": self.provider,
                    "status_code": exc.response.status_code,
                    "response_text": exc.response.text[:500],
                },
            )
            msg = f"{self.provider} recusou o email (HTTP {exc.response.status_code})"
            raise NotificationError(msg) from exc
        except httpx.HTTPError as exc:
            logger.warning(
                "email_provider_unreachable",
                extra={"provider": self.provider, "error_type": type(exc).__name__},
            )
            raise NotificationError(f"{self.provider} indisponível: {exc}") from exc

        record_latency(f"{self.provider}_transport", "send", (time.perf_counter() - started_at) * 1000)
