"""Google Sheets Adjustment Store — revisão legada sobre planilha.

Grava cada ajuste como uma linha na faixa configurada (ex: REGISTRO!A2:H),
na ordem das colunas de AdjustmentRecord.

Requisito operacional: escrita pela Sheets API exige conta de serviço com
acesso de edição à planilha; chave de API pública só permite leitura.
"""

from __future__ import annotations

import asyncio
import json
import logging
import time
from typing import TYPE_CHECKING, Any

import httplib2
from google.auth.exceptions import GoogleAuthError
from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from app.domain.adjustment import COLUMN_NAMES, AdjustmentRecord
from app.observability import record_latency
from app.protocols.adjustment_store import AdjustmentStoreProtocol
from utils.errors import ConfigurationError, PersistenceError

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

_COMPONENT = "sheets_adjustment_store"
_SHEETS_SCOPE = "https://www.googleapis.com/auth/spreadsheets"
_COLUMNS = tuple(COLUMN_NAMES.values())

# Falhas de API, credencial e rede durante execute()
_SHEETS_ERRORS = (HttpError, GoogleAuthError, httplib2.HttpLib2Error, OSError)


def _row_to_record(row: list[Any]) -> AdjustmentRecord:
    padded = list(row) + [""] * (len(_COLUMNS) - len(row))
    return AdjustmentRecord.from_row(dict(zip(_COLUMNS, padded, strict=False)))


class SheetsAdjustmentStore(AdjustmentStoreProtocol):
    """Store de ajustes usando Google Sheets API v4.

    Args:
        spreadsheet_id: ID da planilha
        value_range: Faixa A1 das linhas de dados (sem cabeçalho)
        credentials_json: JSON da conta de serviço
        service: Recurso `sheets` já construído (testes)
    """

    def __init__(
        self,
        *,
        spreadsheet_id: str,
        value_range: str,
        credentials_json: str = "",
        service: Any | None = None,
    ) -> None:
        self._spreadsheet_id = spreadsheet_id
        self._range = value_range
        self._credentials_json = credentials_json
        self._service = service

    def validate(self) -> list[str]:
        errors: list[str] = []
        if not self._spreadsheet_id:
            errors.append("SHEETS_SPREADSHEET_ID não configurado")
        if self._service is None and not self._credentials_json:
            errors.append("SHEETS_CREDENTIALS_JSON não configurado")
        return errors

    def _values(self) -> Any:
        errors = self.validate()
        if errors:
            raise ConfigurationError("; ".join(errors))
        if self._service is None:
            try:
                credentials = service_account.Credentials.from_service_account_info(
                    json.loads(self._credentials_json),
                    scopes=[_SHEETS_SCOPE],
                )
            except (ValueError, KeyError, GoogleAuthError) as exc:
                raise ConfigurationError(f"SHEETS_CREDENTIALS_JSON inválido: {exc}") from exc
            self._service = build("sheets", "v4", credentials=credentials, cache_discovery=False)
        return self._service.spreadsheets().values()

    def insert_all_sync(self, records: Sequence[AdjustmentRecord]) -> None:
        values = self._values()
        for index, record in enumerate(records):
            row = ["" if value is None else value for value in record.to_row().values()]
            try:
                values.append(
                    spreadsheetId=self._spreadsheet_id,
                    range=self._range,
                    valueInputOption="RAW",
                    insertDataOption="INSERT_ROWS",
                    body={"values": [row]},
                ).execute()
            except _SHEETS_ERRORS as exc:
                logger.error(
                    "sheets_append_failed",
                    extra={"component": _COMPONENT, "inserted": index, "requested": len(records)},
                )
                raise PersistenceError(f"Falha ao gravar ajustes na planilha: {exc}") from exc

    def _read_rows(self, values: Any) -> list[list[Any]]:
        response = values.get(spreadsheetId=self._spreadsheet_id, range=self._range).execute()
        return [row for row in response.get("values", []) if any(str(cell).strip() for cell in row)]

    def clear_all_sync(self) -> int:
        values = self._values()
        try:
            count = len(self._read_rows(values))
            values.clear(spreadsheetId=self._spreadsheet_id, range=self._range, body={}).execute()
        except _SHEETS_ERRORS as exc:
            raise PersistenceError(f"Falha ao apagar ajustes da planilha: {exc}") from exc
        return count

    def fetch_all_sync(self) -> list[AdjustmentRecord]:
        values = self._values()
        try:
            rows = self._read_rows(values)
        except _SHEETS_ERRORS as exc:
            raise PersistenceError(f"Falha ao ler ajustes da planilha: {exc}") from exc
        records = [_row_to_record(row) for row in rows]
        # sorted é estável: empates mantêm a ordem da planilha
        return sorted(records, key=lambda record: record.registered_at or "", reverse=True)

    async def insert_all(self, records: Sequence[AdjustmentRecord]) -> None:
        started_at = time.perf_counter()
        await asyncio.to_thread(self.insert_all_sync, records)
        record_latency(_COMPONENT, "insert_all", (time.perf_counter() - started_at) * 1000)

    async def clear_all(self) -> int:
        return await asyncio.to_thread(self.clear_all_sync)

    async def fetch_all(self) -> list[AdjustmentRecord]:
        return await asyncio.to_thread(self.fetch_all_sync)
