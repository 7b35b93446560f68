"""SQL Adjustment Store — registros de ajuste em banco relacional.

Usa SQLAlchemy Core sobre a connection string DATABASE_URL (PostgreSQL em
produção, SQLite nos testes).

Características:
    - Cada operação abre e fecha sua própria conexão (NullPool, sem pool)
    - insert_all grava um registro por statement, com commit individual
    - fetch_all ordena por data_registro DESC, empate em ordem de inserção
    - Sem UPDATE: registros são imutáveis

O SDK é síncrono; as operações rodam em asyncio.to_thread para não
bloquear o event loop.
"""

from __future__ import annotations

import asyncio
import logging
import time
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

from sqlalchemy import (
    Column,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    create_engine,
    delete,
    insert,
    select,
)
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import NullPool

from app.domain.adjustment import COLUMN_NAMES, AdjustmentRecord
from app.observability import record_latency
from app.protocols.adjustment_store import AdjustmentStoreProtocol
from utils.errors import ConfigurationError, PersistenceError

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from sqlalchemy.engine import Connection

logger = logging.getLogger(__name__)

_COMPONENT = "sql_adjustment_store"

DEFAULT_TABLE_NAME = "ajustes"


def build_adjustments_table(metadata: MetaData, table_name: str = DEFAULT_TABLE_NAME) -> Table:
    """Define a tabela de ajustes (id + colunas de AdjustmentRecord)."""
    return Table(
        table_name,
        metadata,
        Column("id", Integer, primary_key=True, autoincrement=True),
        Column("data_registro", String(32), nullable=True, index=True),
        Column("filial", String(120), nullable=True),
        Column("email_gestor", String(255), nullable=True),
        Column("nome_gestor", String(255), nullable=True),
        Column("nome_colaborador", String(255), nullable=True),
        Column("data_ajuste", String(32), nullable=True),
        Column("horario_ajustado", String(64), nullable=True),
        Column("motivo", Text, nullable=True),
    )


class SqlAdjustmentStore(AdjustmentStoreProtocol):
    """Store de ajustes usando SQLAlchemy Core.

    Args:
        database_url: Connection string (vazia = não configurado)
        table_name: Nome da tabela de ajustes
        ssl_mode: sslmode para PostgreSQL (ex: "require"); ignorado em outros bancos
    """

    def __init__(
        self,
        database_url: str,
        *,
        table_name: str = DEFAULT_TABLE_NAME,
        ssl_mode: str = "",
    ) -> None:
        self._database_url = database_url
        self._ssl_mode = ssl_mode
        self._metadata = MetaData()
        self._table = build_adjustments_table(self._metadata, table_name)

    @property
    def table(self) -> Table:
        return self._table

    def validate(self) -> list[str]:
        if not self._database_url:
            return ["DATABASE_URL não configurada"]
        return []

    def _require_configured(self) -> None:
        errors = self.validate()
        if errors:
            raise ConfigurationError("; ".join(errors))

    def _connect_args(self) -> dict[str, Any]:
        if self._ssl_mode and self._database_url.startswith("postgresql"):
            return {"sslmode": self._ssl_mode}
        return {}

    @contextmanager
    def _connection(self) -> Iterator[Connection]:
        """Conexão com escopo da operação; engine descartado na saída."""
        engine = create_engine(
            self._database_url,
            poolclass=NullPool,
            connect_args=self._connect_args(),
        )
        try:
            with engine.connect() as connection:
                yield connection
        finally:
            engine.dispose()

    # ──────────────────────────────────────────────────────────────────────
    # Schema
    # ──────────────────────────────────────────────────────────────────────

    def create_schema_sync(self) -> None:
        """Cria a tabela se não existir."""
        self._require_configured()
        try:
            with self._connection() as connection:
                self._metadata.create_all(connection)
                connection.commit()
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Falha ao criar tabela {self._table.name}: {exc}") from exc
        logger.info("adjustments_table_ready", extra={"table": self._table.name})

    # ──────────────────────────────────────────────────────────────────────
    # Operações síncronas
    # ──────────────────────────────────────────────────────────────────────

    def insert_all_sync(self, records: Sequence[AdjustmentRecord]) -> None:
        self._require_configured()
        inserted = 0
        try:
            with self._connection() as connection:
                for record in records:
                    connection.execute(insert(self._table).values(**record.to_row()))
                    connection.commit()
                    inserted += 1
        except SQLAlchemyError as exc:
            logger.error(
                "adjustments_insert_failed",
                extra={
                    "component": _COMPONENT,
                    "inserted": inserted,
                    "requested": len(records),
                    "error_type": type(exc).__name__,
                },
            )
            raise PersistenceError(f"Falha ao gravar ajustes: {exc}") from exc

    def clear_all_sync(self) -> int:
        self._require_configured()
        try:
            with self._connection() as connection:
                result = connection.execute(delete(self._table))
                connection.commit()
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Falha ao apagar ajustes: {exc}") from exc
        return max(result.rowcount or 0, 0)

    def fetch_all_sync(self) -> list[AdjustmentRecord]:
        self._require_configured()
        columns = [self._table.c[name] for name in COLUMN_NAMES.values()]
        query = select(*columns).order_by(
            self._table.c.data_registro.desc(),
            self._table.c.id.asc(),
        )
        try:
            with self._connection() as connection:
                rows = connection.execute(query).mappings().all()
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Falha ao ler ajustes: {exc}") from exc
        return [AdjustmentRecord.from_row(dict(row)) for row in rows]

    # ──────────────────────────────────────────────────────────────────────
    # AdjustmentStoreProtocol (async)
    # ──────────────────────────────────────────────────────────────────────

    async def insert_all(self, records: Sequence[AdjustmentRecord]) -> None:
        started_at = time.perf_counter()
        await asyncio.to_thread(self.insert_all_sync, records)
        record_latency(_COMPONENT, "insert_all", (time.perf_counter() - started_at) * 1000)

    async def clear_all(self) -> int:
        started_at = time.perf_counter()
        count = await asyncio.to_thread(self.clear_all_sync)
        record_latency(_COMPONENT, "clear_all", (time.perf_counter() - started_at) * 1000)
        return count

    async def fetch_all(self) -> list[AdjustmentRecord]:
        started_at = time.perf_counter()
        records = await asyncio.to_thread(self.fetch_all_sync)
        record_latency(_COMPONENT, "fetch_all", (time.perf_counter() - started_at) * 1000)
        return records
