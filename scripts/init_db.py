#!/usr/bin/env python3
"""Cria a tabela de ajustes no banco configurado em DATABASE_URL.

Uso:
    python scripts/init_db.py --apply
    python scripts/init_db.py --database-url sqlite:///ajustes.db --apply

Padrao: dry-run (apenas imprime o DDL, nao conecta no banco).
"""

from __future__ import annotations

import argparse
from dataclasses import replace

from sqlalchemy.schema import CreateTable

from app.infra.stores import SqlAdjustmentStore
from config.settings import get_storage_settings


def build_store(database_url: str | None, table_name: str | None) -> SqlAdjustmentStore:
    settings = get_storage_settings()
    if database_url:
        settings = replace(settings, database_url=database_url)
    return SqlAdjustmentStore(
        settings.normalized_database_url,
        table_name=table_name or settings.database_table,
        ssl_mode=settings.database_ssl_mode,
    )


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--database-url",
        default=None,
        help="Connection string. Se omitida, usa DATABASE_URL.",
    )
    parser.add_argument(
        "--table",
        default=None,
        help="Nome da tabela. Se omitido, usa DATABASE_TABLE.",
    )
    parser.add_argument(
        "--apply",
        action="store_true",
        help="Cria a tabela no banco. Sem esta flag executa dry-run.",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    store = build_store(args.database_url, args.table)
    if not args.apply:
        print(f"[dry-run] {str(CreateTable(store.table)).strip()}")
        return
    store.create_schema_sync()
    print(f"[apply] tabela {store.table.name} pronta")


if __name__ == "__main__":
    main()
