"""Exportacao dos registros de ajuste para CSV.

Formato adotado (compativel com Excel em pt-BR):
- separador ponto e virgula
- cabecalho com cada nome de coluna entre aspas
- prefixo BOM UTF-8 para preservar acentuacao
- campo entre aspas apenas quando contem separador, aspas ou quebra de linha
- lista vazia gera a sentinela EMPTY_EXPORT_SENTINEL
"""

from __future__ import annotations

import csv
import io
from datetime import date
from typing import TYPE_CHECKING

from app.domain.adjustment import COLUMN_NAMES

if TYPE_CHECKING:
    from collections.abc import Iterable

    from app.domain.adjustment import AdjustmentRecord

CSV_DELIMITER = ";"
CSV_LINE_TERMINATOR = "\n"
UTF8_BOM = "\ufeff"
EMPTY_EXPORT_SENTINEL = "Nenhum registro encontrado."


def to_csv(records: Iterable[AdjustmentRecord]) -> str:
    """Serializa registros em texto CSV (BOM + cabecalho + linhas)."""
    rows = [record.to_row() for record in records]
    if not rows:
        return EMPTY_EXPORT_SENTINEL

    headers = list(COLUMN_NAMES.values())
    buffer = io.StringIO(newline="")

    header_writer = csv.writer(
        buffer,
        delimiter=CSV_DELIMITER,
        lineterminator=CSV_LINE_TERMINATOR,
        quoting=csv.QUOTE_ALL,
    )
    header_writer.writerow(headers)

    row_writer = csv.writer(
        buffer,
        delimiter=CSV_DELIMITER,
        lineterminator=CSV_LINE_TERMINATOR,
        quoting=csv.QUOTE_MINIMAL,
    )
    for row in rows:
        row_writer.writerow(["" if row[column] is None else row[column] for column in headers])

    # Sem terminador apos a ultima linha.
    return UTF8_BOM + buffer.getvalue().removesuffix(CSV_LINE_TERMINATOR)


def build_export_filename(prefix: str, today: date | None = None) -> str:
    """Nome do arquivo de download: <prefixo>_<YYYY-MM-DD>.csv."""
    day = today or date.today()
    return f"{prefix}_{day.isoformat()}.csv"
