"""Testes para exportação CSV dos registros de ajuste."""

from __future__ import annotations

import csv
import io
from datetime import date

from app.domain.adjustment import AdjustmentRecord
from app.services.csv_exporter import (
    EMPTY_EXPORT_SENTINEL,
    UTF8_BOM,
    build_export_filename,
    to_csv,
)

HEADER = (
    '"data_registro";"filial";"email_gestor";"nome_gestor";'
    '"nome_colaborador";"data_ajuste";"horario_ajustado";"motivo"'
)


def _record(**overrides: str | None) -> AdjustmentRecord:
    values: dict[str, str | None] = {
        "registered_at": "2026-03-10 11:05:09",
        "branch": "SP01",
        "manager_email": "ana@empresa.com",
        "manager_name": "Ana",
        "collaborator_name": "Bruno",
        "adjustment_date": "2026-03-09",
        "adjusted_time": "08:00",
        "reason": "Esqueceu",
    }
    values.update(overrides)
    return AdjustmentRecord(**values)


class TestToCsv:
    """Testes para to_csv."""

    def test_empty_input_returns_sentinel(self) -> None:
        assert to_csv([]) == EMPTY_EXPORT_SENTINEL

    def test_bom_header_and_plain_row(self) -> None:
        content = to_csv([_record()])

        assert content.startswith(UTF8_BOM)
        lines = content.removeprefix(UTF8_BOM).split("\n")
        assert lines == [
            HEADER,
            "2026-03-10 11:05:09;SP01;ana@empresa.com;Ana;Bruno;2026-03-09;08:00;Esqueceu",
        ]

    def test_special_characters_are_quoted(self) -> None:
        content = to_csv([_record(reason='Disse "ok"; depois\nsaiu', branch=None)])
        body = content.removeprefix(UTF8_BOM)

        assert ';"Disse ""ok""; depois\nsaiu"' in body
        assert ";;ana@empresa.com;" in body

    def test_parses_back_with_semicolon_dialect(self) -> None:
        records = [_record(), _record(collaborator_name="Carla", reason="linha 1\nlinha 2")]
        reader = csv.reader(io.StringIO(to_csv(records).removeprefix(UTF8_BOM)), delimiter=";")
        rows = list(reader)
        assert rows[0][0] == "data_registro"
        assert rows[2][4] == "Carla"
        assert rows[2][7] == "linha 1\nlinha 2"
        assert len(rows) == 3


class TestBuildExportFilename:
    """Testes para build_export_filename."""

    def test_prefix_and_iso_date(self) -> None:
        assert build_export_filename("registros_ajustes", date(2026, 3, 10)) == "registros_ajustes_2026-03-10.csv"

    def test_defaults_to_today(self) -> None:
        assert build_export_filename("x").endswith(f"_{date.today().isoformat()}.csv")
