"""Testes para o achatamento do lote em AdjustmentRecord."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from app.domain.adjustment import SubmissionBatch
from app.services.adjustment_normalizer import format_registered_at, normalize_batch
from utils.errors import ValidationError

FIXED_NOW = datetime(2026, 3, 10, 14, 5, 9, tzinfo=UTC)


def _batch(groups: list[dict] | None) -> SubmissionBatch:
    return SubmissionBatch.model_validate(
        {
            "nomeGestor": "Ana",
            "emailGestor": "ana@empresa.com",
            "filial": "SP01",
            "ajustesMultiColaborador": groups,
        }
    )


class TestNormalizeBatch:
    """Testes para normalize_batch."""

    def test_flattens_groups_in_order(self) -> None:
        batch = _batch(
            [
                {
                    "nomeColaborador": "Bruno",
                    "ajustes": [
                        {"data": "2026-03-09", "horario": "08:00", "motivo": "Esqueceu"},
                        {"data": "2026-03-10", "horario": "17:30", "motivo": "Reunião\nexterna"},
                    ],
                },
                {
                    "nomeColaborador": "Carla",
                    "ajustes": [{"data": "2026-03-08", "horario": "12:00", "motivo": "Almoço"}],
                },
            ]
        )

        records = normalize_batch(batch, now=FIXED_NOW)

        assert [r.collaborator_name for r in records] == ["Bruno", "Bruno", "Carla"]
        assert [r.adjustment_date for r in records] == ["2026-03-09", "2026-03-10", "2026-03-08"]
        assert records[1].reason == "Reunião\nexterna"

    def test_batch_fields_shared_by_every_record(self) -> None:
        batch = _batch(
            [
                {"nomeColaborador": "Bruno", "ajustes": [{"data": "2026-03-09"}, {"data": "2026-03-10"}]},
                {"nomeColaborador": "Carla", "ajustes": [{"data": "2026-03-11"}]},
            ]
        )

        records = normalize_batch(batch, now=FIXED_NOW)

        assert len(records) == 3
        assert {r.registered_at for r in records} == {"2026-03-10 11:05:09"}
        assert {(r.branch, r.manager_email, r.manager_name) for r in records} == {
            ("SP01", "ana@empresa.com", "Ana"),
        }

    def test_values_are_not_validated(self) -> None:
        """Email, data e horário seguem exatamente como vieram."""
        batch = SubmissionBatch.model_validate(
            {
                "emailGestor": "not-an-email",
                "ajustesMultiColaborador": [
                    {"nomeColaborador": "Bruno", "ajustes": [{"data": "31/02", "horario": "manhã"}]},
                ],
            }
        )

        [record] = normalize_batch(batch, now=FIXED_NOW)

        assert record.manager_email == "not-an-email"
        assert record.adjustment_date == "31/02"
        assert record.adjusted_time == "manhã"
        assert record.branch is None
        assert record.reason is None

    @pytest.mark.parametrize("groups", [None, []])
    def test_missing_or_empty_groups_rejected(self, groups: list | None) -> None:
        with pytest.raises(ValidationError, match="ajustesMultiColaborador"):
            normalize_batch(_batch(groups), now=FIXED_NOW)

    def test_groups_without_adjustments_rejected(self) -> None:
        batch = _batch([{"nomeColaborador": "Bruno", "ajustes": []}, {"nomeColaborador": "Carla"}])
        with pytest.raises(ValidationError):
            normalize_batch(batch, now=FIXED_NOW)

    def test_default_clock_renders_registration_format(self) -> None:
        batch = _batch([{"nomeColaborador": "Bruno", "ajustes": [{"data": "2026-03-09"}]}])
        [record] = normalize_batch(batch)
        assert datetime.strptime(record.registered_at, "%Y-%m-%d %H:%M:%S")


class TestFormatRegisteredAt:
    """Testes para format_registered_at."""

    def test_converts_aware_datetime_to_sao_paulo(self) -> None:
        assert format_registered_at(datetime(2026, 1, 1, 2, 0, 0, tzinfo=UTC)) == "2025-12-31 23:00:00"

    def test_naive_datetime_kept_as_is(self) -> None:
        assert format_registered_at(datetime(2026, 1, 1, 2, 0, 0)) == "2026-01-01 02:00:00"
