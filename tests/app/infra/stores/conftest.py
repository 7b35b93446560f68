"""Fixtures compartilhadas dos testes de stores."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from app.domain.adjustment import AdjustmentRecord


@pytest.fixture
def make_record() -> Callable[..., AdjustmentRecord]:
    def _make(
        registered_at: str = "2026-03-10 11:05:09",
        collaborator_name: str = "Bruno",
        **overrides: str | None,
    ) -> AdjustmentRecord:
        values: dict[str, str | None] = {
            "registered_at": registered_at,
            "branch": "SP01",
            "manager_email": "ana@empresa.com",
            "manager_name": "Ana",
            "collaborator_name": collaborator_name,
            "adjustment_date": "2026-03-09",
            "adjusted_time": "08:00",
            "reason": "Esqueceu",
        }
        values.update(overrides)
        return AdjustmentRecord(**values)

    return _make
