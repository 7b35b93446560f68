"""Use cases de ajustes de ponto (registrar, limpar, exportar)."""

from app.use_cases.adjustments.clear_adjustments import ClearAdjustmentsUseCase
from app.use_cases.adjustments.export_adjustments import CsvExport, ExportAdjustmentsUseCase
from app.use_cases.adjustments.submit_adjustments import SubmissionResult, SubmitAdjustmentsUseCase

__all__ = [
    "ClearAdjustmentsUseCase",
    "CsvExport",
    "ExportAdjustmentsUseCase",
    "SubmissionResult",
    "SubmitAdjustmentsUseCase",
]
