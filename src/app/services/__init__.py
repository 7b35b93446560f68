"""Serviços de aplicação.

Unidades reutilizáveis sem IO direto: normalização do lote, exportação
CSV e composição do email. Implementações concretas de IO ficam em
app/infra/.
"""

from app.services.adjustment_normalizer import normalize_batch
from app.services.adjustment_notifier import AdjustmentNotifier
from app.services.csv_exporter import build_export_filename, to_csv

__all__ = [
    "AdjustmentNotifier",
    "build_export_filename",
    "normalize_batch",
    "to_csv",
]
