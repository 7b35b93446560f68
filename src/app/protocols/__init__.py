"""Protocolos e contratos do core da aplicação."""

from .adjustment_store import AdjustmentStoreProtocol
from .email_transport import EmailMessage, EmailTransportProtocol

__all__ = [
    "AdjustmentStoreProtocol",
    "EmailMessage",
    "EmailTransportProtocol",
]
