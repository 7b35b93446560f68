"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ConfigurationError,
    InfrastructureError,
    NotificationError,
    PersistenceError,
    ValidationError,
)

__all__ = [
    "ConfigurationError",
    "InfrastructureError",
    "NotificationError",
    "PersistenceError",
    "ValidationError",
]
