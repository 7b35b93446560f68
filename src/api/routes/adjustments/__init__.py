"""Rotas de ajustes de ponto (registrar, limpar, download)."""

from api.routes.adjustments.router import OperationResponse, router

__all__ = ["OperationResponse", "router"]
