"""Rotas HTTP da API.

Responsabilidades:
- Definir endpoints HTTP (ajustes, health)
- Leitura do corpo e delegação para use_cases
- Respostas HTTP apropriadas

Estrutura:
- routes/adjustments/: registrar, limpar e download
- routes/health/: health checks e readiness

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
