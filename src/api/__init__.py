"""API — camada de borda HTTP.

Responsabilidades:
- Receber requests do formulário de ajustes
- Converter erros de roteamento e de payload em respostas JSON

Subpastas:
- routes/: endpoints HTTP (ajustes, health)

NÃO PODE conter: regras de negócio, acesso direto a storage ou email.
"""
