"""App — orquestração, casos de uso e infraestrutura do serviço de ajustes.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: modelos de lote e de registro de ajuste
- use_cases/: registrar, limpar e exportar ajustes
- services/: normalização, CSV e composição do email (sem IO direto)
- infra/: stores (SQL, Sheets, memória) e transportes de email
- protocols/: contratos/interfaces
- observability/: correlation_id e métricas em logs

Padrão: app executa; api adapta; config configura; utils apoia.
"""
