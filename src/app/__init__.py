"""App: coração do sistema: orquestração, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- coordinators/: despacho de comandos de bot (fronteira de erro)
- use_cases/: casos de uso (busca de vazamentos)
- services/: renderização por canal e exportação de relatórios
- infra/: implementações concretas de IO (stores, crypto)
- protocols/: contratos/interfaces
- domain/: modelos de domínio imutáveis
- observability/: correlation_id para logs estruturados

Padrão: app executa; api adapta; fsm governa; utils apoia.
"""
