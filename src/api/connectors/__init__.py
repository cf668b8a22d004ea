"""Connectors por canal: adapters de borda para APIs externas.

Estrutura:
- leakosint/: API de consulta de vazamentos (saída)
- discord/: Interactions webhook (entrada, Ed25519)
- revolt/: Webhook da ponte Revolt (entrada, bearer token)

Cada canal tem seu próprio connector, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
