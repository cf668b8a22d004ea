"""Payload builders por canal: construção de respostas para plataformas externas.

Estrutura:
- discord/: respostas de Interactions (PONG, mensagem efêmera)
- revolt/: resposta JSON da ponte Revolt

Cada canal tem seus próprios builders, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
