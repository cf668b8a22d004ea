"""API: camada de borda e adapters de canais.

Responsabilidades:
- Receber requests de canais externos (webhooks)
- Validar assinaturas e payloads
- Normalizar dados para modelos internos
- Construir payloads de resposta por canal

Subpastas:
- connectors/: adapters HTTP por canal e cliente LeakOSINT
- normalizers/: conversão de payloads externos → modelos internos
- payload_builders/: construção de respostas por canal
- routes/: endpoints HTTP (webhooks, busca, health)

NÃO PODE conter: FSM, regras de despacho, orquestração de use cases.
"""
