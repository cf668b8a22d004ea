"""Exceções de domínio para falhas da consulta de vazamentos.

Hierarquia única: todo erro esperado do core herda de BreachLookupError,
permitindo que o CommandDispatcher converta qualquer falha em resposta
textual limitada sem vazar detalhes internos.
"""

from __future__ import annotations


class BreachLookupError(RuntimeError):
    """Base para falhas esperadas do fluxo de busca."""


class ConfigurationError(BreachLookupError):
    """Credencial ou chave pública ausente/inválida."""


class TransportError(BreachLookupError):
    """Chamada HTTP externa não concluiu com status de sucesso."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RemoteError(BreachLookupError):
    """Serviço externo reportou erro no próprio payload."""

    def __init__(self, error_code: str) -> None:
        super().__init__(f"API Error: {error_code}")
        self.error_code = error_code


class ValidationError(BreachLookupError):
    """Entrada do usuário ausente ou mal-formada."""


class AuthenticationError(BreachLookupError):
    """Assinatura ou bearer token inválido."""
