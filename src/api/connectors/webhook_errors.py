"""Erros de parsing de webhooks inbound, mapeados para HTTP pelas rotas."""

from utils.errors import AuthenticationError


class WebhookRequestError(ValueError):
    """Erro base para falhas de webhook."""


class InvalidSignatureError(WebhookRequestError, AuthenticationError):
    """Assinatura/token inválido ou ausente (HTTP 401)."""


class InvalidJsonError(WebhookRequestError):
    """JSON inválido no payload do webhook (HTTP 400)."""
