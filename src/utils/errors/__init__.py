"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    AuthenticationError,
    BreachLookupError,
    ConfigurationError,
    RemoteError,
    TransportError,
    ValidationError,
)

__all__ = [
    "AuthenticationError",
    "BreachLookupError",
    "ConfigurationError",
    "RemoteError",
    "TransportError",
    "ValidationError",
]
