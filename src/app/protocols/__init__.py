"""Protocolos e contratos do core da aplicação."""

from .blob_store import BlobStoreProtocol
from .breach_client import BreachQueryClientProtocol, ResultNormalizerProtocol
from .breach_store import BreachStoreProtocol

__all__ = [
    "BlobStoreProtocol",
    "BreachQueryClientProtocol",
    "BreachStoreProtocol",
    "ResultNormalizerProtocol",
]
