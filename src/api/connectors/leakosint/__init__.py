"""Connector LeakOSINT: cliente HTTP da API de consulta de vazamentos."""

from .http_client import NO_RESULTS_SOURCE, LeakOsintClient, create_leakosint_client

__all__ = [
    "NO_RESULTS_SOURCE",
    "LeakOsintClient",
    "create_leakosint_client",
]
