"""Normalizers: conversão de payloads externos para modelos internos.

Estrutura:
- leakosint/: classificação e achatamento de resultados da API LeakOSINT

Cada fonte externa tem seu próprio extractor e normalizer, mantendo SRP.
"""

from .leakosint import ResultNormalizer, normalize_results

__all__ = [
    "ResultNormalizer",
    "normalize_results",
]
