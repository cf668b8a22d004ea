"""Normalizer LeakOSINT: classificação e achatamento de resultados.

Responsabilidades:
- Classificar cada fonte do payload bruto (conhecida vs. desconhecida)
- Quarentenar fontes e registros fora do formato esperado
- Achatar registros em NormalizedResult detectando o campo casado
"""

from .extractor import (
    KnownSourceRecord,
    SourceRecord,
    UnknownSourceRecord,
    classify_sources,
)
from .normalizer import ResultNormalizer, normalize_record, normalize_results, render_value

__all__ = [
    "KnownSourceRecord",
    "ResultNormalizer",
    "SourceRecord",
    "UnknownSourceRecord",
    "classify_sources",
    "normalize_record",
    "normalize_results",
    "render_value",
]
