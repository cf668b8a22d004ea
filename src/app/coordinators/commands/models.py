"""Modelos de entrada/saída do despacho de comandos."""

from __future__ import annotations

from dataclasses import dataclass

from app.domain.breach import Attachment
from config.settings import DEFAULT_SEARCH_LIMIT


@dataclass(frozen=True, slots=True)
class Command:
    """Comando já extraído do payload do canal.

    Attributes:
        name: Subcomando (search, stats, help, test, ...)
        query: Termo de busca (apenas search)
        limit: Limite repassado à API externa
    """

    name: str
    query: str = ""
    limit: int = DEFAULT_SEARCH_LIMIT


@dataclass(frozen=True, slots=True)
class CommandReply:
    """Resposta textual pronta para o canal."""

    content: str
    attachment: Attachment | None = None
