"""Modelos do payload de Interactions do Discord."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from app.coordinators.commands.models import Command
from config.settings import get_leakosint_settings

INTERACTION_PING = 1
INTERACTION_APPLICATION_COMMAND = 2
RESPONSE_PONG = 1
RESPONSE_CHANNEL_MESSAGE = 4
EPHEMERAL_FLAG = 64


class InteractionOption(BaseModel):
    """Opção posicional de um slash command."""

    model_config = ConfigDict(extra="ignore")

    name: str
    value: str | int | float | bool | None = None
    type: int | None = None


class InteractionData(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = ""
    options: list[InteractionOption] = Field(default_factory=list)

    def option(self, name: str) -> InteractionOption | None:
        return next((opt for opt in self.options if opt.name == name), None)


class Interaction(BaseModel):
    """Envelope de interaction (ping ou comando)."""

    model_config = ConfigDict(extra="ignore")

    type: int
    id: str | None = None
    data: InteractionData | None = None
    guild_id: str | None = None
    channel_id: str | None = None

    @property
    def is_ping(self) -> bool:
        return self.type == INTERACTION_PING

    @property
    def is_command(self) -> bool:
        return self.type == INTERACTION_APPLICATION_COMMAND


def command_from_interaction(interaction: Interaction) -> Command:
    """Extrai Command das opções do slash command.

    query só é aceita como string; limit só como número (não booleano).
    """
    data = interaction.data or InteractionData()
    query_option = data.option("query")
    limit_option = data.option("limit")

    query = query_option.value if query_option and isinstance(query_option.value, str) else ""

    limit = get_leakosint_settings().default_limit
    if limit_option is not None:
        value: Any = limit_option.value
        if isinstance(value, int | float) and not isinstance(value, bool) and value > 0:
            limit = int(value)

    return Command(name=data.name, query=query, limit=limit)
