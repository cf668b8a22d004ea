"""Agregador de settings do Majic Breaches.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    StoreBackend,
    StoreSettings,
    get_base_settings,
    get_store_settings,
)

# Channel-specific settings
from config.settings.discord import (
    SIGNATURE_HEADER,
    TIMESTAMP_HEADER,
    DiscordSettings,
    get_discord_settings,
)

# Serviço externo
from config.settings.leakosint import (
    DEFAULT_SEARCH_LIMIT,
    LEAKOSINT_API_URL,
    LeakOsintSettings,
    get_leakosint_settings,
)
from config.settings.revolt import (
    DEFAULT_COMMAND_PREFIX,
    RevoltSettings,
    get_revolt_settings,
)

__all__ = [
    # Constants
    "DEFAULT_COMMAND_PREFIX",
    "DEFAULT_SEARCH_LIMIT",
    "LEAKOSINT_API_URL",
    "SIGNATURE_HEADER",
    "TIMESTAMP_HEADER",
    # Base
    "BaseSettings",
    # Channels
    "DiscordSettings",
    "Environment",
    # External
    "LeakOsintSettings",
    "RevoltSettings",
    "StoreBackend",
    "StoreSettings",
    "get_base_settings",
    "get_discord_settings",
    "get_leakosint_settings",
    "get_revolt_settings",
    "get_store_settings",
]
