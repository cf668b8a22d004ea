"""Serviços de aplicação.

Renderização por canal e exportação de relatórios (sem IO direto além
do blob store injetado). Implementações concretas de IO ficam em app/infra/.
"""

from app.services.channel_profiles import ChannelProfile, get_channel_profile
from app.services.channel_renderer import ChannelRenderer
from app.services.overflow_exporter import OverflowFileExporter

__all__ = [
    "ChannelProfile",
    "ChannelRenderer",
    "OverflowFileExporter",
    "get_channel_profile",
]
