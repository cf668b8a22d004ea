"""Perfis de canal para renderização de resultados.

Diferenças entre canais são configuração (limites e markup), não lógica:
o mesmo algoritmo de renderização atende Discord, Revolt e a API web.
"""

from __future__ import annotations

from dataclasses import dataclass

MAX_BODY_CHARS = 1900
MAX_INLINE_RESULTS = 3


@dataclass(frozen=True, slots=True)
class MarkupStyle:
    """Wrappers de formatação do canal."""

    bold_wrap: str = ""
    italic_wrap: str = ""
    fence: str = ""

    def bold(self, text: str) -> str:
        return f"{self.bold_wrap}{text}{self.bold_wrap}"

    def italic(self, text: str) -> str:
        return f"{self.italic_wrap}{text}{self.italic_wrap}"

    def block(self, text: str) -> str:
        """Bloco de código; sem fence o texto vai cru."""
        if not self.fence:
            return text
        return f"{self.fence}\n{text}\n{self.fence}"


MARKDOWN = MarkupStyle(bold_wrap="**", italic_wrap="*", fence="```")
PLAIN = MarkupStyle()


@dataclass(frozen=True, slots=True)
class ChannelProfile:
    """Limites e estilo de um canal de saída.

    Attributes:
        name: Identificador do canal (também gravado como platform)
        max_body_chars: Teto absoluto do corpo renderizado
        max_inline_results: Acima disso o relatório vai para arquivo
        content_preview_chars: Prévia do content por resultado
        command_prefix: Prefixo usado nas mensagens de ajuda
        markup: Estilo de formatação
    """

    name: str
    max_body_chars: int = MAX_BODY_CHARS
    max_inline_results: int = MAX_INLINE_RESULTS
    content_preview_chars: int = 150
    command_prefix: str = ""
    markup: MarkupStyle = MARKDOWN


DISCORD_PROFILE = ChannelProfile(
    name="discord",
    content_preview_chars=120,
    command_prefix="/",
)
REVOLT_PROFILE = ChannelProfile(
    name="revolt",
    content_preview_chars=150,
    command_prefix="!breach ",
)
WEB_PROFILE = ChannelProfile(
    name="web",
    content_preview_chars=150,
    markup=PLAIN,
)

_PROFILES = {profile.name: profile for profile in (DISCORD_PROFILE, REVOLT_PROFILE, WEB_PROFILE)}


def get_channel_profile(name: str) -> ChannelProfile:
    """Retorna perfil pelo nome; desconhecido cai no perfil web."""
    return _PROFILES.get(name.lower(), WEB_PROFILE)
