"""Renderização de resultados para canais de chat.

Política:
- 0 resultados: corpo fixo, sem anexo
- até max_inline_results: tudo inline com prévia do content
- acima: relatório completo exportado + resumo dos primeiros resultados
- por fim, corte rígido em max_body_chars com marcador de truncamento
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.domain.breach import RenderedMessage

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.domain.breach import Attachment, NormalizedResult
    from app.services.channel_profiles import ChannelProfile
    from app.services.overflow_exporter import OverflowFileExporter

logger = logging.getLogger(__name__)

ELLIPSIS = "..."
DATA_TYPES_SHOWN = 3
QUERY_TITLE_CHARS = 50
NO_RESULTS_TEXT = "❌ No results found."


def preview(text: str, limit: int) -> str:
    """Primeiros `limit` caracteres, com reticências quando cortado."""
    if len(text) <= limit:
        return text
    return text[:limit] + ELLIPSIS


def format_data_types(names: Sequence[str], shown: int = DATA_TYPES_SHOWN) -> str:
    head = ", ".join(names[:shown])
    hidden = len(names) - shown
    if hidden > 0:
        return f"{head} +{hidden} more"
    return head


def truncation_marker(profile: ChannelProfile) -> str:
    return f"{ELLIPSIS}\n\n{profile.markup.italic('Response truncated')}"


def enforce_body_limit(body: str, profile: ChannelProfile) -> tuple[str, bool]:
    """Garante len(body) <= max_body_chars.

    Returns:
        (corpo final, truncado?)
    """
    if len(body) <= profile.max_body_chars:
        return body, False
    marker = truncation_marker(profile)
    keep = max(profile.max_body_chars - len(marker), 0)
    return (body[:keep] + marker)[: profile.max_body_chars], True


def _title(query_text: str, profile: ChannelProfile, *, shorten: bool = False) -> str:
    shown = preview(query_text, QUERY_TITLE_CHARS) if shorten else query_text
    heading = f'Search Results for "{shown}"'
    return f"🔍 {profile.markup.bold(heading)}"


def compose_no_results_body(query_text: str, profile: ChannelProfile) -> str:
    return f"{_title(query_text, profile)}\n\n{NO_RESULTS_TEXT}"


def compose_inline_body(
    results: Sequence[NormalizedResult],
    query_text: str,
    result_count: int,
    profile: ChannelProfile,
) -> str:
    markup = profile.markup
    parts = [f"{_title(query_text, profile)}\n\n📊 Found {result_count} total results\n\n"]
    for result in results:
        parts.append(f"{markup.bold(result.source_name)}\n")
        if result.source_description:
            parts.append(f"{markup.italic(result.source_description)}\n")
        parts.append(f"🎯 Match: {result.matched_field}\n")
        parts.append(f"📋 Data Types: {format_data_types(result.data_type_names)}\n")
        content = preview(result.content, profile.content_preview_chars)
        parts.append(f"{markup.block(content)}\n\n")
    return "".join(parts).rstrip("\n")


def compose_summary_body(
    results: Sequence[NormalizedResult],
    query_text: str,
    result_count: int,
    profile: ChannelProfile,
    attachment: Attachment | None,
) -> str:
    markup = profile.markup
    shown = results[: profile.max_inline_results]
    parts = [
        f"{_title(query_text, profile, shorten=True)}\n",
        f"📊 Found {result_count} total results (showing first {len(shown)})\n\n",
    ]
    for result in shown:
        parts.append(f"{markup.bold(result.source_name)}\n")
        parts.append(
            f"🎯 {result.matched_field} | 📋 {format_data_types(result.data_type_names)}\n"
        )
        content = preview(result.content, profile.content_preview_chars)
        parts.append(f"{markup.block(content)}\n\n")
    if attachment is not None:
        parts.append(f"📎 {markup.bold('Complete results:')} {attachment.url}")
    else:
        parts.append(f"📎 {markup.bold('Complete results file created but URL unavailable')}")
    return "".join(parts)


class ChannelRenderer:
    """Renderizador único para todos os canais.

    Args:
        exporter: Exportador usado no modo overflow
    """

    def __init__(self, exporter: OverflowFileExporter) -> None:
        self._exporter = exporter

    async def render(
        self,
        results: Sequence[NormalizedResult],
        query_text: str,
        result_count: int,
        profile: ChannelProfile,
    ) -> RenderedMessage:
        attachment: Attachment | None = None

        if result_count == 0 or not results:
            body = compose_no_results_body(query_text, profile)
        elif result_count <= profile.max_inline_results:
            body = compose_inline_body(results, query_text, result_count, profile)
        else:
            attachment = await self._exporter.export(results, query_text, result_count)
            body = compose_summary_body(results, query_text, result_count, profile, attachment)

        body, truncated = enforce_body_limit(body, profile)
        if truncated:
            logger.info(
                "render_truncated",
                extra={"channel": profile.name, "result_count": result_count},
            )
        return RenderedMessage(body_text=body, truncated=truncated, attachment=attachment)
