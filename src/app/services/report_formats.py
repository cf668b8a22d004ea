"""Formatos de relatório para exportação e download de resultados.

- text: bloco por resultado, usado no arquivo de overflow dos bots
- download: txt/json/html servidos pelo endpoint /download
"""

from __future__ import annotations

import html
import json
from datetime import UTC, datetime
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.domain.breach import NormalizedResult

REPORT_HEADER_RULE = "=" * 60
REPORT_RESULT_RULE = "-" * 40
DOWNLOAD_HEADER_RULE = "=" * 50
DOWNLOAD_RESULT_RULE = "-" * 30


class DownloadFormat(StrEnum):
    """Formatos aceitos em /download."""

    TXT = "txt"
    JSON = "json"
    HTML = "html"

    @classmethod
    def parse(cls, value: str | None) -> DownloadFormat:
        """Formato desconhecido ou ausente cai em txt."""
        try:
            return cls((value or "txt").lower())
        except ValueError:
            return cls.TXT


def iso_timestamp(moment: datetime | None = None) -> str:
    """ISO-8601 em UTC com milissegundos e sufixo Z."""
    moment = (moment or datetime.now(tz=UTC)).astimezone(UTC)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def render_text_report(
    results: Sequence[NormalizedResult],
    query_text: str,
    result_count: int,
    generated_at: datetime | None = None,
) -> str:
    """Relatório completo em texto plano (conteúdo sem truncamento)."""
    lines = [
        f"Search Results for: {query_text}",
        f"Total Results Found: {result_count}",
        f"Search Date: {iso_timestamp(generated_at)}",
        REPORT_HEADER_RULE,
        "",
    ]
    for index, result in enumerate(results, start=1):
        lines.append(f"Result #{index}")
        lines.append(f"Breach: {result.source_name}")
        lines.append(f"Matched Field: {result.matched_field}")
        lines.append(f"Data Types: {', '.join(result.data_type_names)}")
        lines.append(f"Content: {result.content}")
        if result.breach_date:
            lines.append(f"Breach Date: {result.breach_date}")
        if result.source_description:
            lines.append(f"Description: {result.source_description}")
        lines.append(REPORT_RESULT_RULE)
        lines.append("")
    return "\n".join(lines) + "\n"


def render_download_text(
    results: Sequence[NormalizedResult],
    generated_at: datetime | None = None,
) -> str:
    lines = [
        "Breach Search Results",
        f"Total Results: {len(results)}",
        f"Generated: {iso_timestamp(generated_at)}",
        DOWNLOAD_HEADER_RULE,
        "",
    ]
    for index, result in enumerate(results, start=1):
        lines.append(f"Result #{index}")
        lines.append(f"Breach: {result.source_name}")
        if result.breach_date:
            lines.append(f"Date: {result.breach_date}")
        lines.append(f"Matched Field: {result.matched_field}")
        lines.append(f"Content: {result.content}")
        if result.data_type_names:
            lines.append(f"Data Types: {', '.join(result.data_type_names)}")
        lines.append(DOWNLOAD_RESULT_RULE)
        lines.append("")
    return "\n".join(lines) + "\n"


def render_download_json(results: Sequence[NormalizedResult]) -> str:
    return json.dumps([result.to_api_dict() for result in results], indent=2, ensure_ascii=False)


_HTML_HEAD = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Breach Search Results</title>
    <style>
        body { font-family: Arial, sans-serif; margin: 20px; }
        .header { background: #f5f5f5; padding: 15px; border-radius: 5px; margin-bottom: 20px; }
        .result { border: 1px solid #ddd; margin-bottom: 15px; padding: 15px; border-radius: 5px; }
        .breach-name { font-weight: bold; color: #d32f2f; font-size: 1.1em; }
        .field { margin: 5px 0; }
        .label { font-weight: bold; }
        .content { background: #f9f9f9; padding: 10px; border-radius: 3px; font-family: monospace; white-space: pre-wrap; }
    </style>
</head>
<body>
"""


def render_download_html(
    results: Sequence[NormalizedResult],
    generated_at: datetime | None = None,
) -> str:
    """HTML com todo conteúdo externo escapado."""
    esc = html.escape
    parts = [
        _HTML_HEAD,
        '    <div class="header">\n',
        "        <h1>Breach Search Results</h1>\n",
        f"        <p><strong>Total Results:</strong> {len(results)}</p>\n",
        f"        <p><strong>Generated:</strong> {iso_timestamp(generated_at)}</p>\n",
        "    </div>\n",
    ]
    for index, result in enumerate(results, start=1):
        parts.append('    <div class="result">\n')
        parts.append(
            f'        <div class="breach-name">Result #{index}: {esc(result.source_name)}</div>\n'
        )
        if result.breach_date:
            parts.append(
                '        <div class="field"><span class="label">Date:</span> '
                f"{esc(result.breach_date)}</div>\n"
            )
        parts.append(
            '        <div class="field"><span class="label">Matched Field:</span> '
            f"{esc(result.matched_field)}</div>\n"
        )
        parts.append('        <div class="field"><span class="label">Content:</span></div>\n')
        parts.append(f'        <div class="content">{esc(result.content)}</div>\n')
        if result.data_type_names:
            parts.append(
                '        <div class="field"><span class="label">Data Types:</span> '
                f"{esc(', '.join(result.data_type_names))}</div>\n"
            )
        parts.append("    </div>\n")
    parts.append("</body>\n</html>\n")
    return "".join(parts)


def render_download(
    results: Sequence[NormalizedResult],
    fmt: DownloadFormat,
    search_id: str,
    generated_at: datetime | None = None,
) -> tuple[str, str, str]:
    """Renderiza resultados para download.

    Returns:
        (conteúdo, content-type, nome do arquivo)
    """
    if fmt is DownloadFormat.JSON:
        return (
            render_download_json(results),
            "application/json",
            f"breach_results_{search_id}.json",
        )
    if fmt is DownloadFormat.HTML:
        return (
            render_download_html(results, generated_at),
            "text/html; charset=utf-8",
            f"breach_results_{search_id}.html",
        )
    return (
        render_download_text(results, generated_at),
        "text/plain; charset=utf-8",
        f"breach_results_{search_id}.txt",
    )
