"""Resposta JSON consumida pelo processo do bot Revolt."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.coordinators.commands import CommandReply


def build_ignored_reply() -> dict[str, Any]:
    """Mensagem não era comando do bot: nada a responder."""
    return {"content": None}


def build_revolt_reply(reply: CommandReply) -> dict[str, Any]:
    payload: dict[str, Any] = {"content": reply.content}
    if reply.attachment is not None:
        payload["file_url"] = reply.attachment.url
        payload["file_name"] = reply.attachment.filename
    return payload
