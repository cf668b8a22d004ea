"""Testes dos builders de resposta de Discord e Revolt."""

from __future__ import annotations

from api.payload_builders.discord import build_message_response, build_pong_response
from api.payload_builders.revolt import build_ignored_reply, build_revolt_reply
from app.coordinators.commands import CommandReply
from app.domain.breach import Attachment


def test_pong() -> None:
    assert build_pong_response() == {"type": 1}


def test_message_response_is_ephemeral() -> None:
    assert build_message_response("hi") == {"type": 4, "data": {"content": "hi", "flags": 64}}


def test_message_response_caps_content() -> None:
    payload = build_message_response("x" * 2500)
    assert len(payload["data"]["content"]) == 2000


def test_revolt_reply_without_attachment() -> None:
    assert build_revolt_reply(CommandReply(content="ok")) == {"content": "ok"}


def test_revolt_reply_with_attachment() -> None:
    reply = CommandReply(
        content="ok",
        attachment=Attachment(url="https://h/files/1", filename="breach_search_q_1.txt"),
    )
    assert build_revolt_reply(reply) == {
        "content": "ok",
        "file_url": "https://h/files/1",
        "file_name": "breach_search_q_1.txt",
    }


def test_ignored_reply() -> None:
    assert build_ignored_reply() == {"content": None}
