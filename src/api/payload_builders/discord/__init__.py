"""Builders de resposta para Interactions do Discord."""

from .interaction import build_message_response, build_pong_response

__all__ = ["build_message_response", "build_pong_response"]
