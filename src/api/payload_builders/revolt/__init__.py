"""Builders de resposta para a ponte Revolt."""

from .reply import build_ignored_reply, build_revolt_reply

__all__ = ["build_ignored_reply", "build_revolt_reply"]
