"""Webhook de Interactions do Discord."""

from .receive import parse_interaction_request

__all__ = ["parse_interaction_request"]
