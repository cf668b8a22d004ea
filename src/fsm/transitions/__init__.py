"""
Exports públicos do módulo fsm/transitions.

Grafo em estrela IDLE -> ramo -> IDLE usado pelo despacho de comandos.
"""

from fsm.transitions.rules import (
    VALID_TRANSITIONS,
    TransitionMap,
    get_valid_targets,
    is_transition_valid,
)

__all__ = [
    "VALID_TRANSITIONS",
    "TransitionMap",
    "get_valid_targets",
    "is_transition_valid",
]
