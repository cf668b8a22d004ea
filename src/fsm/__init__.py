"""
Módulo FSM: Máquina de Estados para despacho de comandos de bot.

Cada invocação percorre IDLE -> ramo -> IDLE, sem estado entre
invocações.

Estrutura:
    - states/: Definições dos estados (CommandState enum)
    - transitions/: Regras de transição (VALID_TRANSITIONS)
    - manager/: Máquina de estados (CommandStateMachine)
    - types/: Tipos de dados (StateTransition, TransitionResult)
"""

# Manager
from fsm.manager import CommandStateMachine

# Estados
from fsm.states import (
    BRANCH_STATES,
    DEFAULT_INITIAL_STATE,
    CommandState,
    branch_for_command,
    is_branch,
)

# Transições
from fsm.transitions import (
    VALID_TRANSITIONS,
    get_valid_targets,
    is_transition_valid,
)

# Types
from fsm.types import (
    StateTransition,
    TransitionResult,
)

__all__ = [
    "BRANCH_STATES",
    "DEFAULT_INITIAL_STATE",
    # Transições
    "VALID_TRANSITIONS",
    # Estados
    "CommandState",
    # Manager
    "CommandStateMachine",
    # Types
    "StateTransition",
    "TransitionResult",
    "branch_for_command",
    "get_valid_targets",
    "is_branch",
    "is_transition_valid",
]
