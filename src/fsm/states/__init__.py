"""
Exports públicos do módulo fsm/states.

Estados do ciclo de vida de um comando de bot.
"""

from fsm.states.command import (
    BRANCH_STATES,
    DEFAULT_INITIAL_STATE,
    CommandState,
    branch_for_command,
    is_branch,
)

__all__ = [
    "BRANCH_STATES",
    "DEFAULT_INITIAL_STATE",
    "CommandState",
    "branch_for_command",
    "is_branch",
]
