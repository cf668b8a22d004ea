"""
Exports públicos do módulo fsm/manager.

Máquina de estados (CommandStateMachine) para despacho de comandos.
"""

from fsm.manager.machine import CommandStateMachine

__all__ = [
    "CommandStateMachine",
]
