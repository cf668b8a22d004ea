"""
Regras de transição válidas entre estados de comando.

Grafo em estrela: IDLE -> ramo -> IDLE. Ramo nunca transita para
outro ramo.
"""

from fsm.states.command import BRANCH_STATES, CommandState

# Tipagem explícita do mapa de transições
TransitionMap = dict[CommandState, frozenset[CommandState]]

# Chave: estado de origem
# Valor: conjunto de estados de destino permitidos
VALID_TRANSITIONS: TransitionMap = {
    CommandState.IDLE: BRANCH_STATES,
    CommandState.SEARCH: frozenset({CommandState.IDLE}),
    CommandState.STATS: frozenset({CommandState.IDLE}),
    CommandState.HELP: frozenset({CommandState.IDLE}),
    CommandState.TEST: frozenset({CommandState.IDLE}),
    CommandState.UNKNOWN: frozenset({CommandState.IDLE}),
}


def get_valid_targets(state: CommandState) -> frozenset[CommandState]:
    """
    Retorna os estados de destino válidos para um estado de origem.

    Args:
        state: Estado de origem

    Returns:
        Conjunto de estados de destino permitidos
    """
    return VALID_TRANSITIONS.get(state, frozenset())


def is_transition_valid(from_state: CommandState, to_state: CommandState) -> bool:
    """Verifica se uma transição é permitida pelo mapa."""
    return to_state in get_valid_targets(from_state)
