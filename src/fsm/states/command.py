"""
Estados do ciclo de vida de um comando de bot.

Cada comando parte de IDLE, passa por exatamente um ramo
(SEARCH, STATS, HELP, TEST ou UNKNOWN) e volta para IDLE.
Nenhum estado sobrevive entre invocações.
"""

from enum import StrEnum


class CommandState(StrEnum):
    """
    Estados canônicos do despacho de comandos.

    Estados:
        - IDLE: Aguardando comando (início e fim de toda invocação)
        - SEARCH: Busca de vazamentos em andamento
        - STATS: Leitura de contadores agregados
        - HELP: Texto de ajuda
        - TEST: Verificação de comunicação
        - UNKNOWN: Comando não reconhecido
    """

    IDLE = "IDLE"
    SEARCH = "SEARCH"
    STATS = "STATS"
    HELP = "HELP"
    TEST = "TEST"
    UNKNOWN = "UNKNOWN"

    def __str__(self) -> str:
        return self.value


# Ramos alcançáveis a partir de IDLE
BRANCH_STATES: frozenset[CommandState] = frozenset({
    CommandState.SEARCH,
    CommandState.STATS,
    CommandState.HELP,
    CommandState.TEST,
    CommandState.UNKNOWN,
})

DEFAULT_INITIAL_STATE: CommandState = CommandState.IDLE

_COMMAND_BRANCHES: dict[str, CommandState] = {
    "search": CommandState.SEARCH,
    "stats": CommandState.STATS,
    "help": CommandState.HELP,
    "test": CommandState.TEST,
}


def branch_for_command(command_name: str | None) -> CommandState:
    """
    Resolve o ramo correspondente ao nome do comando.

    Args:
        command_name: Nome recebido do canal (case-insensitive)

    Returns:
        Estado do ramo; UNKNOWN para nomes não reconhecidos
    """
    return _COMMAND_BRANCHES.get((command_name or "").strip().lower(), CommandState.UNKNOWN)


def is_branch(state: CommandState) -> bool:
    """Verifica se o estado é um ramo de execução."""
    return state in BRANCH_STATES
