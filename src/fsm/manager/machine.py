"""
Máquina de estados (CommandStateMachine) para despacho de comandos.

Uma instância nova por invocação: IDLE -> ramo -> IDLE.
"""

from typing import Any

from fsm.states.command import DEFAULT_INITIAL_STATE, CommandState, is_branch
from fsm.transitions.rules import get_valid_targets, is_transition_valid
from fsm.types.transition import StateTransition, TransitionResult


class CommandStateMachine:
    """
    Máquina de estados de um único comando.

    Attributes:
        current_state: Estado atual da máquina
        history: Histórico de transições realizadas
    """

    __slots__ = ("_current_state", "_history", "_command_id")

    def __init__(self, command_id: str = "") -> None:
        self._current_state = DEFAULT_INITIAL_STATE
        self._history: list[StateTransition] = []
        self._command_id = command_id

    @property
    def current_state(self) -> CommandState:
        return self._current_state

    @property
    def history(self) -> list[StateTransition]:
        """Histórico de transições (cópia para evitar mutação externa)."""
        return list(self._history)

    @property
    def is_idle(self) -> bool:
        return self._current_state is CommandState.IDLE

    def get_valid_targets(self) -> frozenset[CommandState]:
        return get_valid_targets(self._current_state)

    def transition(
        self,
        target: CommandState,
        trigger: str,
        metadata: dict[str, Any] | None = None,
    ) -> TransitionResult:
        """
        Tenta realizar uma transição de estado.

        Args:
            target: Estado de destino
            trigger: Identificador do gatilho (ex: 'command_received')
            metadata: Dados adicionais para auditoria (nunca PII)

        Returns:
            TransitionResult com sucesso/falha e dados da transição
        """
        if not is_transition_valid(self._current_state, target):
            return TransitionResult(
                success=False,
                error_reason=(
                    f"Transição inválida: {self._current_state.name} → {target.name}"
                ),
            )

        transition = StateTransition(
            from_state=self._current_state,
            to_state=target,
            trigger=trigger,
            command_id=self._command_id,
            metadata=metadata or {},
        )
        self._current_state = target
        self._history.append(transition)
        return TransitionResult(success=True, transition=transition)

    def enter(self, branch: CommandState) -> TransitionResult:
        """IDLE -> ramo."""
        if not is_branch(branch):
            return TransitionResult(
                success=False,
                error_reason=f"Estado {branch.name} não é um ramo",
            )
        return self.transition(branch, "command_received")

    def complete(self) -> TransitionResult:
        """Ramo -> IDLE."""
        return self.transition(CommandState.IDLE, "command_completed")

    def get_history_summary(self) -> list[dict[str, Any]]:
        return [t.to_log_dict() for t in self._history]
