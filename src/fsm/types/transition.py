"""
Tipos e estruturas de dados para transições de estado.

Registros imutáveis usados para rastrear o ciclo de um comando.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from fsm.states.command import CommandState


@dataclass(frozen=True, slots=True)
class StateTransition:
    """
    Uma mudança de estado dentro de um único comando.

    Attributes:
        from_state: Estado de origem
        to_state: Estado de destino
        trigger: Gatilho ('command_received' ou 'command_completed')
        command_id: Identificador do comando (vazio quando não informado)
        metadata: Dados adicionais para auditoria (nunca conter PII)
        timestamp: Momento da transição (UTC)
    """

    from_state: CommandState
    to_state: CommandState
    trigger: str
    command_id: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        if not self.trigger or not self.trigger.strip():
            raise ValueError("trigger não pode ser vazio")

    @property
    def returns_to_idle(self) -> bool:
        return self.to_state is CommandState.IDLE

    def to_log_dict(self) -> dict[str, Any]:
        return {
            "command_id": self.command_id,
            "from_state": self.from_state.name,
            "to_state": self.to_state.name,
            "trigger": self.trigger,
            "timestamp": self.timestamp.isoformat(),
            "metadata": self.metadata,
        }


@dataclass(frozen=True, slots=True)
class TransitionResult:
    """Resultado de uma tentativa de transição.

    success=True exige transition; success=False exige error_reason.
    """

    success: bool
    transition: StateTransition | None = None
    error_reason: str | None = None

    def __post_init__(self) -> None:
        if self.success and self.transition is None:
            raise ValueError("Transição bem-sucedida deve incluir transition")
        if not self.success and self.error_reason is None:
            raise ValueError("Transição falha deve incluir error_reason")
