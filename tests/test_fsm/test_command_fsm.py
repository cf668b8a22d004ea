"""
Testes da FSM de despacho de comandos.

Cobre estados, mapa de transições e o ciclo IDLE -> ramo -> IDLE.
"""

import pytest

from fsm import (
    BRANCH_STATES,
    DEFAULT_INITIAL_STATE,
    VALID_TRANSITIONS,
    CommandState,
    CommandStateMachine,
    StateTransition,
    TransitionResult,
    branch_for_command,
    get_valid_targets,
    is_branch,
    is_transition_valid,
)


class TestCommandState:
    def test_initial_state_is_idle(self) -> None:
        assert DEFAULT_INITIAL_STATE is CommandState.IDLE
        assert not is_branch(CommandState.IDLE)

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("search", CommandState.SEARCH),
            ("STATS", CommandState.STATS),
            (" help ", CommandState.HELP),
            ("test", CommandState.TEST),
            ("invite", CommandState.UNKNOWN),
            ("", CommandState.UNKNOWN),
            (None, CommandState.UNKNOWN),
        ],
    )
    def test_branch_for_command(self, name: str | None, expected: CommandState) -> None:
        assert branch_for_command(name) is expected


class TestTransitionRules:
    def test_map_is_consistent(self) -> None:
        assert set(VALID_TRANSITIONS) == set(CommandState)

    def test_idle_reaches_every_branch(self) -> None:
        assert get_valid_targets(CommandState.IDLE) == BRANCH_STATES

    def test_branch_cannot_reach_another_branch(self) -> None:
        assert not is_transition_valid(CommandState.SEARCH, CommandState.STATS)
        assert is_transition_valid(CommandState.SEARCH, CommandState.IDLE)


class TestCommandStateMachine:
    def test_full_cycle(self) -> None:
        machine = CommandStateMachine("cmd-1")
        assert machine.enter(CommandState.SEARCH).success
        assert machine.current_state is CommandState.SEARCH
        assert machine.complete().success
        assert machine.is_idle

        triggers = [t.trigger for t in machine.history]
        assert triggers == ["command_received", "command_completed"]

    def test_enter_rejects_non_branch(self) -> None:
        result = CommandStateMachine().enter(CommandState.IDLE)
        assert not result.success
        assert "não é um ramo" in (result.error_reason or "")

    def test_complete_from_idle_is_rejected(self) -> None:
        machine = CommandStateMachine()
        result = machine.complete()
        assert not result.success
        assert machine.history == []

    def test_history_is_copy(self) -> None:
        machine = CommandStateMachine()
        machine.enter(CommandState.HELP)
        machine.history.clear()
        assert len(machine.history) == 1

    def test_history_summary(self) -> None:
        machine = CommandStateMachine("cmd-2")
        machine.enter(CommandState.STATS)
        history = machine.get_history_summary()
        assert history[0]["to_state"] == "STATS"
        assert history[0]["command_id"] == "cmd-2"
        assert not machine.history[0].returns_to_idle


class TestTransitionTypes:
    def test_empty_trigger_rejected(self) -> None:
        with pytest.raises(ValueError):
            StateTransition(CommandState.IDLE, CommandState.HELP, trigger=" ")

    def test_result_consistency(self) -> None:
        with pytest.raises(ValueError):
            TransitionResult(success=True)
        with pytest.raises(ValueError):
            TransitionResult(success=False)
