"""Despacho de comandos de bot (Discord, Revolt).

Cada chamada cria uma FSM nova (IDLE -> ramo -> IDLE). Este módulo é a
fronteira de erro do request: toda exceção vira texto curto e seguro
para o canal, nunca propaga.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.coordinators.commands.models import Command, CommandReply
from app.domain.outcome import SearchFailed
from app.observability import get_correlation_id
from fsm import CommandState, CommandStateMachine, branch_for_command
from utils.errors import ConfigurationError, ValidationError

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.protocols.breach_store import BreachStoreProtocol
    from app.services.channel_profiles import ChannelProfile
    from app.services.channel_renderer import ChannelRenderer
    from app.use_cases.breaches import SearchOrchestrator

logger = logging.getLogger(__name__)

ERROR_DETAIL_CHARS = 100
TOKEN_NOT_CONFIGURED = "❌ API token not configured. Please contact administrator."
MISSING_QUERY = "❌ Please provide a search query!"


def format_error(message: str) -> str:
    """Mensagem de erro limitada a ERROR_DETAIL_CHARS caracteres de detalhe."""
    if len(message) > ERROR_DETAIL_CHARS:
        return f"❌ Error: {message[:ERROR_DETAIL_CHARS]}..."
    return f"❌ Error: {message}"


def help_text(profile: ChannelProfile) -> str:
    prefix = profile.command_prefix
    bold = profile.markup.bold
    return (
        f"🤖 {bold('Majic Breaches Bot Help')}\n\n"
        f"{bold('Commands:')}\n"
        f"`{prefix}search <query>` - Search data breaches\n"
        f"`{prefix}stats` - Show bot statistics\n"
        f"`{prefix}help` - Show this help message\n\n"
        f"{bold('Examples:')}\n"
        f"`{prefix}search john@example.com`\n"
        f"`{prefix}search username123`\n\n"
        "⚠️ This bot is for educational and security research purposes only."
    )


class CommandDispatcher:
    """Mapeia Command -> CommandReply.

    Args:
        orchestrator_factory: Cria o SearchOrchestrator sob demanda; pode
            levantar ConfigurationError quando o token externo falta
        store: Store usado pelo ramo stats
        renderer: Renderizador de resultados por canal
    """

    def __init__(
        self,
        orchestrator_factory: Callable[[], SearchOrchestrator],
        store: BreachStoreProtocol,
        renderer: ChannelRenderer,
    ) -> None:
        self._orchestrator_factory = orchestrator_factory
        self._store = store
        self._renderer = renderer

    async def dispatch(self, command: Command, profile: ChannelProfile) -> CommandReply:
        machine = CommandStateMachine(command_id=get_correlation_id())
        branch = branch_for_command(command.name)
        machine.enter(branch)

        try:
            reply = await self._run_branch(branch, command, profile)
        except ConfigurationError:
            logger.error("command_configuration_error", extra={"branch": branch.value})
            reply = CommandReply(content=TOKEN_NOT_CONFIGURED)
        except ValidationError as exc:
            reply = CommandReply(content=f"❌ {exc}")
        except Exception as exc:
            logger.exception(
                "command_failed",
                extra={"branch": branch.value, "channel": profile.name},
            )
            reply = CommandReply(content=format_error(str(exc) or type(exc).__name__))
        finally:
            machine.complete()

        logger.info(
            "command_dispatched",
            extra={
                "branch": branch.value,
                "channel": profile.name,
                "has_attachment": reply.attachment is not None,
                "transitions": machine.get_history_summary(),
            },
        )
        return reply

    async def _run_branch(
        self,
        branch: CommandState,
        command: Command,
        profile: ChannelProfile,
    ) -> CommandReply:
        if branch is CommandState.SEARCH:
            return await self._search(command, profile)
        if branch is CommandState.STATS:
            return await self._stats(profile)
        if branch is CommandState.HELP:
            return CommandReply(content=help_text(profile))
        if branch is CommandState.TEST:
            return CommandReply(
                content=f"✅ {profile.name.capitalize()} bot communication is working!"
            )
        return CommandReply(
            content=f"❌ Unknown command. Use `{profile.command_prefix}help` for available commands."
        )

    async def _search(self, command: Command, profile: ChannelProfile) -> CommandReply:
        query = command.query.strip()
        if not query:
            usage = f" Usage: `{profile.command_prefix}search <query>`" if profile.command_prefix else ""
            return CommandReply(content=f"{MISSING_QUERY}{usage}")

        orchestrator = self._orchestrator_factory()
        outcome = await orchestrator.run(query, command.limit, platform=profile.name)
        if isinstance(outcome, SearchFailed):
            if isinstance(outcome.error, ConfigurationError):
                raise outcome.error
            return CommandReply(content=format_error(f"Search failed: {outcome.error}"))

        results = await orchestrator.get_results(outcome.search_id)
        rendered = await self._renderer.render(results, query, outcome.result_count, profile)
        return CommandReply(content=rendered.body_text, attachment=rendered.attachment)

    async def _stats(self, profile: ChannelProfile) -> CommandReply:
        stats = await self._store.get_stats()
        bold = profile.markup.bold
        return CommandReply(
            content=(
                f"📊 {bold('Bot Statistics')}\n\n"
                f"🔍 Total Searches: {stats.total_searches:,}\n"
                f"📋 Total Results: {stats.total_results:,}"
            )
        )
