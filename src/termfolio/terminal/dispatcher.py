"""
Dispatcher - turns submitted input lines into transcript entries.

One dispatcher owns one session's transcript and history. Submissions are
handled synchronously; handlers only read already-cached provider data.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Callable, Optional

from termfolio.core.datamodels import CommandRequest, CommandResult, EntryKind
from termfolio.core.exceptions import CommandNotFoundError
from termfolio.terminal.registry import CommandContext, CommandRegistry
from termfolio.terminal.session import HistoryBuffer, Transcript

if TYPE_CHECKING:
    from termfolio.providers import PortfolioData

logger = logging.getLogger(__name__)


class DispatcherState(str, Enum):
    IDLE = "idle"
    DISPATCHING = "dispatching"
    EXIT_REQUESTED = "exit_requested"


class DispatchOutcome(str, Enum):
    IGNORED = "ignored"            # Blank input, nothing recorded
    COMPLETED = "completed"        # Output or error entry appended
    CLEARED = "cleared"            # Transcript wiped
    EXIT_REQUESTED = "exit_requested"


CLEAR_COMMANDS = frozenset({"clear"})
EXIT_COMMANDS = frozenset({"gui", "exit"})


def unknown_command(raw: str) -> CommandResult:
    return CommandResult.error(f"Command not found: {raw}. Type 'help' for available commands.")


class Dispatcher:
    """REPL core: resolves each submitted line and records the outcome.

    Args:
        data: Portfolio providers read by command handlers.
        registry: Commands to resolve against. Defaults to the global
            registry with built-in commands loaded.
        on_exit: Called when the user asks to leave terminal mode.
        transcript_limit: Optional cap on transcript entries.
    """

    def __init__(
        self,
        data: "PortfolioData",
        registry: Optional[CommandRegistry] = None,
        on_exit: Optional[Callable[[], None]] = None,
        transcript_limit: Optional[int] = None,
    ):
        if registry is None:
            from termfolio.terminal.loader import load_builtin_commands
            from termfolio.terminal.registry import command_registry
            load_builtin_commands()
            registry = command_registry

        self.data = data
        self.registry = registry
        self.on_exit = on_exit
        self.transcript = Transcript(limit=transcript_limit)
        self.history = HistoryBuffer()
        self.state = DispatcherState.IDLE

    @property
    def context(self) -> CommandContext:
        return CommandContext(data=self.data, registry=self.registry, history=self.history)

    def submit(self, line: str) -> DispatchOutcome:
        """Handle one input line.

        Blank lines are ignored. Otherwise the line is echoed as an input
        entry and pushed to history before the command runs.
        """
        request = CommandRequest.parse(line)
        if request is None:
            return DispatchOutcome.IGNORED

        self.state = DispatcherState.DISPATCHING
        self.transcript.add(EntryKind.INPUT, request.raw)
        self.history.push(request.raw)
        logger.debug(f"Dispatching: {request.raw!r}")

        if request.main_command in CLEAR_COMMANDS:
            self.transcript.clear()
            self.state = DispatcherState.IDLE
            return DispatchOutcome.CLEARED

        if request.main_command in EXIT_COMMANDS:
            self.state = DispatcherState.EXIT_REQUESTED
            if self.on_exit is not None:
                self.on_exit()
            return DispatchOutcome.EXIT_REQUESTED

        result = self.run(request)
        self.transcript.append(result.to_entry())
        self.state = DispatcherState.IDLE
        return DispatchOutcome.COMPLETED

    def run(self, request: CommandRequest) -> CommandResult:
        """Resolve and execute a request without touching session state."""
        try:
            entry = self.registry.require(request.main_command)
        except CommandNotFoundError:
            return unknown_command(request.raw)
        if entry.is_control:
            return unknown_command(request.raw)

        try:
            return entry.execute(request, self.context)
        except Exception as e:
            logger.exception(f"Command '{entry.name}' failed")
            return CommandResult.error(f"Command error: {e}")

    # History recall, for the input control
    def recall_older(self) -> str:
        return self.history.recall_older()

    def recall_newer(self) -> str:
        return self.history.recall_newer()
