"""
Terminal core: session state, command registry and dispatcher.
"""

from termfolio.terminal.dispatcher import (
    CLEAR_COMMANDS,
    EXIT_COMMANDS,
    DispatchOutcome,
    Dispatcher,
    DispatcherState,
)
from termfolio.terminal.loader import load_all_commands, load_builtin_commands, load_user_commands
from termfolio.terminal.registry import (
    CommandContext,
    CommandEntry,
    CommandRegistry,
    command_registry,
)
from termfolio.terminal.session import HistoryBuffer, Transcript

__all__ = [
    "Dispatcher",
    "DispatcherState",
    "DispatchOutcome",
    "CLEAR_COMMANDS",
    "EXIT_COMMANDS",
    "CommandRegistry",
    "CommandEntry",
    "CommandContext",
    "command_registry",
    "Transcript",
    "HistoryBuffer",
    "load_builtin_commands",
    "load_user_commands",
    "load_all_commands",
]
