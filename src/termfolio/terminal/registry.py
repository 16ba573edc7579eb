"""
Command registry for the terminal.

Commands are registered with a name, handler function, and help metadata.
Lookup is an exact match on the lowercased command word (or an alias).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Optional

from termfolio.core.datamodels import CommandRequest, CommandResult
from termfolio.core.exceptions import CommandNotFoundError

if TYPE_CHECKING:
    from termfolio.providers import PortfolioData
    from termfolio.terminal.session import HistoryBuffer


@dataclass
class CommandContext:
    """Read-only view handed to command handlers."""

    data: "PortfolioData"
    registry: "CommandRegistry"
    history: Optional["HistoryBuffer"] = None


CommandHandler = Callable[[CommandRequest, CommandContext], CommandResult]


@dataclass
class CommandEntry:
    """Entry for a registered command.

    Control commands (``clear``, ``gui``) are carried out by the dispatcher
    itself; their entries exist for help and completion and have no handler.
    """

    name: str
    handler: Optional[CommandHandler]
    description: str
    usage: Optional[str] = None
    examples: list[str] = field(default_factory=list)
    aliases: list[str] = field(default_factory=list)

    @property
    def is_control(self) -> bool:
        return self.handler is None

    def execute(self, request: CommandRequest, context: CommandContext) -> CommandResult:
        if self.handler is None:
            raise RuntimeError(f"'{self.name}' is handled by the dispatcher")
        return self.handler(request, context)

    def help_text(self) -> str:
        """Extended help shown by ``help <command>``."""
        lines = [f"{self.name} - {self.description}", f"Usage: {self.usage or self.name}"]
        if self.aliases:
            lines.append(f"Aliases: {', '.join(self.aliases)}")
        if self.examples:
            lines.append("Examples:")
            lines.extend(f"  {example}" for example in self.examples)
        return "\n".join(lines)


class CommandRegistry:
    """Registry for terminal commands, kept in registration order."""

    def __init__(self):
        self._commands: dict[str, CommandEntry] = {}
        self._aliases: dict[str, str] = {}

    def add(
        self,
        name: str,
        handler: Optional[CommandHandler],
        description: str,
        usage: Optional[str] = None,
        examples: Optional[list[str]] = None,
        aliases: Optional[list[str]] = None,
    ) -> CommandEntry:
        """Register a handler directly. Re-registering a name replaces it."""
        name = name.lower()
        entry = CommandEntry(
            name=name,
            handler=handler,
            description=description,
            usage=usage or name,
            examples=examples or [],
            aliases=[alias.lower() for alias in aliases or []],
        )
        self._commands[name] = entry
        for alias in entry.aliases:
            self._aliases[alias] = name
        return entry

    def register(
        self,
        name: str,
        description: str,
        usage: Optional[str] = None,
        examples: Optional[list[str]] = None,
        aliases: Optional[list[str]] = None,
    ) -> Callable[[CommandHandler], CommandHandler]:
        """Decorator to register a command.

        Example:
            @command_registry.register("hello", "Say hello", examples=["hello"])
            def cmd_hello(request, ctx):
                return CommandResult.output("Hello!")
        """
        def decorator(func: CommandHandler) -> CommandHandler:
            self.add(name, func, description, usage, examples, aliases)
            return func
        return decorator

    def register_control(
        self,
        name: str,
        description: str,
        usage: Optional[str] = None,
        examples: Optional[list[str]] = None,
        aliases: Optional[list[str]] = None,
    ) -> CommandEntry:
        """Register a dispatcher-handled command for help and completion."""
        return self.add(name, None, description, usage, examples, aliases)

    def resolve(self, keyword: str) -> Optional[CommandEntry]:
        """Get a command by exact name or alias (case-insensitive)."""
        keyword = keyword.lower()
        if keyword in self._commands:
            return self._commands[keyword]
        if keyword in self._aliases:
            return self._commands[self._aliases[keyword]]
        return None

    def require(self, keyword: str) -> CommandEntry:
        entry = self.resolve(keyword)
        if entry is None:
            raise CommandNotFoundError(keyword)
        return entry

    def all_commands(self) -> list[CommandEntry]:
        """All commands in registration order."""
        return list(self._commands.values())

    def get_completions(self) -> dict[str, str]:
        """Get command names and aliases with descriptions for completion."""
        result = {}
        for entry in self._commands.values():
            result[entry.name] = entry.description
            for alias in entry.aliases:
                result[alias] = entry.description
        return result

    def __contains__(self, keyword: str) -> bool:
        return self.resolve(keyword) is not None

    def __len__(self) -> int:
        return len(self._commands)


# Global command registry
command_registry = CommandRegistry()
