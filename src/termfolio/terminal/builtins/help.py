"""Help command - list commands or show help for one."""
from __future__ import annotations

from termfolio.core.datamodels import CommandRequest, CommandResult
from termfolio.terminal.registry import CommandContext, command_registry


@command_registry.register(
    "help",
    "Show this help message",
    usage="help [command]",
    examples=["help", "help projects"],
)
def cmd_help(request: CommandRequest, ctx: CommandContext) -> CommandResult:
    """List every command, or show usage and examples for one."""
    if request.args:
        topic = request.args[0]
        entry = ctx.registry.resolve(topic)
        if entry is None:
            return CommandResult.error(
                f"help: no such command '{topic}'. Type 'help' for available commands."
            )
        return CommandResult.output(entry.help_text())

    lines = ["Available commands:", ""]
    for entry in ctx.registry.all_commands():
        lines.append(f"  {entry.name:<16}{entry.description}")
    lines += ["", "Type 'help <command>' for usage and examples."]
    return CommandResult.output("\n".join(lines))
