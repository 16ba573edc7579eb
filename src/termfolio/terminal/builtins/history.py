"""History command - list previously entered commands."""
from __future__ import annotations

from termfolio.core.datamodels import CommandRequest, CommandResult
from termfolio.terminal.registry import CommandContext, command_registry


@command_registry.register("history", "List previously entered commands", examples=["history"])
def cmd_history(request: CommandRequest, ctx: CommandContext) -> CommandResult:
    if ctx.history is None or not len(ctx.history):
        return CommandResult.output("No commands in history.")
    oldest_first = list(reversed(ctx.history.lines))
    width = len(str(len(oldest_first)))
    return CommandResult.output(
        "\n".join(f"{i:>{width}}  {line}" for i, line in enumerate(oldest_first, start=1))
    )
