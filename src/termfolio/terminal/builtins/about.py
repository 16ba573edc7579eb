"""About command - show biographical information."""
from __future__ import annotations

from termfolio.core.datamodels import CommandRequest, CommandResult
from termfolio.terminal.registry import CommandContext, command_registry


@command_registry.register("about", "Display biographical information", examples=["about"])
def cmd_about(request: CommandRequest, ctx: CommandContext) -> CommandResult:
    info = ctx.data.personal
    lines = [f"{info.name} - {info.title}"]
    if info.subtitle:
        lines.append(info.subtitle)
    lines += ["", info.bio]
    if info.location:
        lines += ["", f"Based in {info.location}."]
    return CommandResult.output("\n".join(lines))
