"""Contact command - show contact details."""
from __future__ import annotations

from termfolio.core.datamodels import CommandRequest, CommandResult
from termfolio.terminal.registry import CommandContext, command_registry


@command_registry.register("contact", "Display contact information", examples=["contact"])
def cmd_contact(request: CommandRequest, ctx: CommandContext) -> CommandResult:
    info = ctx.data.personal
    rows = [("Email", info.email), ("GitHub", info.github), ("LinkedIn", info.linkedin),
            ("Location", info.location)]
    lines = ["You can reach me at:", ""]
    lines += [f"  {label + ':':<10} {value}" for label, value in rows if value]
    lines += ["", "(Or use the contact form in GUI mode: type 'gui')"]
    return CommandResult.output("\n".join(lines))
