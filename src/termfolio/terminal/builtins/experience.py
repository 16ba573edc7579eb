"""Experience command - show the work and education timeline."""
from __future__ import annotations

from termfolio.core.datamodels import CommandRequest, CommandResult, TimelineEntry, is_loaded
from termfolio.terminal.registry import CommandContext, command_registry


def ordered(entries: list[TimelineEntry]) -> list[TimelineEntry]:
    """Sort by explicit order where given; unordered entries keep their place after."""
    return sorted(entries, key=lambda e: (e.order is None, e.order or 0))


@command_registry.register(
    "experience",
    "View work history and education",
    examples=["experience", "timeline"],
    aliases=["timeline"],
)
def cmd_experience(request: CommandRequest, ctx: CommandContext) -> CommandResult:
    state = ctx.data.get_timeline()
    if not is_loaded(state):
        return CommandResult.output("Loading experience data...")
    if not state.items:
        return CommandResult.output("No experience listed yet.")

    lines: list[str] = []
    for entry in ordered(state.items):
        if lines:
            lines.append("")
        lines += [
            f"● {entry.duration}",
            f"  {entry.role} @ {entry.company}",
            f"  {entry.description}",
        ]
    return CommandResult.output("\n".join(lines))
