"""Skills command - show technical skills grouped by category."""
from __future__ import annotations

from termfolio.core.datamodels import CommandRequest, CommandResult, Skill, is_loaded
from termfolio.terminal.registry import CommandContext, command_registry


def group_by_category(skills: list[Skill]) -> dict[str, list[Skill]]:
    """Group skills by category, categories in first-seen order."""
    groups: dict[str, list[Skill]] = {}
    for skill in skills:
        groups.setdefault(skill.category, []).append(skill)
    return groups


@command_registry.register("skills", "Show technical skills", examples=["skills"])
def cmd_skills(request: CommandRequest, ctx: CommandContext) -> CommandResult:
    state = ctx.data.get_skills()
    if not is_loaded(state):
        return CommandResult.output("Loading skills data...")
    if not state.items:
        return CommandResult.output("No skills listed yet.")

    lines: list[str] = []
    for category, skills in group_by_category(state.items).items():
        if lines:
            lines.append("")
        lines.append(category.upper())
        lines.append("  " + "  ".join(f"• {skill.name}" for skill in skills))
    return CommandResult.output("\n".join(lines))
