"""GitHub command - show the GitHub profile summary."""
from __future__ import annotations

from termfolio.core.datamodels import CommandRequest, CommandResult, is_loaded
from termfolio.terminal.registry import CommandContext, command_registry


@command_registry.register("github", "Show GitHub profile stats", examples=["github"])
def cmd_github(request: CommandRequest, ctx: CommandContext) -> CommandResult:
    state = ctx.data.get_profile()
    if not is_loaded(state) or not state.items:
        return CommandResult.output("Loading github data...")

    profile = state.items[0]
    lines = [profile.name or profile.html_url.rstrip("/").rsplit("/", 1)[-1]]
    if profile.bio:
        lines.append(profile.bio)
    lines.append("")
    lines.append(f"Repositories: {profile.public_repos}")
    lines.append(f"Followers:    {profile.followers}")
    if profile.location:
        lines.append(f"Location:     {profile.location}")
    lines.append(f"Profile:      {profile.html_url}")
    return CommandResult.output("\n".join(lines))
