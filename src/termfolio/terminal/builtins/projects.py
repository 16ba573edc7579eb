"""Projects command - list featured projects or show one in detail."""
from __future__ import annotations

from termfolio.core.datamodels import CommandRequest, CommandResult, Project, is_loaded
from termfolio.terminal.registry import CommandContext, command_registry


def _summary(project: Project, number: int) -> list[str]:
    links = []
    if project.repo_url:
        links.append("[repo]")
    if project.demo_url:
        links.append("[demo]")
    header = f"{number}. ➜ {project.title}"
    if links:
        header += "  " + " ".join(links)
    return [
        header,
        f"     {project.description}",
        f"     Stack: {', '.join(project.tech_stack)}",
    ]


def _detail(project: Project) -> str:
    lines = [project.title, "", project.description, "", f"Stack:    {', '.join(project.tech_stack)}"]
    if project.language:
        lines.append(f"Language: {project.language}")
    if project.stars is not None:
        lines.append(f"Stars:    {project.stars}")
    if project.repo_url:
        lines.append(f"Repo:     {project.repo_url}")
    if project.demo_url:
        lines.append(f"Demo:     {project.demo_url}")
    return "\n".join(lines)


@command_registry.register(
    "projects",
    "List featured projects",
    usage="projects [n]",
    examples=["projects", "projects 2"],
)
def cmd_projects(request: CommandRequest, ctx: CommandContext) -> CommandResult:
    """List projects, or show project number n."""
    state = ctx.data.get_projects()
    if not is_loaded(state):
        return CommandResult.output("Loading projects data...")

    projects = state.items
    if not projects:
        return CommandResult.output("No projects to show yet.")

    if request.args:
        arg = request.args[0]
        if not arg.isdecimal() or not 1 <= int(arg) <= len(projects):
            return CommandResult.error(
                f"projects: no project '{arg}'. Choose a number from 1 to {len(projects)}."
            )
        return CommandResult.output(_detail(projects[int(arg) - 1]))

    lines: list[str] = []
    for number, project in enumerate(projects, start=1):
        if lines:
            lines.append("")
        lines += _summary(project, number)
    lines += ["", "Type 'projects <n>' for details."]
    return CommandResult.output("\n".join(lines))
