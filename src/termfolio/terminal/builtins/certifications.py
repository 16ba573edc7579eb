"""Certifications command - list certifications and credentials."""
from __future__ import annotations

from termfolio.core.datamodels import CommandRequest, CommandResult, is_loaded
from termfolio.terminal.registry import CommandContext, command_registry


@command_registry.register(
    "certifications",
    "List certifications",
    examples=["certifications", "certs"],
    aliases=["certs"],
)
def cmd_certifications(request: CommandRequest, ctx: CommandContext) -> CommandResult:
    state = ctx.data.get_certifications()
    if not is_loaded(state):
        return CommandResult.output("Loading certifications data...")
    if not state.items:
        return CommandResult.output("No certifications listed yet.")

    lines: list[str] = []
    for cert in state.items:
        if lines:
            lines.append("")
        lines.append(f"★ {cert.name}")
        dates = f"Issued {cert.issue_date}"
        if cert.expiry_date:
            dates += f", expires {cert.expiry_date}"
        lines.append(f"  {cert.issuer} | {dates}")
        if cert.credential_id:
            lines.append(f"  Credential ID: {cert.credential_id}")
        if cert.credential_url:
            lines.append(f"  {cert.credential_url}")
    return CommandResult.output("\n".join(lines))
