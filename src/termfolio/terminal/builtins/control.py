"""Clear and gui commands.

Both are carried out by the dispatcher; they are registered here so that
``help`` and completion know about them.
"""
from __future__ import annotations

from termfolio.terminal.registry import command_registry

command_registry.register_control(
    "clear",
    "Clear terminal output",
    examples=["clear"],
)

command_registry.register_control(
    "gui",
    "Switch to GUI mode",
    examples=["gui", "exit"],
    aliases=["exit"],
)
