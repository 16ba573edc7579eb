"""
Plain-text rendering of transcript entries for console shells.
"""

from __future__ import annotations

from termfolio.core.datamodels import EntryKind, TranscriptEntry

# ANSI escape codes
GREY = "\033[90m"
RED = "\033[91m"
GREEN = "\033[92m"
BLUE = "\033[94m"
PURPLE = "\033[95m"
RESET = "\033[0m"
CLEAR_SCREEN = "\033[2J\033[H"

BANNER = r"""
 ____            _     __       _ _
|  _ \ ___  _ __| |_  / _| ___ | (_) ___
| |_) / _ \| '__| __|| |_ / _ \| | |/ _ \
|  __/ (_) | |  | |_ |  _| (_) | | | (_) |
|_|   \___/|_|   \__||_|  \___/|_|_|\___/
"""

WELCOME = "Welcome to the interactive terminal portfolio.\nType 'help' to see available commands."


def prompt_text(user: str, host: str) -> str:
    return f"{user}@{host}:~$ "


def colored_prompt(user: str, host: str) -> str:
    return f"{PURPLE}{user}{RESET}@{GREEN}{host}{RESET}:{BLUE}~{RESET}$ "


def render_entry(entry: TranscriptEntry, prompt: str = "$ ", color: bool = True) -> str:
    """Render one entry as it appears in the scrollback."""
    if entry.kind is EntryKind.INPUT:
        return f"{prompt}{entry.content}"
    if entry.kind is EntryKind.ERROR and color:
        return f"{RED}{entry.content}{RESET}"
    return entry.content


def banner(color: bool = True) -> str:
    art = f"{BLUE}{BANNER}{RESET}" if color else BANNER
    return f"{art}\n{WELCOME}\n"
