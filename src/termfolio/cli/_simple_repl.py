"""
Simple REPL using input(), for terminals without prompt_toolkit support.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Optional, TextIO

from termfolio.cli._render import CLEAR_SCREEN, banner, render_entry
from termfolio.terminal.dispatcher import DispatchOutcome

if TYPE_CHECKING:
    from termfolio.terminal import Dispatcher


def print_result(dispatcher: "Dispatcher", out: Optional[TextIO] = None, color: bool = True) -> None:
    """Print the entry produced by the last completed dispatch."""
    out = out or sys.stdout
    if len(dispatcher.transcript):
        print(render_entry(dispatcher.transcript[-1], color=color), file=out)
        print(file=out)


def repl(dispatcher: "Dispatcher", prompt: str = "guest@portfolio:~$ ", color: bool = True) -> None:
    """Run the terminal until EOF or a 'gui'/'exit' command.

    Ctrl+C discards the current line; Ctrl+D exits.
    """
    print(banner(color))

    while True:
        try:
            line = input(prompt)
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print()
            continue

        outcome = dispatcher.submit(line)
        if outcome is DispatchOutcome.CLEARED:
            if color:
                print(CLEAR_SCREEN, end="", flush=True)
            continue
        if outcome is DispatchOutcome.EXIT_REQUESTED:
            break
        if outcome is DispatchOutcome.COMPLETED:
            print_result(dispatcher, color=color)
