"""
Feature-rich REPL implementation using prompt_toolkit.

Provides command completion, Up/Down recall through the dispatcher's
history buffer, and a toolbar showing which data has loaded.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from prompt_toolkit import PromptSession, print_formatted_text
from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.filters import has_completions
from prompt_toolkit.formatted_text import ANSI, FormattedText, HTML
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.shortcuts import clear as clear_screen
from prompt_toolkit.styles import Style

from termfolio.cli._render import banner
from termfolio.core.datamodels import EntryKind
from termfolio.terminal.dispatcher import DispatchOutcome

if TYPE_CHECKING:
    from termfolio.terminal import Dispatcher


STYLE = Style.from_dict({
    "user": "ansimagenta",
    "host": "ansigreen",
    "path": "ansiblue",
    "bottom-toolbar": "noreverse ansibrightblack",
})


class CommandCompleter(Completer):
    """Completes the command word from the registry, and topics after 'help '."""

    def __init__(self, dispatcher: "Dispatcher"):
        self.dispatcher = dispatcher

    def get_completions(self, document, complete_event):
        text = document.text_before_cursor.lstrip().lower()
        commands = self.dispatcher.registry.get_completions()

        if " " not in text:
            for name, description in commands.items():
                if name.startswith(text):
                    yield Completion(name, start_position=-len(text), display_meta=description)
            return

        word, _, rest = text.partition(" ")
        if word == "help" and " " not in rest:
            for name, description in commands.items():
                if name.startswith(rest):
                    yield Completion(name, start_position=-len(rest), display_meta=description)


def _prompt_message(user: str, host: str) -> HTML:
    return HTML(f"<user>{user}</user>@<host>{host}</host>:<path>~</path>$ ")


def _toolbar(dispatcher: "Dispatcher"):
    """Bottom toolbar listing provider load status."""
    def get_toolbar():
        parts = []
        for provider in dispatcher.data.providers():
            mark = "ok" if provider.is_loaded else "..."
            parts.append(f"{provider.name}: {mark}")
        return " | ".join(parts) + "  -  'help' for commands, 'gui' to leave"
    return get_toolbar


def print_entry(dispatcher: "Dispatcher") -> None:
    """Print the entry produced by the last completed dispatch."""
    if not len(dispatcher.transcript):
        return
    entry = dispatcher.transcript[-1]
    if entry.kind is EntryKind.ERROR:
        print_formatted_text(FormattedText([("ansired", entry.content)]))
    else:
        print_formatted_text(entry.content)
    print()


def history_bindings(dispatcher: "Dispatcher") -> KeyBindings:
    """Up/Down recall through the dispatcher's history buffer.

    Inactive while the completion menu is open so the arrows move through
    completions instead.
    """
    bindings = KeyBindings()

    @bindings.add("up", filter=~has_completions)
    def _(event):
        """Recall the previous (older) command."""
        buf = event.app.current_buffer
        buf.text = dispatcher.recall_older()
        buf.cursor_position = len(buf.text)

    @bindings.add("down", filter=~has_completions)
    def _(event):
        """Recall the next (newer) command, or an empty line."""
        buf = event.app.current_buffer
        buf.text = dispatcher.recall_newer()
        buf.cursor_position = len(buf.text)

    return bindings


def repl(dispatcher: "Dispatcher", user: str = "guest", host: str = "portfolio") -> None:
    """Run the interactive terminal.

    Features:
        - Tab completion for commands and 'help <command>'
        - Up/Down recall of previously entered commands
        - Ctrl+C to cancel input, Ctrl+D to exit
    """
    session: PromptSession = PromptSession(
        completer=CommandCompleter(dispatcher),
        key_bindings=history_bindings(dispatcher),
        style=STYLE,
        bottom_toolbar=_toolbar(dispatcher),
        refresh_interval=0.5,
    )

    print_formatted_text(ANSI(banner()))

    while True:
        try:
            line = session.prompt(_prompt_message(user, host))
        except KeyboardInterrupt:
            continue
        except EOFError:
            break

        outcome = dispatcher.submit(line)
        if outcome is DispatchOutcome.CLEARED:
            clear_screen()
        elif outcome is DispatchOutcome.EXIT_REQUESTED:
            break
        elif outcome is DispatchOutcome.COMPLETED:
            print_entry(dispatcher)
