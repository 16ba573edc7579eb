#!/usr/bin/env python3
"""
Tests for the termfolio command-line entry point and simple REPL.
"""

import io
import json
from contextlib import redirect_stdout
import pytest
from unittest.mock import MagicMock, patch

from prompt_toolkit.filters import Always
from prompt_toolkit.keys import Keys

from termfolio.cli import main as cli_main
from termfolio.cli._render import prompt_text, render_entry
from termfolio.cli._repl import history_bindings
from termfolio.cli._simple_repl import print_result, repl as simple_repl
from termfolio.config import ConfigManager
from termfolio.core import EntryKind, TranscriptEntry
from termfolio.providers import PortfolioData
from termfolio.providers.content import FALLBACK_PROJECTS
from termfolio.terminal import Dispatcher


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def home(tmp_path):
    """Redirect config, cache, logs and user commands into tmp_path."""
    config_dir = tmp_path / ".termfolio"
    with patch.object(ConfigManager, 'CONFIG_DIR', config_dir), \
            patch.object(ConfigManager, 'CONFIG_FILE', config_dir / "config.json"), \
            patch("termfolio.cli.main.get_config_manager", return_value=ConfigManager()), \
            patch("termfolio.providers.cache.DEFAULT_CACHE_DIR", config_dir / "cache"), \
            patch("termfolio.utils.logging.LOGS_DIR", config_dir / "logs"), \
            patch("termfolio.terminal.loader.USER_COMMANDS_DIR", config_dir / "commands"):
        yield config_dir


# ============================================================================
# Non-interactive commands
# ============================================================================

class TestRunCommands:

    def test_help(self, home, capsys):
        assert cli_main.main(["--offline", "-c", "help"]) == 0
        out = capsys.readouterr().out
        assert "Available commands:" in out
        assert "projects" in out

    def test_offline_projects_use_fallback(self, home, capsys):
        assert cli_main.main(["--offline", "-c", "projects"]) == 0
        assert FALLBACK_PROJECTS[0].title in capsys.readouterr().out

    def test_multiple_commands(self, home, capsys):
        assert cli_main.main(["--offline", "-c", "about", "-c", "clear", "-c", "contact"]) == 0
        assert "You can reach me at:" in capsys.readouterr().out

    def test_unknown_command_fails(self, home, capsys):
        assert cli_main.main(["--offline", "-c", "nosuch"]) == 1
        assert "Command not found: nosuch" in capsys.readouterr().err

    def test_gui_stops_processing(self, home, capsys):
        assert cli_main.main(["--offline", "-c", "gui", "-c", "about"]) == 0
        out = capsys.readouterr().out
        assert "Goodbye" in out
        assert "Based in" not in out

    def test_writes_log_file(self, home):
        cli_main.main(["--offline", "-c", "help"])
        log = (home / "logs" / "termfolio.log").read_text()
        assert "termfolio started" in log


# ============================================================================
# Config and cache flags
# ============================================================================

class TestConfigFlags:

    def test_show_config(self, home, capsys):
        assert cli_main.main(["--config"]) == 0
        out = capsys.readouterr().out
        assert "Config file:" in out
        assert "github_username" in out

    def test_set_config(self, home, capsys):
        assert cli_main.main(["--set-config", "cache_ttl_hours=6"]) == 0
        data = json.loads((home / "config.json").read_text())
        assert data["cache_ttl_hours"] == 6.0

    @pytest.mark.parametrize("arg", ["cache_ttl_hours", "nosuch=1", "transcript_limit=lots"])
    def test_set_config_errors(self, home, capsys, arg):
        assert cli_main.main(["--set-config", arg]) == 2
        assert "Error" in capsys.readouterr().err

    def test_unset_config(self, home, capsys):
        cli_main.main(["--set-config", "site_url=https://octo.dev"])
        assert cli_main.main(["--unset-config", "site_url"]) == 0
        data = json.loads((home / "config.json").read_text())
        assert data["site_url"] is None

    def test_clear_cache(self, home, capsys):
        cache_dir = home / "cache"
        cache_dir.mkdir(parents=True)
        (cache_dir / "github-projects-cache.json").write_text("{}")
        assert cli_main.main(["--clear-cache"]) == 0
        assert "Removed 1 cached file(s)." in capsys.readouterr().out


# ============================================================================
# Simple REPL
# ============================================================================

class TestSimpleRepl:

    @pytest.fixture
    def dispatcher(self):
        return Dispatcher(PortfolioData.static())

    def test_runs_until_gui(self, dispatcher, capsys):
        lines = iter(["", "about", "gui", "skills"])
        with patch("builtins.input", side_effect=lambda prompt: next(lines)):
            simple_repl(dispatcher, color=False)
        out = capsys.readouterr().out
        assert dispatcher.data.personal.bio in out
        assert "FRONTEND" not in out
        assert dispatcher.history.lines == ["gui", "about"]

    def test_stops_on_eof(self, dispatcher, capsys):
        with patch("builtins.input", side_effect=EOFError):
            simple_repl(dispatcher, color=False)
        assert len(dispatcher.transcript) == 0

    def test_print_result_follows_redirected_stdout(self, dispatcher):
        dispatcher.submit("contact")
        buf = io.StringIO()
        with redirect_stdout(buf):
            print_result(dispatcher, color=False)
        assert "You can reach me at:" in buf.getvalue()

    def test_print_result_explicit_stream(self, dispatcher):
        dispatcher.submit("nosuch")
        buf = io.StringIO()
        print_result(dispatcher, out=buf, color=False)
        assert buf.getvalue().startswith("Command not found: nosuch")


class TestRender:

    def test_input_entry_uses_prompt(self):
        entry = TranscriptEntry(kind=EntryKind.INPUT, content="help")
        assert render_entry(entry, prompt=prompt_text("guest", "portfolio")) == \
            "guest@portfolio:~$ help"

    def test_error_colored(self):
        entry = TranscriptEntry(kind=EntryKind.ERROR, content="nope")
        assert render_entry(entry, color=False) == "nope"
        assert render_entry(entry).startswith("\033[91m")


# ============================================================================
# prompt_toolkit key bindings
# ============================================================================

class TestHistoryBindings:

    @pytest.fixture
    def dispatcher(self):
        dispatcher = Dispatcher(PortfolioData.static())
        for line in ["about", "skills"]:
            dispatcher.submit(line)
        return dispatcher

    def _binding(self, bindings, key):
        (binding,) = bindings.get_bindings_for_keys((key,))
        return binding

    def test_up_down_recall(self, dispatcher):
        bindings = history_bindings(dispatcher)
        event = MagicMock()
        buf = event.app.current_buffer

        self._binding(bindings, Keys.Up).handler(event)
        assert buf.text == "skills"
        assert buf.cursor_position == len("skills")
        self._binding(bindings, Keys.Up).handler(event)
        assert buf.text == "about"
        self._binding(bindings, Keys.Down).handler(event)
        assert buf.text == "skills"

    @pytest.mark.parametrize("key", [Keys.Up, Keys.Down])
    def test_inactive_while_completing(self, dispatcher, key):
        """Arrows are left to the completion menu when it is open."""
        binding = self._binding(history_bindings(dispatcher), key)
        assert not isinstance(binding.filter, Always)
        assert binding.filter()  # no completion menu outside an application


class TestCleanup:

    def test_main_closes_portfolio(self, home):
        with patch.object(PortfolioData, "close", autospec=True) as close:
            cli_main.main(["--offline", "-c", "about"])
        close.assert_called_once()

    def test_main_closes_portfolio_on_error(self, home):
        with patch.object(PortfolioData, "close", autospec=True) as close, \
                patch("termfolio.cli.main.run_commands", side_effect=RuntimeError("boom")):
            with pytest.raises(RuntimeError):
                cli_main.main(["--offline", "-c", "about"])
        close.assert_called_once()
