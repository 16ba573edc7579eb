#!/usr/bin/env python3
"""
CLI entry point for the terminal portfolio (termfolio command).
"""

from __future__ import annotations

import argparse
import logging
import sys
import webbrowser
from typing import Optional

from termfolio.config import DEFAULTS, Config, get_config_manager
from termfolio.core.datamodels import EntryKind
from termfolio.providers import FileCache, PortfolioData, build_portfolio
from termfolio.terminal import Dispatcher, DispatchOutcome, load_all_commands
from termfolio.utils.logging import close_logging, configure_logging

logger = logging.getLogger(__name__)

# How long non-interactive runs wait for providers before answering
COMMAND_WAIT_SECONDS = 30.0


def print_config():
    """Print current configuration."""
    cfg_mgr = get_config_manager()
    settings = cfg_mgr.list_settings()

    print(f"Config file: {cfg_mgr.CONFIG_FILE}")

    if settings:
        print("\nCustom settings:")
        for key, value in settings.items():
            print(f"  {key}: {value}")

    print("\nDefaults (used when not set):")
    for key, value in DEFAULTS.items():
        if key not in settings:
            print(f"  {key}: {value}")

    print("\nSet with: termfolio --set-config key=value")
    print(f"Available keys: {', '.join(Config.model_fields)}")
    print()


def make_exit_callback(site_url: Optional[str]):
    """Callback for 'gui'/'exit': hand over to the GUI site if one is configured."""
    def on_exit() -> None:
        if site_url:
            print(f"Switching to GUI mode: {site_url}")
            try:
                webbrowser.open(site_url)
            except webbrowser.Error as e:
                logger.warning(f"Could not open browser: {e}")
        else:
            print("Leaving terminal mode. Goodbye!")
    return on_exit


def run_commands(dispatcher: Dispatcher, commands: list[str]) -> int:
    """Run commands non-interactively, printing each result.

    Returns:
        1 if any command produced an error entry, else 0.
    """
    dispatcher.data.wait(COMMAND_WAIT_SECONDS)
    status = 0
    for command in commands:
        outcome = dispatcher.submit(command)
        if outcome is DispatchOutcome.EXIT_REQUESTED:
            break
        if outcome is not DispatchOutcome.COMPLETED:
            continue
        entry = dispatcher.transcript[-1]
        if entry.kind is EntryKind.ERROR:
            status = 1
            print(entry.content, file=sys.stderr)
        else:
            print(entry.content)
    return status


def build_parser(cfg: Config) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Terminal portfolio",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "examples:\n"
            "  termfolio                       # interactive terminal\n"
            "  termfolio -c projects -c skills # print and exit\n"
            "  termfolio --offline --simple"
        ),
    )
    parser.add_argument("-c", "--command", action="append", metavar="CMD",
                        help="Run a command and exit (repeatable)")
    parser.add_argument("--username", default=cfg.get("github_username"),
                        help=f"GitHub username (default: {cfg.get('github_username')})")
    parser.add_argument("--offline", action="store_true", default=cfg.get("offline"),
                        help="Do not contact GitHub; use cache or built-in data")
    parser.add_argument("--refresh", action="store_true",
                        help="Ignore fresh cache and re-fetch")
    parser.add_argument("--simple", action="store_true", default=cfg.get("simple"),
                        help="Use simple REPL (no prompt_toolkit)")
    parser.add_argument("--no-color", action="store_true",
                        help="Disable ANSI colors in the simple REPL")
    parser.add_argument("--clear-cache", action="store_true",
                        help="Delete cached GitHub data and exit")
    parser.add_argument("--debug", action="store_true",
                        help="Log debug output to stderr")
    parser.add_argument("--config", action="store_true",
                        help="Show configuration and exit")
    parser.add_argument("--set-config", metavar="KEY=VALUE",
                        help="Set a configuration value and exit")
    parser.add_argument("--unset-config", metavar="KEY",
                        help="Reset a configuration value and exit")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the termfolio CLI."""
    cfg_mgr = get_config_manager()
    cfg = cfg_mgr.config
    args = build_parser(cfg).parse_args(argv)

    if args.config:
        print_config()
        return 0

    if args.set_config:
        key, sep, value = args.set_config.partition("=")
        if not sep:
            print("Error: --set-config expects KEY=VALUE", file=sys.stderr)
            return 2
        try:
            cfg_mgr.set(key.strip(), value.strip())
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2
        print(f"Set {key.strip()} = {value.strip()}")
        return 0

    if args.unset_config:
        try:
            cfg_mgr.unset(args.unset_config)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2
        print(f"Unset {args.unset_config}")
        return 0

    if args.clear_cache:
        removed = FileCache().clear()
        print(f"Removed {removed} cached file(s).")
        return 0

    configure_logging(cfg.get("log_level"), debug=args.debug)
    data: Optional[PortfolioData] = None
    try:
        run_cfg = cfg.model_copy(update={
            "github_username": args.username,
            "offline": args.offline,
        })
        data = build_portfolio(run_cfg)
        data.start(force=args.refresh)

        load_all_commands()
        dispatcher = Dispatcher(
            data,
            on_exit=make_exit_callback(cfg.get("site_url")),
            transcript_limit=cfg.get("transcript_limit"),
        )

        if args.command:
            return run_commands(dispatcher, args.command)

        user, host = cfg.get("prompt_user"), cfg.get("prompt_host")
        if args.simple:
            from termfolio.cli._simple_repl import repl as simple_repl
            from termfolio.cli._render import colored_prompt, prompt_text

            color = not args.no_color
            prompt = colored_prompt(user, host) if color else prompt_text(user, host)
            simple_repl(dispatcher, prompt=prompt, color=color)
        else:
            from termfolio.cli import repl
            repl(dispatcher, user=user, host=host)
        return 0
    finally:
        if data is not None:
            data.close()
        close_logging()


if __name__ == "__main__":
    sys.exit(main())
