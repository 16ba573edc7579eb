"""
Command loader - registers built-in commands and discovers user commands.

Built-in commands live in ``termfolio.terminal.builtins`` and register
themselves on import. Extra commands can be dropped into
~/.termfolio/commands/, each in its own subdirectory with an __init__.py:

    # ~/.termfolio/commands/uptime/__init__.py
    from termfolio.core import CommandResult
    from termfolio.terminal import command_registry

    @command_registry.register("uptime", "Show how long I've been coding")
    def cmd_uptime(request, ctx):
        return CommandResult.output("Since 2010.")
"""

from __future__ import annotations

import importlib
import logging
import sys
from importlib.util import module_from_spec, spec_from_file_location
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

# Default user commands directory
USER_COMMANDS_DIR = Path.home() / ".termfolio" / "commands"

BUILTINS_PACKAGE = "termfolio.terminal.builtins"


def load_builtin_commands() -> None:
    """Import the built-in command modules (idempotent)."""
    importlib.import_module(BUILTINS_PACKAGE)


def discover_commands(commands_dir: Path) -> list[Path]:
    """
    Discover command directories in the given path.

    Each command must be in its own subdirectory with an __init__.py file.

    Args:
        commands_dir: Directory to search

    Returns:
        List of __init__.py paths for valid commands.
    """
    if not commands_dir.exists():
        return []

    if not commands_dir.is_dir():
        logger.warning(f"Commands path is not a directory: {commands_dir}")
        return []

    cmd_paths = []
    for subdir in sorted(commands_dir.iterdir()):
        if not subdir.is_dir():
            continue
        # Skip hidden and private directories
        if subdir.name.startswith((".", "_")):
            continue
        init_file = subdir / "__init__.py"
        if init_file.exists():
            cmd_paths.append(init_file)
        else:
            logger.debug(f"Skipping {subdir.name}: no __init__.py")

    return cmd_paths


def load_command(cmd_path: Path, prefix: str = "termfolio_cmd") -> tuple[str, bool, str]:
    """
    Load a single command module.

    Args:
        cmd_path: Path to the command's __init__.py file.
        prefix: Module name prefix for sys.modules

    Returns:
        Tuple of (cmd_name, success, error_message)
    """
    cmd_name = cmd_path.parent.name
    module_name = f"{prefix}.{cmd_name}"

    try:
        spec = spec_from_file_location(module_name, cmd_path)
        if spec is None or spec.loader is None:
            return (cmd_name, False, "Could not create module spec")

        module = module_from_spec(spec)
        sys.modules[module_name] = module
        spec.loader.exec_module(module)

        return (cmd_name, True, "")

    except SyntaxError as e:
        return (cmd_name, False, f"Syntax error: {e}")
    except ImportError as e:
        return (cmd_name, False, f"Import error: {e}")
    except Exception as e:
        return (cmd_name, False, f"Error: {e}")


def load_user_commands(user_dir: Optional[Path] = None) -> int:
    """
    Load all commands from the user directory.

    Args:
        user_dir: User commands directory (default: ~/.termfolio/commands)

    Returns:
        Number of successfully loaded commands.
    """
    user_dir = user_dir or USER_COMMANDS_DIR
    total_loaded = 0

    for cmd_path in discover_commands(user_dir):
        cmd_name, success, error = load_command(cmd_path)

        if success:
            total_loaded += 1
            logger.info(f"Loaded command: {cmd_name}")
        else:
            logger.warning(f"Failed to load command '{cmd_name}': {error}")

    return total_loaded


def load_all_commands(user_dir: Optional[Path] = None) -> int:
    """Load built-ins, then user commands (which may override built-ins)."""
    load_builtin_commands()
    return load_user_commands(user_dir)
