"""
CLI module for termfolio.

Provides the interactive terminal shells and the command-line entry point.
"""

from termfolio.cli._repl import repl
from termfolio.cli._simple_repl import repl as simple_repl

__all__ = [
    "repl",
    "simple_repl",
]
