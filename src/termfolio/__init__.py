"""
termfolio - a terminal portfolio.

A command interpreter over portfolio content (projects, skills, timeline,
certifications) served by cached, GitHub-backed data providers.

Example usage:
    from termfolio import Dispatcher, PortfolioData

    data = PortfolioData.static()
    terminal = Dispatcher(data)
    terminal.submit("projects")
    print(terminal.transcript[-1].content)
"""

__version__ = "0.1.0"

from termfolio.core import (
    CommandRequest,
    CommandResult,
    EntryKind,
    Loaded,
    LOADING,
    TermfolioError,
    TranscriptEntry,
)
from termfolio.providers import DataProvider, PortfolioData, build_portfolio
from termfolio.terminal import (
    CommandRegistry,
    Dispatcher,
    DispatchOutcome,
    HistoryBuffer,
    Transcript,
    command_registry,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "CommandRequest",
    "CommandResult",
    "EntryKind",
    "TranscriptEntry",
    "Loaded",
    "LOADING",
    "TermfolioError",
    # Providers
    "DataProvider",
    "PortfolioData",
    "build_portfolio",
    # Terminal
    "Dispatcher",
    "DispatchOutcome",
    "CommandRegistry",
    "command_registry",
    "Transcript",
    "HistoryBuffer",
]
