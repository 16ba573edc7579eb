"""
Core types for termfolio: portfolio records, provider state, transcript
types, and exceptions.
"""

from termfolio.core.datamodels import (
    LOADING,
    Certification,
    CommandRequest,
    CommandResult,
    EntryKind,
    GitHubProfile,
    Loaded,
    PersonalInfo,
    Project,
    ProviderState,
    Skill,
    TimelineEntry,
    TranscriptEntry,
    is_loaded,
)
from termfolio.core.exceptions import (
    CommandError,
    CommandNotFoundError,
    FetchError,
    ProviderError,
    TermfolioError,
)

__all__ = [
    # Records
    "Project",
    "Skill",
    "TimelineEntry",
    "Certification",
    "GitHubProfile",
    "PersonalInfo",
    # Provider state
    "Loaded",
    "LOADING",
    "ProviderState",
    "is_loaded",
    # Terminal
    "EntryKind",
    "TranscriptEntry",
    "CommandRequest",
    "CommandResult",
    # Exceptions
    "TermfolioError",
    "ProviderError",
    "FetchError",
    "CommandError",
    "CommandNotFoundError",
]
