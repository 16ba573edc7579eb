"""
Data models for termfolio.

Portfolio records served by the data providers, and the transcript types
produced by the terminal dispatcher.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar, Union
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


# ============================================================================
# Portfolio records
# ============================================================================

class Project(BaseModel):
    """A featured project, usually derived from a GitHub repository."""

    id: int
    title: str
    description: str
    tech_stack: list[str] = Field(default_factory=list)
    repo_url: Optional[str] = None
    demo_url: Optional[str] = None
    stars: Optional[int] = None
    language: Optional[str] = None


class Skill(BaseModel):
    id: int
    category: str
    name: str
    level: Optional[str] = None


class TimelineEntry(BaseModel):
    """An experience or education entry on the timeline."""

    id: int
    company: str
    role: str
    duration: str
    description: str
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    order: Optional[int] = None  # Explicit display order, lowest first


class Certification(BaseModel):
    id: int
    name: str
    issuer: str
    issue_date: str
    expiry_date: Optional[str] = None
    credential_id: Optional[str] = None
    credential_url: Optional[str] = None


class GitHubProfile(BaseModel):
    name: Optional[str] = None
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    html_url: str
    public_repos: int = 0
    followers: int = 0
    location: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class PersonalInfo(BaseModel):
    name: str
    title: str
    subtitle: Optional[str] = None
    bio: str
    email: str
    location: Optional[str] = None
    linkedin: Optional[str] = None
    github: Optional[str] = None


# ============================================================================
# Provider state
# ============================================================================

@dataclass(frozen=True)
class Loaded(Generic[T]):
    """Provider has resolved; items may be live, cached, or fallback data."""

    items: list[T]


class _Loading:
    """Provider has not resolved yet."""

    _instance: Optional["_Loading"] = None

    def __new__(cls) -> "_Loading":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "LOADING"

    def __bool__(self) -> bool:
        return False


LOADING = _Loading()

ProviderState = Union[Loaded[T], _Loading]


def is_loaded(state: object) -> bool:
    """Check whether a provider state carries data."""
    return isinstance(state, Loaded)


# ============================================================================
# Terminal types
# ============================================================================

class EntryKind(str, Enum):
    INPUT = "input"
    OUTPUT = "output"
    ERROR = "error"


class TranscriptEntry(BaseModel):
    """A single line of the terminal transcript. Immutable once created."""

    id: str = Field(default_factory=lambda: uuid4().hex)
    kind: EntryKind
    content: str

    model_config = ConfigDict(frozen=True)


class CommandRequest(BaseModel):
    """One parsed input line.

    ``raw`` keeps the trimmed line as typed; ``main_command`` and ``args``
    are lowercased for matching.
    """

    raw: str
    main_command: str
    args: tuple[str, ...] = ()

    model_config = ConfigDict(frozen=True)

    @classmethod
    def parse(cls, line: str) -> Optional["CommandRequest"]:
        """Parse an input line. Returns None for blank input."""
        raw = line.strip()
        if not raw:
            return None
        tokens = raw.lower().split()
        return cls(raw=raw, main_command=tokens[0], args=tuple(tokens[1:]))


class CommandResult(BaseModel):
    """Outcome of running a command handler."""

    is_error: bool = False
    payload: str

    model_config = ConfigDict(frozen=True)

    @classmethod
    def output(cls, payload: str) -> "CommandResult":
        return cls(is_error=False, payload=payload)

    @classmethod
    def error(cls, payload: str) -> "CommandResult":
        return cls(is_error=True, payload=payload)

    def to_entry(self) -> TranscriptEntry:
        kind = EntryKind.ERROR if self.is_error else EntryKind.OUTPUT
        return TranscriptEntry(kind=kind, content=self.payload)
