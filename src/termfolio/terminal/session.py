"""
Terminal session state: the transcript and the command-recall buffer.
"""

from __future__ import annotations

from collections import deque
from typing import Iterator, Optional

from termfolio.core.datamodels import EntryKind, TranscriptEntry


class Transcript:
    """Append-only log of what the terminal shows.

    ``clear()`` is the only operation that removes entries. With a
    ``limit`` the oldest entries are dropped once it is exceeded.
    """

    def __init__(self, limit: Optional[int] = None):
        if limit is not None and limit < 1:
            raise ValueError("transcript limit must be positive")
        self.limit = limit
        self._entries: deque[TranscriptEntry] = deque(maxlen=limit)

    def append(self, entry: TranscriptEntry) -> TranscriptEntry:
        self._entries.append(entry)
        return entry

    def add(self, kind: EntryKind, content: str) -> TranscriptEntry:
        return self.append(TranscriptEntry(kind=kind, content=content))

    def clear(self) -> None:
        self._entries.clear()

    @property
    def entries(self) -> list[TranscriptEntry]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[TranscriptEntry]:
        return iter(list(self._entries))

    def __getitem__(self, index: int) -> TranscriptEntry:
        return self._entries[index]


class HistoryBuffer:
    """Previously submitted command lines, most recent first.

    ``cursor`` is -1 when not browsing, otherwise an index into the buffer.
    Recall moves the cursor and updates ``pending``, the text that should
    appear in the input line. Recall never changes the stored lines.
    """

    def __init__(self):
        self._lines: list[str] = []
        self.cursor = -1
        self.pending = ""

    def push(self, line: str) -> None:
        """Record a submitted line and stop browsing."""
        self._lines.insert(0, line)
        self.cursor = -1
        self.pending = ""

    def recall_older(self) -> str:
        if self._lines:
            self.cursor = min(self.cursor + 1, len(self._lines) - 1)
            self.pending = self._lines[self.cursor]
        return self.pending

    def recall_newer(self) -> str:
        if self.cursor > 0:
            self.cursor -= 1
            self.pending = self._lines[self.cursor]
        elif self.cursor == 0:
            self.cursor = -1
            self.pending = ""
        return self.pending

    @property
    def lines(self) -> list[str]:
        """Stored lines, most recent first."""
        return list(self._lines)

    @property
    def browsing(self) -> bool:
        return self.cursor != -1

    def __len__(self) -> int:
        return len(self._lines)
