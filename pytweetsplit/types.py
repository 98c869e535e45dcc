from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal


@dataclass(frozen=True)
class Word:
    """A run of non-separator characters (offsets refer to clean_text)."""

    text: str
    start: int
    # Offset just past the word and one trailing separator, if present.
    next_pos: int


@dataclass(frozen=True)
class Chunk:
    """A post body before its prefix is applied."""

    text: str
    char_start: int
    char_end: int
    # True when the chunk ends inside a word (mid-word break).
    breaks_word: bool = False


@dataclass(frozen=True)
class Post:
    """A finished post with stable offsets into the normalized text."""

    index: int
    total: int
    body: str
    text: str
    char_start: int
    char_end: int
    breaks_word: bool = False

    @property
    def prefix(self) -> str:
        return self.text[: len(self.text) - len(self.body)]


@dataclass(frozen=True)
class TraceEvent:
    stage: Literal["parse", "split", "prefix"]
    name: str
    ms: float
    details: dict[str, Any] = field(default_factory=dict)


@dataclass
class Trace:
    """Structured debugging output."""

    events: list[TraceEvent] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    # Optional snapshots
    clean_text: str | None = None
    chunks: list[Chunk] | None = None


@dataclass
class ThreadResult:
    posts: list[Post]
    clean_text: str
    trace: Trace | None = None

    @property
    def texts(self) -> list[str]:
        return [post.text for post in self.posts]

    def __len__(self) -> int:
        return len(self.posts)
