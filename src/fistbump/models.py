"""Data models for fistbump commit classification and tagging."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


class FistBumpError(RuntimeError):
    """Raised by the I/O glue when a bump cannot be carried out."""


class BumpType(str, Enum):
    """Semantic version component to increment."""

    PATCH = "patch"
    MINOR = "minor"
    MAJOR = "major"


class NoBumpReason(str, Enum):
    """Why a commit does not get a version bump."""

    MERGE_COMMIT = "merge commit"
    SKIP_KEYWORD = "skip keyword found"
    ALREADY_TAGGED = "already bumped"
    NO_KEYWORD_MATCH = "keyword not found"


class TagPosition(str, Enum):
    """Where the version tag goes in the commit header."""

    START = "start"
    END = "end"


class BracketStyle(str, Enum):
    """How the version tag is enclosed."""

    PAREN = "paren"
    SQUARE = "square"


@dataclass(frozen=True)
class BumpDecision:
    """Outcome of classifying a commit: a bump type or a reason not to bump."""

    bump_type: BumpType | None = None
    reason: NoBumpReason | None = None

    @classmethod
    def bump(cls, bump_type: BumpType) -> BumpDecision:
        return cls(bump_type=bump_type)

    @classmethod
    def no_bump(cls, reason: NoBumpReason) -> BumpDecision:
        return cls(reason=reason)

    @property
    def needs_bump(self) -> bool:
        return self.bump_type is not None


@dataclass(frozen=True)
class KeywordSet:
    """Keywords per bump severity plus the keywords that suppress bumping."""

    patch: tuple[str, ...] = ()
    minor: tuple[str, ...] = ()
    major: tuple[str, ...] = ()
    skip: tuple[str, ...] = ()

    def severities(self) -> Iterator[tuple[BumpType, tuple[str, ...]]]:
        """Yield keyword groups in lookup order: patch, minor, major."""
        yield BumpType.PATCH, self.patch
        yield BumpType.MINOR, self.minor
        yield BumpType.MAJOR, self.major


@dataclass(frozen=True)
class TagStyle:
    """Bracket style and insertion position of the version tag."""

    bracket: BracketStyle = BracketStyle.PAREN
    position: TagPosition = TagPosition.START


@dataclass(frozen=True)
class CommitMessage:
    """A commit message split into lines.

    Line 0 is the header; the remaining lines are the body. ``newline``
    records the line-break convention so the message can be rebuilt exactly.
    """

    lines: tuple[str, ...]
    newline: str = "\n"

    @classmethod
    def from_text(cls, text: str) -> CommitMessage:
        newline = "\r\n" if "\r\n" in text else "\n"
        return cls(lines=tuple(text.split(newline)), newline=newline)

    @property
    def header(self) -> str:
        return self.lines[0] if self.lines else ""

    @property
    def body(self) -> tuple[str, ...]:
        return self.lines[1:]

    def with_header(self, header: str) -> CommitMessage:
        """Return a copy with line 0 replaced and the body untouched."""
        return CommitMessage(lines=(header, *self.body), newline=self.newline)

    def to_text(self) -> str:
        return self.newline.join(self.lines)

    def __str__(self) -> str:
        return self.to_text()
