"""fistbump — semantic version bumps driven by commit message keywords."""

from fistbump.classifier import classify, has_bump_tag, has_keyword, is_merge_commit
from fistbump.formatter import build_tag, format_new_header
from fistbump.models import (
    BracketStyle,
    BumpDecision,
    BumpType,
    CommitMessage,
    KeywordSet,
    NoBumpReason,
    TagPosition,
    TagStyle,
)

__version__ = "0.1.0"

__all__ = [
    "BracketStyle",
    "BumpDecision",
    "BumpType",
    "CommitMessage",
    "KeywordSet",
    "NoBumpReason",
    "TagPosition",
    "TagStyle",
    "build_tag",
    "classify",
    "format_new_header",
    "has_bump_tag",
    "has_keyword",
    "is_merge_commit",
]
