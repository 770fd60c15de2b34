"""Commit message classifier.

Decides from the commit header whether a version bump is needed and which
component to bump. Recognized keyword forms, anchored at the start of the
trimmed header and matched case-insensitively:

    fix: correct rounding          keyword followed by a colon
    [fix] correct rounding         keyword in square brackets
    [ fix ]: correct rounding      brackets, inner whitespace, optional colon
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from functools import lru_cache

from fistbump.models import BumpDecision, CommitMessage, KeywordSet, NoBumpReason

# [1.0.0], [v1.0.0], (1.0.0), (v1.0.0) -- exactly three numeric components
_BUMP_TAG_RE = re.compile(r"\[[vV]?\d+\.\d+\.\d+\]|\([vV]?\d+\.\d+\.\d+\)")

_MERGE_RE = re.compile(r"^Merge")


@lru_cache(maxsize=256)
def _keyword_pattern(keyword: str) -> re.Pattern[str]:
    kw = re.escape(keyword)
    return re.compile(rf"^(?:\[\s*{kw}\s*\]|{kw}\s*:)", re.IGNORECASE)


def has_keyword(keywords: Iterable[str], text: str) -> bool:
    """Return True if ``text`` starts with any of ``keywords`` in a bump form."""
    trimmed = text.strip()
    if not trimmed:
        return False

    for keyword in keywords:
        keyword = keyword.strip()
        if not keyword:
            continue
        if _keyword_pattern(keyword).match(trimmed):
            return True
    return False


def has_bump_tag(text: str) -> bool:
    """Return True if ``text`` already carries a bracketed or parenthesized version tag."""
    return _BUMP_TAG_RE.search(text) is not None


def is_merge_commit(text: str) -> bool:
    return _MERGE_RE.match(text) is not None


def classify(
    commit: CommitMessage | str,
    keywords: KeywordSet,
    skip_keywords: Iterable[str] | None = None,
) -> BumpDecision:
    """Classify a commit message into a bump type or a no-bump reason.

    Only the header is inspected. Checks run in a fixed order: merge commit,
    skip keyword, existing version tag, then the patch, minor and major
    keyword groups. The first matching group wins.

    Args:
        commit: The commit message, parsed or raw.
        keywords: Keyword groups for each severity.
        skip_keywords: Keywords that suppress bumping. Defaults to
            ``keywords.skip``.

    Returns:
        The bump decision for this commit.
    """
    if isinstance(commit, str):
        commit = CommitMessage.from_text(commit)
    header = commit.header
    skip = keywords.skip if skip_keywords is None else tuple(skip_keywords)

    if is_merge_commit(header):
        return BumpDecision.no_bump(NoBumpReason.MERGE_COMMIT)

    if has_keyword(skip, header):
        return BumpDecision.no_bump(NoBumpReason.SKIP_KEYWORD)

    if has_bump_tag(header):
        return BumpDecision.no_bump(NoBumpReason.ALREADY_TAGGED)

    for bump_type, group in keywords.severities():
        if has_keyword(group, header):
            return BumpDecision.bump(bump_type)

    return BumpDecision.no_bump(NoBumpReason.NO_KEYWORD_MATCH)
