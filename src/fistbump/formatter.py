"""Version tag formatting for amended commit messages."""

from __future__ import annotations

from fistbump.models import BracketStyle, CommitMessage, TagPosition, TagStyle


def build_tag(version: str, bracket: BracketStyle = BracketStyle.PAREN) -> str:
    """Return the version tag, ``[v1.2.3]`` for square brackets or ``(v1.2.3)`` otherwise."""
    if bracket == BracketStyle.SQUARE:
        return f"[v{version}]"
    return f"(v{version})"


def format_new_header(
    commit: CommitMessage | str,
    version: str,
    style: TagStyle | None = None,
) -> CommitMessage:
    """Insert the version tag into the commit header.

    The tag is separated from the header by a single space and placed at the
    start unless ``style.position`` is ``end``. Body lines are returned as-is.
    ``version`` is used verbatim.
    """
    if isinstance(commit, str):
        commit = CommitMessage.from_text(commit)
    style = style or TagStyle()

    tag = build_tag(version, style.bracket)
    if style.position == TagPosition.END:
        header = f"{commit.header} {tag}"
    else:
        header = f"{tag} {commit.header}"

    return commit.with_header(header)
