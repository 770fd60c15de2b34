"""Git command wrappers used by the bump orchestrator and hook installer."""

from __future__ import annotations

import shutil
import subprocess
from collections.abc import Iterable
from pathlib import Path

from fistbump.models import FistBumpError


def has_tool(name: str) -> bool:
    """Return True if an executable called ``name`` is on PATH."""
    return shutil.which(name) is not None


def ensure_tools(*names: str) -> None:
    """Raise FistBumpError for the first tool that is not installed."""
    for name in names:
        if not has_tool(name):
            raise FistBumpError(f"{name} is not installed or not in PATH")


def _git(*args: str, cwd: Path | None = None) -> str:
    """Run a git command and return its stdout.

    Raises:
        FistBumpError: If git is missing or exits non-zero.
    """
    cmd = ["git", *args]
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, check=True, cwd=cwd)
    except subprocess.CalledProcessError as e:
        stderr = (e.stderr or "").strip()
        raise FistBumpError(f"'{' '.join(cmd[:3])}' failed: {stderr or e}") from e
    except FileNotFoundError as e:
        raise FistBumpError("git is not installed or not in PATH") from e
    return result.stdout


def get_latest_commit(cwd: Path | None = None) -> str:
    """Return the full message of the most recent commit."""
    return _git("log", "-1", "--pretty=%B", cwd=cwd).rstrip("\r\n")


def stage(paths: Iterable[Path], cwd: Path | None = None) -> None:
    files = [str(p) for p in paths]
    if files:
        _git("add", "--", *files, cwd=cwd)


def amend_commit(message: str, cwd: Path | None = None) -> None:
    """Amend HEAD with ``message`` and whatever is staged.

    ``--no-verify`` skips pre-commit and commit-msg hooks; post-commit still
    runs again, so the message must already carry its version tag.
    """
    _git("commit", "--amend", "--no-verify", "-q", "-m", message, cwd=cwd)


def git_dir(cwd: Path | None = None) -> Path:
    """Return the repository's .git directory as an absolute path."""
    out = _git("rev-parse", "--git-dir", cwd=cwd).strip()
    path = Path(out)
    if not path.is_absolute():
        path = (cwd or Path.cwd()) / path
    return path.resolve()
