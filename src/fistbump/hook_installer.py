"""Install and uninstall the fistbump git post-commit hook.

fistbump owns a marked block inside ``.git/hooks/post-commit`` so that it can
coexist with other commands already present in the hook.
"""

from __future__ import annotations

import shlex
import stat
import sys
from pathlib import Path

from fistbump import repository

HOOK_NAME = "post-commit"
SHEBANG = "#!/bin/sh"
BLOCK_START = "# >>> fistbump >>>"
BLOCK_END = "# <<< fistbump <<<"
# Runs under the installing interpreter, independent of PATH
HOOK_COMMAND = f"{shlex.quote(sys.executable)} -m fistbump bump"

_HOOK_BLOCK = f"{BLOCK_START}\n{HOOK_COMMAND}\n{BLOCK_END}\n"


def _hook_path(hooks_dir: Path | None) -> Path:
    if hooks_dir is None:
        hooks_dir = repository.git_dir() / "hooks"
    return hooks_dir / HOOK_NAME


def _strip_block(content: str) -> tuple[str, bool]:
    """Remove the fistbump block from hook content."""
    lines = content.splitlines(keepends=True)
    kept: list[str] = []
    inside = False
    found = False
    for line in lines:
        stripped = line.strip()
        if stripped == BLOCK_START:
            inside = True
            found = True
            continue
        if stripped == BLOCK_END:
            inside = False
            continue
        if not inside:
            kept.append(line)
    return "".join(kept), found


def install_hook(hooks_dir: Path | None = None) -> Path:
    """Add the fistbump block to the post-commit hook, creating the hook if needed.

    Installing twice leaves a single block.

    Returns:
        Path to the hook file.
    """
    path = _hook_path(hooks_dir)
    path.parent.mkdir(parents=True, exist_ok=True)

    content = path.read_text(encoding="utf-8") if path.exists() else f"{SHEBANG}\n"
    content, _ = _strip_block(content)
    if content and not content.endswith("\n"):
        content += "\n"
    path.write_text(content + _HOOK_BLOCK, encoding="utf-8")

    mode = path.stat().st_mode
    path.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


def uninstall_hook(hooks_dir: Path | None = None) -> bool:
    """Remove the fistbump block from the post-commit hook.

    The hook file is deleted when nothing but the shebang is left.

    Returns:
        True if a block was removed.
    """
    path = _hook_path(hooks_dir)
    if not path.exists():
        return False

    content, found = _strip_block(path.read_text(encoding="utf-8"))
    if not found:
        return False

    if content.strip() in ("", SHEBANG):
        path.unlink()
    else:
        path.write_text(content, encoding="utf-8")
    return True
