"""Bump orchestrator — classify the latest commit, bump, stage, and amend."""

from __future__ import annotations

from pathlib import Path

from fistbump import repository
from fistbump.classifier import classify
from fistbump.config import FistBumpConfig
from fistbump.formatter import format_new_header
from fistbump.log import log_message
from fistbump.manifest import detect_manifest, find_project_root, next_version
from fistbump.models import CommitMessage, FistBumpError


def run_bump(config_path: str | Path | None = None, dry_run: bool = False) -> int:
    """Bump the project version if the latest commit asks for it.

    Args:
        config_path: Optional explicit path to a ``.fistbump.yml`` file.
        dry_run: Report what would happen without touching files or git.

    Returns:
        0 when the commit was bumped (or would be, in dry-run mode),
        1 when no bump is needed or something failed.
    """
    root = find_project_root() or Path.cwd()

    try:
        config = FistBumpConfig.load(config_path, root=root)
        repository.ensure_tools("git")

        commit = CommitMessage.from_text(repository.get_latest_commit(cwd=root))
        decision = classify(commit, config.keywords)
        if decision.bump_type is None:
            reason = decision.reason.value if decision.reason else "unknown"
            log_message(f"Bump not needed ({reason})", "error")
            return 1

        manifest = detect_manifest(root)

        if dry_run:
            version = next_version(manifest.read_version(), decision.bump_type)
            new_commit = format_new_header(commit, version, config.style)
            log_message(f"Would bump {decision.bump_type.value} to {version}: {new_commit.header}")
            return 0

        version = manifest.apply(decision.bump_type)
        repository.stage(manifest.staged_files(), cwd=root)

        new_commit = format_new_header(commit, version, config.style)
        repository.amend_commit(new_commit.to_text(), cwd=root)

    except FistBumpError as e:
        log_message(str(e) or "An error occurred", "error")
        return 1

    log_message(f"Bumped version to {version}")
    return 0
