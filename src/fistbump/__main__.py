"""fistbump CLI entry point.

Usage:
    fistbump [bump] [--config PATH] [--dry-run]
    fistbump install | uninstall
    fistbump init [--path DIR] [--position start|end] [--bracket paren|square] [--force]
    python -m fistbump [command] [options]
"""

from __future__ import annotations

import argparse
import sys

from fistbump import __version__
from fistbump.bump import run_bump
from fistbump.hook_installer import install_hook, uninstall_hook
from fistbump.init_command import init_command
from fistbump.log import log_message
from fistbump.models import BracketStyle, FistBumpError, TagPosition


def bump_command(args: argparse.Namespace) -> int:
    """Execute the bump command."""
    return run_bump(
        config_path=getattr(args, "config", None),
        dry_run=getattr(args, "dry_run", False),
    )


def install_command() -> int:
    """Install the post-commit hook in the current repository."""
    try:
        path = install_hook()
    except FistBumpError as e:
        log_message(f"Failed to install git hook. {e}", "error")
        return 1
    log_message(f"Git hook installed successfully ({path})")
    return 0


def uninstall_command() -> int:
    """Remove the post-commit hook block from the current repository."""
    try:
        removed = uninstall_hook()
    except FistBumpError as e:
        log_message(f"Failed to uninstall git hook. {e}", "error")
        return 1
    if removed:
        log_message("Git hook uninstalled successfully.")
    else:
        log_message("Git hook was not installed.", "warn")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="fistbump",
        description="fistbump — bump semantic versions from commit message keywords",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"fistbump {__version__}",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # bump subcommand
    bump_parser = subparsers.add_parser(
        "bump",
        help="Bump the version if the latest commit asks for it (default)",
    )
    bump_parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to .fistbump.yml config file",
    )
    bump_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show the bump and new commit header without changing anything",
    )

    subparsers.add_parser("install", help="Install fistbump as a git post-commit hook")
    subparsers.add_parser("uninstall", help="Remove the fistbump git post-commit hook")

    # init subcommand
    init_parser = subparsers.add_parser("init", help="Write a starter .fistbump.yml")
    init_parser.add_argument(
        "--path",
        type=str,
        default=None,
        help="Target directory (default: current directory)",
    )
    init_parser.add_argument(
        "--position",
        type=str,
        choices=[p.value for p in TagPosition],
        default=None,
        help="Where to place the version tag in the commit header",
    )
    init_parser.add_argument(
        "--bracket",
        type=str,
        choices=[b.value for b in BracketStyle],
        default=None,
        help="Bracket style of the version tag",
    )
    init_parser.add_argument(
        "--force",
        action="store_true",
        default=False,
        help="Overwrite an existing .fistbump.yml",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command in (None, "bump"):
        sys.exit(bump_command(args))
    elif args.command == "install":
        sys.exit(install_command())
    elif args.command == "uninstall":
        sys.exit(uninstall_command())
    elif args.command == "init":
        sys.exit(init_command(args))
    else:
        parser.print_help()
        sys.exit(0)


if __name__ == "__main__":  # pragma: no cover
    main()
