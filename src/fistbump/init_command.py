"""fistbump init command — write a starter .fistbump.yml."""

from __future__ import annotations

from pathlib import Path

from fistbump.config import DEFAULT_CONFIG, CONFIG_FILENAME


def _yaml_list(values: list[str]) -> str:
    return "[" + ", ".join(values) + "]"


def _build_fistbump_yml(position: str, bracket: str) -> str:
    return f"""\
# .fistbump.yml — fistbump configuration
#
# A commit header triggers a bump when it starts with a keyword followed by
# a colon ("fix: ...") or wrapped in square brackets ("[fix] ...").
# Matching is case-insensitive. Groups are checked in the order
# patch, minor, major; the first match wins.

patch: {_yaml_list(DEFAULT_CONFIG["patch"])}
minor: {_yaml_list(DEFAULT_CONFIG["minor"])}
major: {_yaml_list(DEFAULT_CONFIG["major"])}

# Commits starting with these keywords are never bumped
skip:  {_yaml_list(DEFAULT_CONFIG["skip"])}

# Where the version tag goes in the amended header: start | end
position: {position}

# Tag brackets: paren -> (v1.2.3), square -> [v1.2.3]
bracket: {bracket}
"""


def init_command(args: object) -> int:
    """Execute the init command.

    Args:
        args: Parsed CLI arguments with optional ``path``, ``position``,
              ``bracket`` and ``force`` attributes.

    Returns:
        0 on success, 1 if the file exists and ``force`` is not set.
    """
    root = Path(getattr(args, "path", None) or ".").resolve()
    position = getattr(args, "position", None) or DEFAULT_CONFIG["position"]
    bracket = getattr(args, "bracket", None) or DEFAULT_CONFIG["bracket"]
    force = getattr(args, "force", False)

    target = root / CONFIG_FILENAME
    if target.exists() and not force:
        print(f"  Skipped: {target} already exists (use --force to overwrite)")
        return 1

    root.mkdir(parents=True, exist_ok=True)
    target.write_text(_build_fistbump_yml(position, bracket), encoding="utf-8")
    print(f"  Creating {target} ... done")
    print()
    print("  Next steps:")
    print("    1. Review .fistbump.yml and adjust the keywords")
    print("    2. fistbump install   (adds the post-commit hook)")
    print()
    return 0
