"""Configuration management for fistbump."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

import yaml  # type: ignore

from fistbump.log import log_message
from fistbump.models import BracketStyle, FistBumpError, KeywordSet, TagPosition, TagStyle

CONFIG_FILENAME = ".fistbump.yml"
PACKAGE_JSON_KEY = "fistbump"

DEFAULT_CONFIG = {
    "patch": ["fix", "patch"],
    "minor": ["feature", "config", "minor"],
    "major": ["breaking", "major", "release"],
    "skip": ["skip", "wip"],
    "position": "start",
    "bracket": "paren",
}

_KEYWORD_GROUPS = ("patch", "minor", "major", "skip")


@dataclass
class FistBumpConfig:
    """Keyword and tag style configuration for a single run."""

    keywords: KeywordSet = field(
        default_factory=lambda: KeywordSet(
            patch=tuple(DEFAULT_CONFIG["patch"]),
            minor=tuple(DEFAULT_CONFIG["minor"]),
            major=tuple(DEFAULT_CONFIG["major"]),
            skip=tuple(DEFAULT_CONFIG["skip"]),
        )
    )
    style: TagStyle = field(default_factory=TagStyle)
    source: Path | None = None

    @classmethod
    def load(
        cls,
        config_path: str | Path | None = None,
        root: str | Path | None = None,
    ) -> FistBumpConfig:
        """Load configuration, falling back to defaults.

        Search order:
        1. Explicit ``config_path`` argument
        2. ``.fistbump.yml`` in the project root
        3. The ``fistbump`` key of ``package.json`` in the project root
        4. Built-in defaults
        """
        root_dir = Path(root) if root else Path(".")
        raw: dict[str, Any] = dict(DEFAULT_CONFIG)
        source: Path | None = None

        search_paths: list[Path] = []
        if config_path:
            search_paths.append(Path(config_path))
        search_paths.append(root_dir / CONFIG_FILENAME)

        for path in search_paths:
            if path.exists():
                with open(path, encoding="utf-8") as f:
                    try:
                        loaded = yaml.safe_load(f)
                    except yaml.YAMLError as e:
                        raise FistBumpError(f"invalid config file {path}: {e}") from e
                if loaded and isinstance(loaded, dict):
                    raw = _merge(raw, loaded)
                source = path
                break
        else:
            package_json = root_dir / "package.json"
            if package_json.exists():
                with open(package_json, encoding="utf-8") as f:
                    try:
                        loaded = json.load(f).get(PACKAGE_JSON_KEY)
                    except json.JSONDecodeError as e:
                        raise FistBumpError(f"invalid {package_json}: {e}") from e
                if loaded and isinstance(loaded, dict):
                    raw = _merge(raw, loaded)
                    source = package_json

        cfg = cls._from_raw(raw)
        cfg.source = source
        return cfg

    @classmethod
    def _from_raw(cls, raw: dict[str, Any]) -> FistBumpConfig:
        """Build config from a raw dict (merged defaults + user overrides)."""
        groups = {name: tuple(str(k) for k in raw.get(name, ())) for name in _KEYWORD_GROUPS}

        return cls(
            keywords=KeywordSet(**groups),
            style=TagStyle(
                bracket=_coerce(BracketStyle, raw.get("bracket"), BracketStyle.PAREN, "bracket"),
                position=_coerce(TagPosition, raw.get("position"), TagPosition.START, "position"),
            ),
        )


def _merge(base: dict, override: dict) -> dict:
    """Merge override into base; empty keyword lists keep the defaults."""
    result = dict(base)
    for key, value in override.items():
        if key in _KEYWORD_GROUPS:
            if isinstance(value, str):
                value = [value]
            if not value or not isinstance(value, list):
                continue
        result[key] = value
    return result


def _coerce(enum_cls: type[Enum], value: Any, default: Enum, name: str) -> Any:
    if value is None:
        return default
    try:
        return enum_cls(str(value).lower())
    except ValueError:
        choices = ", ".join(member.value for member in enum_cls)
        log_message(
            f"Unknown {name} '{value}' in config (expected one of: {choices}), using '{default.value}'",
            "warn",
        )
        return default
