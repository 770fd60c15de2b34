"""Project manifest discovery and version rewriting.

Supports npm projects (``package.json``, bumped through ``npm version``)
and Python projects (``pyproject.toml``, rewritten in place).
"""

from __future__ import annotations

import json
import re
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path

from fistbump.models import BumpType, FistBumpError
from fistbump.repository import ensure_tools

MANIFEST_FILES = ("package.json", "pyproject.toml")
MAX_DEPTH = 5

_SEMVER_RE = re.compile(r"^v?(\d+)\.(\d+)\.(\d+)(-[0-9A-Za-z.-]+)?(?:\+[0-9A-Za-z.-]+)?$")
_PYPROJECT_VERSION_RE = re.compile(r"""^(version\s*=\s*)(["'])([^"'\n]+)\2""", re.MULTILINE)


def find_project_root(start: str | Path | None = None, max_depth: int = MAX_DEPTH) -> Path | None:
    """Walk up from ``start`` to the first directory holding a manifest.

    Returns None when no manifest is found within ``max_depth`` parents.
    """
    directory = Path(start or Path.cwd()).resolve()
    for _ in range(max_depth + 1):
        if any((directory / name).exists() for name in MANIFEST_FILES):
            return directory
        if directory.parent == directory:
            break
        directory = directory.parent
    return None


def _match_version(version: str) -> re.Match[str]:
    m = _SEMVER_RE.match(version.strip())
    if not m:
        raise FistBumpError(f"'{version}' is not a semantic version")
    return m


def parse_version(version: str) -> tuple[int, int, int]:
    """Extract (major, minor, patch) from a semantic version string."""
    m = _match_version(version)
    return int(m.group(1)), int(m.group(2)), int(m.group(3))


def next_version(current: str, bump_type: BumpType) -> str:
    """Return ``current`` bumped by ``bump_type``, following ``npm version``.

    A pre-release is promoted to its release when the bumped component is
    the lowest non-zero one: ``1.2.3-rc.1`` patch -> ``1.2.3``,
    ``1.3.0-rc.1`` minor -> ``1.3.0``, ``2.0.0-rc.1`` major -> ``2.0.0``.
    Build metadata is always dropped.
    """
    major, minor, patch = parse_version(current)
    prerelease = _match_version(current).group(4) is not None

    if bump_type == BumpType.MAJOR:
        if prerelease and minor == 0 and patch == 0:
            return f"{major}.0.0"
        return f"{major + 1}.0.0"
    if bump_type == BumpType.MINOR:
        if prerelease and patch == 0:
            return f"{major}.{minor}.0"
        return f"{major}.{minor + 1}.0"
    if prerelease:
        return f"{major}.{minor}.{patch}"
    return f"{major}.{minor}.{patch + 1}"


class Manifest(ABC):
    """A project file that owns the version field."""

    filename: str = ""
    lockfiles: tuple[str, ...] = ()

    def __init__(self, root: Path) -> None:
        self.root = root
        self.path = root / self.filename

    @abstractmethod
    def read_version(self) -> str:
        """Return the version currently recorded in the manifest."""
        ...  # pragma: no cover

    @abstractmethod
    def apply(self, bump_type: BumpType) -> str:
        """Bump the version on disk and return the new version."""
        ...  # pragma: no cover

    def staged_files(self) -> list[Path]:
        """Manifest plus any lockfiles that exist next to it."""
        files = [self.path]
        files.extend(self.root / name for name in self.lockfiles if (self.root / name).exists())
        return files


class PackageJsonManifest(Manifest):
    filename = "package.json"
    lockfiles = ("package-lock.json", "pnpm-lock.yaml")

    def read_version(self) -> str:
        with open(self.path, encoding="utf-8") as f:
            version = json.load(f).get("version")
        if not version:
            raise FistBumpError(f"no version field in {self.path}")
        return str(version)

    def apply(self, bump_type: BumpType) -> str:
        ensure_tools("npm")
        try:
            subprocess.run(
                ["npm", "version", bump_type.value, "--no-git-tag-version"],
                capture_output=True,
                text=True,
                check=True,
                cwd=self.root,
            )
        except subprocess.CalledProcessError as e:
            raise FistBumpError(f"npm version failed: {(e.stderr or '').strip() or e}") from e
        except FileNotFoundError as e:
            raise FistBumpError("npm is not installed or not in PATH") from e
        return self.read_version()


class PyprojectManifest(Manifest):
    filename = "pyproject.toml"
    lockfiles = ("uv.lock", "poetry.lock")

    def _read(self) -> str:
        return self.path.read_text(encoding="utf-8")

    def read_version(self) -> str:
        m = _PYPROJECT_VERSION_RE.search(self._read())
        if not m:
            raise FistBumpError(f"could not find version in {self.path}")
        return m.group(3)

    def apply(self, bump_type: BumpType) -> str:
        content = self._read()
        new_version = next_version(self.read_version(), bump_type)
        new_content = _PYPROJECT_VERSION_RE.sub(rf"\g<1>\g<2>{new_version}\g<2>", content, count=1)
        self.path.write_text(new_content, encoding="utf-8")
        return new_version


_MANIFEST_TYPES: tuple[type[Manifest], ...] = (PackageJsonManifest, PyprojectManifest)


def detect_manifest(root: Path) -> Manifest:
    """Return the manifest for ``root``, preferring package.json over pyproject.toml."""
    for manifest_cls in _MANIFEST_TYPES:
        if (root / manifest_cls.filename).exists():
            return manifest_cls(root)
    raise FistBumpError(f"no package.json or pyproject.toml found in {root}")
