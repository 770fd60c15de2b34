"""Shared test fixtures for fistbump tests."""

import pytest

from fistbump.config import FistBumpConfig

PYPROJECT = '[project]\nname = "demo"\nversion = "0.1.7"\n'


@pytest.fixture
def keywords():
    """Default keyword set."""
    return FistBumpConfig().keywords


@pytest.fixture
def pyproject_root(tmp_path):
    """A project directory holding only a pyproject.toml at 0.1.7."""
    (tmp_path / "pyproject.toml").write_text(PYPROJECT, encoding="utf-8")
    return tmp_path
