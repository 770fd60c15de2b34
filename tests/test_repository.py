"""Tests for the git command wrappers."""

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from fistbump import repository
from fistbump.models import FistBumpError


class TestTools:
    def test_has_tool(self):
        with patch("fistbump.repository.shutil.which", return_value="/usr/bin/git"):
            assert repository.has_tool("git")
        with patch("fistbump.repository.shutil.which", return_value=None):
            assert not repository.has_tool("git")

    def test_ensure_tools_raises_for_missing(self):
        with (
            patch("fistbump.repository.shutil.which", side_effect=lambda name: None if name == "npm" else name),
            pytest.raises(FistBumpError, match="npm is not installed"),
        ):
            repository.ensure_tools("git", "npm")


class TestGetLatestCommit:
    def test_returns_message_without_trailing_newlines(self):
        with patch("fistbump.repository.subprocess.run") as mock_run:
            mock_run.return_value = MagicMock(stdout="fix: bug\n\nbody\n\n")
            assert repository.get_latest_commit() == "fix: bug\n\nbody"
            cmd = mock_run.call_args[0][0]
            assert cmd == ["git", "log", "-1", "--pretty=%B"]

    def test_git_error_raises(self):
        with (
            patch(
                "fistbump.repository.subprocess.run",
                side_effect=subprocess.CalledProcessError(128, "git", stderr="not a git repository"),
            ),
            pytest.raises(FistBumpError, match="not a git repository"),
        ):
            repository.get_latest_commit()

    def test_git_not_found_raises(self):
        with (
            patch("fistbump.repository.subprocess.run", side_effect=FileNotFoundError),
            pytest.raises(FistBumpError, match="git is not installed"),
        ):
            repository.get_latest_commit()


class TestStageAndAmend:
    def test_stage_adds_paths(self):
        with patch("fistbump.repository.subprocess.run") as mock_run:
            repository.stage([Path("package.json"), Path("package-lock.json")])
            cmd = mock_run.call_args[0][0]
            assert cmd == ["git", "add", "--", "package.json", "package-lock.json"]

    def test_stage_nothing(self):
        with patch("fistbump.repository.subprocess.run") as mock_run:
            repository.stage([])
            mock_run.assert_not_called()

    def test_amend_commit(self):
        with patch("fistbump.repository.subprocess.run") as mock_run:
            repository.amend_commit("(v1.0.1) fix: bug\n\nbody")
            cmd = mock_run.call_args[0][0]
            assert cmd[:3] == ["git", "commit", "--amend"]
            assert "--no-verify" in cmd
            assert cmd[-2:] == ["-m", "(v1.0.1) fix: bug\n\nbody"]


class TestGitDir:
    def test_relative_git_dir_resolved_against_cwd(self, tmp_path):
        with patch("fistbump.repository.subprocess.run") as mock_run:
            mock_run.return_value = MagicMock(stdout=".git\n")
            assert repository.git_dir(cwd=tmp_path) == (tmp_path / ".git").resolve()

    def test_absolute_git_dir(self, tmp_path):
        with patch("fistbump.repository.subprocess.run") as mock_run:
            mock_run.return_value = MagicMock(stdout=f"{tmp_path}/.git\n")
            assert repository.git_dir() == (tmp_path / ".git").resolve()
