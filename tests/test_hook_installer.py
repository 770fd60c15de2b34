"""Tests for post-commit hook installation."""

import os
import shlex
import sys
from unittest.mock import patch

from fistbump.hook_installer import BLOCK_END, BLOCK_START, HOOK_COMMAND, install_hook, uninstall_hook


class TestInstallHook:
    def test_creates_executable_hook(self, tmp_path):
        path = install_hook(tmp_path)
        assert path == tmp_path / "post-commit"
        content = path.read_text()
        assert content.startswith("#!/bin/sh\n")
        assert f"{BLOCK_START}\n{HOOK_COMMAND}\n{BLOCK_END}\n" in content
        assert os.access(path, os.X_OK)

    def test_block_runs_installing_interpreter(self, tmp_path):
        content = install_hook(tmp_path).read_text()
        assert HOOK_COMMAND == f"{shlex.quote(sys.executable)} -m fistbump bump"
        assert f"{BLOCK_START}\n{HOOK_COMMAND}\n{BLOCK_END}\n" in content

    def test_install_twice_keeps_one_block(self, tmp_path):
        install_hook(tmp_path)
        install_hook(tmp_path)
        assert (tmp_path / "post-commit").read_text().count(BLOCK_START) == 1

    def test_preserves_existing_hook(self, tmp_path):
        hook = tmp_path / "post-commit"
        hook.write_text("#!/bin/sh\necho 'committed'")
        install_hook(tmp_path)
        content = hook.read_text()
        assert content.startswith("#!/bin/sh\necho 'committed'\n")
        assert HOOK_COMMAND in content

    def test_creates_hooks_directory(self, tmp_path):
        path = install_hook(tmp_path / "hooks")
        assert path.exists()

    def test_defaults_to_repository_hooks_dir(self, tmp_path):
        with patch("fistbump.hook_installer.repository.git_dir", return_value=tmp_path):
            path = install_hook()
        assert path == tmp_path / "hooks" / "post-commit"


class TestUninstallHook:
    def test_removes_hook_file_when_only_block(self, tmp_path):
        install_hook(tmp_path)
        assert uninstall_hook(tmp_path)
        assert not (tmp_path / "post-commit").exists()

    def test_keeps_other_commands(self, tmp_path):
        hook = tmp_path / "post-commit"
        hook.write_text("#!/bin/sh\necho 'committed'\n")
        install_hook(tmp_path)
        assert uninstall_hook(tmp_path)
        assert hook.read_text() == "#!/bin/sh\necho 'committed'\n"

    def test_not_installed(self, tmp_path):
        assert not uninstall_hook(tmp_path)
        (tmp_path / "post-commit").write_text("#!/bin/sh\necho hi\n")
        assert not uninstall_hook(tmp_path)
        assert (tmp_path / "post-commit").exists()
