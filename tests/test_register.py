"""
Tests for git_ignore.register
=============================

Tests run against a temporary directory standing in for git's exec path.
"""

import os
import subprocess
import pytest
from pathlib import Path
from unittest.mock import MagicMock

from git_ignore.errors import RegistrationError
from git_ignore.register import git_exec_path, register_subcommand


@pytest.fixture
def exec_dir(tmp_path: Path) -> Path:
    """A fake git exec path."""
    path = tmp_path / "git-core"
    path.mkdir()
    return path


@pytest.fixture
def executable(tmp_path: Path) -> Path:
    """A fake git-ignore executable."""
    path = tmp_path / "bin" / "git-ignore"
    path.parent.mkdir()
    path.write_text("#!/bin/sh\n")
    return path


@pytest.fixture
def runner(exec_dir: Path) -> MagicMock:
    """A subprocess.run stand-in answering `git --exec-path`."""
    return MagicMock(
        return_value=subprocess.CompletedProcess(
            args=["git", "--exec-path"],
            returncode=0,
            stdout=f"{exec_dir}\n",
            stderr="",
        )
    )


class TestGitExecPath:
    """Tests for git_exec_path function."""

    def test_strips_output(self, runner: MagicMock, exec_dir: Path) -> None:
        """Test that the trailing newline is removed."""
        assert git_exec_path(runner) == exec_dir

    def test_git_not_installed(self) -> None:
        """Test that a missing git raises RegistrationError."""
        runner = MagicMock(side_effect=FileNotFoundError())

        with pytest.raises(RegistrationError):
            git_exec_path(runner)

    def test_git_fails(self) -> None:
        """Test that a failing git raises RegistrationError."""
        runner = MagicMock(side_effect=subprocess.CalledProcessError(1, ["git"]))

        with pytest.raises(RegistrationError):
            git_exec_path(runner)


class TestRegisterSubcommand:
    """Tests for register_subcommand function."""

    def test_creates_symlink(
        self, runner: MagicMock, exec_dir: Path, executable: Path
    ) -> None:
        """Test that git-ignore is linked into the exec path."""
        target = register_subcommand(executable, runner=runner)

        assert target == exec_dir / "git-ignore"
        assert target.is_symlink()
        assert Path(os.readlink(target)) == executable

    def test_replaces_existing_file(
        self, runner: MagicMock, exec_dir: Path, executable: Path
    ) -> None:
        """Test that an old registration is replaced."""
        (exec_dir / "git-ignore").write_text("old")

        target = register_subcommand(executable, runner=runner)

        assert target.is_symlink()

    def test_replaces_dangling_symlink(
        self, runner: MagicMock, exec_dir: Path, executable: Path, tmp_path: Path
    ) -> None:
        """Test that a broken link from a previous install is replaced."""
        os.symlink(tmp_path / "gone", exec_dir / "git-ignore")

        target = register_subcommand(executable, runner=runner)

        assert Path(os.readlink(target)) == executable

    def test_existing_directory_is_an_error(
        self, runner: MagicMock, exec_dir: Path, executable: Path
    ) -> None:
        """Test that a directory at the target is not removed."""
        (exec_dir / "git-ignore").mkdir()

        with pytest.raises(RegistrationError) as exc_info:
            register_subcommand(executable, runner=runner)

        assert "remove it manually" in str(exc_info.value)
        assert (exec_dir / "git-ignore").is_dir()
