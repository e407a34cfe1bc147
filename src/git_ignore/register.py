"""
git_ignore.register - Git Subcommand Registration
=================================================

git runs ``git-<name>`` executables found in its exec path as ``git <name>``.
Registering symlinks the ``git-ignore`` executable into that directory so
``git ignore python`` works like ``git-ignore python``.

    $ sudo git-ignore --register
"""

from __future__ import annotations

import os
import subprocess
from pathlib import Path
from typing import TYPE_CHECKING

from git_ignore.errors import RegistrationError


if TYPE_CHECKING:
    from collections.abc import Callable


SUBCOMMAND_NAME = "git-ignore"


def git_exec_path(
    runner: Callable[..., subprocess.CompletedProcess[str]] = subprocess.run,
) -> Path:
    """
    Ask git for the directory holding its subcommand executables.

    Raises
    ------
    RegistrationError
        If git is missing or ``git --exec-path`` fails.
    """
    try:
        result = runner(
            ["git", "--exec-path"],
            check=True,
            capture_output=True,
            text=True,
        )
    except FileNotFoundError as e:
        raise RegistrationError(
            "Failed to register git-ignore command.\ngit is not installed or not on PATH."
        ) from e
    except subprocess.CalledProcessError as e:
        raise RegistrationError(
            f"Failed to register git-ignore command.\n`git --exec-path` exited with {e.returncode}."
        ) from e

    exec_path = result.stdout.strip()
    if not exec_path:
        raise RegistrationError(
            "Failed to register git-ignore command.\n`git --exec-path` printed nothing."
        )
    return Path(exec_path)


def register_subcommand(
    executable: Path,
    *,
    runner: Callable[..., subprocess.CompletedProcess[str]] = subprocess.run,
) -> Path:
    """
    Symlink ``executable`` into git's exec path as ``git-ignore``.

    An existing file or symlink at the target is replaced. An existing
    directory is left alone and reported.

    Parameters
    ----------
    executable : Path
        The ``git-ignore`` executable to link to.

    runner : Callable
        ``subprocess.run`` compatible callable, injectable for tests.

    Returns
    -------
    Path
        The created symlink.

    Raises
    ------
    RegistrationError
        If the exec path cannot be determined, the target is a directory, or
        the filesystem refuses the change.
    """
    target = git_exec_path(runner) / SUBCOMMAND_NAME

    if target.is_symlink() or target.is_file():
        try:
            target.unlink()
        except PermissionError as e:
            raise RegistrationError(
                "Failed to register git-ignore command.\n"
                "Please run this command as root user.\n"
                "Example:\n"
                "    $ sudo git-ignore --register"
            ) from e
        except OSError as e:
            raise RegistrationError(f"Failed to remove {target}: {e}") from e
    elif target.exists():
        raise RegistrationError(
            "Failed to register git-ignore command.\n"
            f"{target} already exists.\n"
            "Please remove it manually to register the command."
        )

    try:
        os.symlink(executable, target)
    except PermissionError as e:
        raise RegistrationError(
            "Failed to register git-ignore command.\n"
            "Please run this command as root user.\n"
            "Example:\n"
            "    $ sudo git-ignore --register"
        ) from e
    except OSError as e:
        raise RegistrationError(f"Failed to register git-ignore command.\n{e}") from e

    return target
